"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
In-place sorting of (possibly nested) lists with a two-argument comparator.
"""
import logging
from collections.abc import MutableSequence
from functools import cmp_to_key
from typing import Any, Callable, Optional

from sortcompare.core.comparator import compare

logger = logging.getLogger(__name__)

CompareFn = Callable[[Any, Any], int]


class Sorter:
    """
    Sorts sequences in place and returns them for chaining.
    Deep sorting is depth-first: every nested list is ordered before the
    list containing it, so array comparisons see canonical children.
    Records, scalars and tuples inside the sequence are left as they are.
    """

    @staticmethod
    def sort(sequence: MutableSequence, compare_fn: Optional[CompareFn] = None) -> MutableSequence:
        if compare_fn is None:
            compare_fn = compare()

        key_func = cmp_to_key(compare_fn)
        if isinstance(sequence, list):
            sequence.sort(key=key_func)
        else:
            sequence[:] = sorted(sequence, key=key_func)
        return sequence

    @staticmethod
    def sort_deep(sequence: MutableSequence, compare_fn: Optional[CompareFn] = None) -> MutableSequence:
        if compare_fn is None:
            compare_fn = compare()

        nested = Sorter._sort_children(sequence, compare_fn)
        Sorter.sort(sequence, compare_fn)
        logger.debug(f"Deep sort finished: {len(sequence)} top-level items, {nested} nested lists")
        return sequence

    @staticmethod
    def _sort_children(sequence: MutableSequence, compare_fn: CompareFn) -> int:
        """Post-order pass over nested lists. Returns how many were sorted."""
        count = 0
        for item in sequence:
            # list is the only mutable array kind; bytearray and UserList stay as they are
            if isinstance(item, list):
                count += Sorter._sort_children(item, compare_fn) + 1
                Sorter.sort(item, compare_fn)
        return count


sort_deep = Sorter.sort_deep
