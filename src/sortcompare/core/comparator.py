"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Generic comparator over mixed-kind values.
Cross-kind order comes from type_order and ignores direction; values of the
same kind are compared by that kind's comparer, inverted for 'desc' unless
the kind is direction-exempt.
"""
import logging
from dataclasses import replace
from functools import cmp_to_key
from typing import Any, List, NamedTuple, Optional

from sortcompare.core.comparers import sign
from sortcompare.core.models import Direction, TypeChecker, TypeComparer
from sortcompare.core.options import CompareOptions

logger = logging.getLogger(__name__)


class KindRule(NamedTuple):
    kind: str
    checker: TypeChecker
    comparer: Optional[TypeComparer]
    follows_direction: bool


class Comparator:
    """
    Callable two-argument comparator returning -1, 0 or 1.
    Stateless after construction, so one instance can serve several sorts at once.
    """

    def __init__(self, options: CompareOptions):
        self.options = options
        self._descending = options.direction is Direction.DESC
        self._rules: List[KindRule] = [
            KindRule(
                kind=kind,
                checker=options.type_checkers[kind],
                comparer=options.type_comparers.get(kind),
                follows_direction=kind not in options.ignore_direction_of_types,
            )
            for kind in options.type_order
        ]
        logger.debug(
            f"Comparator built: direction={options.direction.value}, "
            f"type_order={list(options.type_order)}, "
            f"direction-exempt={sorted(options.ignore_direction_of_types)}"
        )
        self._ascending = (
            Comparator(replace(options, direction=Direction.ASC)) if self._descending else self
        )

    @property
    def direction(self) -> Direction:
        return self.options.direction

    @property
    def ascending(self) -> "Comparator":
        """Same kinds and rules in ascending order; self when already ascending."""
        return self._ascending

    def kind_index(self, value: Any) -> int:
        """Index of value's kind in type_order; len(type_order) when no kind matches."""
        for index, rule in enumerate(self._rules):
            if rule.checker(value):
                return index
        return len(self._rules)

    def kind_of(self, value: Any) -> Optional[str]:
        """Name of value's kind, or None for values no checker recognises."""
        index = self.kind_index(value)
        if index == len(self._rules):
            return None
        return self._rules[index].kind

    def __call__(self, a: Any, b: Any) -> int:
        index_a = self.kind_index(a)
        index_b = self.kind_index(b)
        if index_a != index_b:
            return -1 if index_a < index_b else 1

        # Unrecognised values are all equal to each other
        if index_a == len(self._rules):
            return 0

        rule = self._rules[index_a]
        if rule.comparer is None:
            return 0

        result = sign(rule.comparer(a, b, self))

        if rule.follows_direction and self._descending:
            return -result
        return result

    def as_key(self):
        """Key function for sorted() / list.sort(key=...)."""
        return cmp_to_key(self)

    def __repr__(self):
        return f"<Comparator direction={self.direction.value}, kinds={len(self._rules)}>"


def compare(config=None) -> Comparator:
    """
    Build a comparator.

    config may be None (ascending defaults), a direction ('asc' / 'desc'),
    a mapping of CompareOptions field names, or a CompareOptions instance.
    Raises ValueError for a malformed configuration.
    """
    return Comparator(CompareOptions.from_config(config))
