"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparers.py
Per-kind comparison functions. Every comparer takes (a, b, generic_compare)
so that composite kinds can recurse through the full comparator.
"""
import datetime
from decimal import InvalidOperation
from functools import lru_cache
from itertools import zip_longest
from collections.abc import Mapping, Sequence
from typing import Any, Dict

from pyuca import Collator

from sortcompare.core.models import Kind, UNDEFINED, GenericCompare, TypeComparer

_EPOCH = datetime.datetime(1970, 1, 1)


def sign(value) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def number_compare(a: Any, b: Any, generic_compare: GenericCompare = None) -> int:
    # NaN fails both tests, so it compares equal to anything
    try:
        if a < b:
            return -1
        elif a > b:
            return 1
    except InvalidOperation:
        # Decimal NaN signals on ordering instead of failing quietly
        pass
    return 0


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


@lru_cache(maxsize=8192)
def collation_key(text: str) -> tuple:
    """Unicode Collation Algorithm sort key of text (default DUCET table)."""
    return _collator().sort_key(text)


def string_compare(a: str, b: str, generic_compare: GenericCompare = None) -> int:
    key_a = collation_key(a)
    key_b = collation_key(b)
    if key_a < key_b:
        return -1
    elif key_a > key_b:
        return 1
    return 0


def _instant(value: datetime.date) -> datetime.timedelta:
    """Offset of value from the Unix epoch. Naive datetimes are read as UTC."""
    if isinstance(value, datetime.datetime):
        if value.utcoffset() is not None:
            value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        else:
            value = value.replace(tzinfo=None)
        return value - _EPOCH
    return datetime.datetime.combine(value, datetime.time()) - _EPOCH


def date_compare(a: datetime.date, b: datetime.date, generic_compare: GenericCompare = None) -> int:
    return number_compare(_instant(a), _instant(b))


def array_compare(a: Sequence, b: Sequence, generic_compare: GenericCompare) -> int:
    """
    Element-wise comparison. Positions past the end of the shorter array are
    UNDEFINED, which sorts after every other kind by default, so a matching
    prefix sorts after the longer array.
    """
    for item_a, item_b in zip_longest(a, b, fillvalue=UNDEFINED):
        result = generic_compare(item_a, item_b)
        if result != 0:
            return result
    return 0


def record_score(record: Mapping, other: Mapping, generic_compare: GenericCompare) -> int:
    """
    +1 for every key of record whose value compares greater than other's value
    under the same key, -1 for every one that compares less.
    """
    score = 0
    for key, value in record.items():
        result = generic_compare(value, other.get(key, UNDEFINED))
        if result < 0:
            score -= 1
        elif result > 0:
            score += 1
    return score


def record_compare(a: Mapping, b: Mapping, generic_compare: GenericCompare) -> int:
    """
    Records have no natural order, so the one whose fields win more of the
    field-by-field comparisons is the greater. Not transitive when key sets differ.
    Fields are scored in ascending order, so a descending comparator inverts
    the record result exactly once.
    """
    generic_compare = getattr(generic_compare, "ascending", generic_compare)
    return sign(record_score(a, b, generic_compare) - record_score(b, a, generic_compare))


TYPE_COMPARERS: Dict[str, TypeComparer] = {
    Kind.NUMBER: number_compare,
    Kind.STRING: string_compare,
    Kind.BOOLEAN: number_compare,
    Kind.DATE: date_compare,
    Kind.ARRAY: array_compare,
    Kind.OBJECT: record_compare,
    # null and undefined have no comparer: two nulls are always equal
}
