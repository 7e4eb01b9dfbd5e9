"""
Comparison core — kind table, per-kind comparers, comparator factory and deep sort.

This package contains everything needed to order mixed-kind values:
- TYPE_ORDER / TYPE_CHECKERS: default kind precedence and kind predicates
- TYPE_COMPARERS: per-kind comparison rules (number, string, boolean, date, array, object)
- CompareOptions: validated, immutable comparator configuration
- Comparator / compare(): the generic comparator and its factory
- Sorter / sort_deep(): in-place, depth-first sorting of nested lists

All components are pure Python with no I/O, suitable for library and CLI usage.
"""

from .models import Direction, Kind, Undefined, UNDEFINED
from .kinds import TYPE_ORDER, TYPE_CHECKERS
from .comparers import TYPE_COMPARERS
from .options import CompareOptions, DEFAULT_IGNORE_DIRECTION_OF_TYPES
from .comparator import Comparator, KindRule, compare
from .sorter import Sorter, sort_deep

__all__ = [
    "Direction",
    "Kind",
    "Undefined",
    "UNDEFINED",
    "TYPE_ORDER",
    "TYPE_CHECKERS",
    "TYPE_COMPARERS",
    "DEFAULT_IGNORE_DIRECTION_OF_TYPES",
    "CompareOptions",
    "Comparator",
    "KindRule",
    "compare",
    "Sorter",
    "sort_deep",
]
