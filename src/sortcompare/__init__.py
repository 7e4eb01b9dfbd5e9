"""
sortcompare — deterministic ordering of mixed-kind values.

Core features:
- One comparator for numbers, strings, booleans, dates, lists, dicts, None and UNDEFINED
- Fixed cross-kind precedence that direction never inverts
- Pluggable kind predicates and comparers, custom kind order
- Deep sort: nested lists are ordered before the list that contains them
- CLI for sorting JSON documents
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("sortcompare")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from sortcompare.core import (
    Comparator, CompareOptions, Direction, Kind, Sorter, UNDEFINED,
    TYPE_CHECKERS, TYPE_COMPARERS, TYPE_ORDER, compare, sort_deep)
from sortcompare.utils.convert_utils import ConvertUtils

__all__ = [
    "compare",
    "sort_deep",
    "Comparator",
    "CompareOptions",
    "Direction",
    "Kind",
    "Sorter",
    "UNDEFINED",
    "TYPE_ORDER",
    "TYPE_CHECKERS",
    "TYPE_COMPARERS",
    "ConvertUtils",
    "__version__",
]
