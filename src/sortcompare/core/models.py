"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Value kinds, sort direction and the absent-value marker shared by the core.
"""

from enum import Enum
from typing import Any, Callable


# =============================
# Enums
# =============================

class Direction(str, Enum):
    """
    Sort direction applied to comparisons inside a single kind.
    Ordering between different kinds is never affected by direction.
    """
    ASC = "asc"
    DESC = "desc"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text."""
        mapping = {
            Direction.ASC: "Ascending",
            Direction.DESC: "Descending",
        }
        return mapping.get(self, self.value)

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accepts a Direction or its string value ('asc' / 'desc')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Invalid direction: {value!r}. Valid options: {', '.join(d.value for d in cls)}"
        )


class Kind:
    """Names of the built-in value kinds, in their default precedence."""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    UNDEFINED = "undefined"

    @classmethod
    def get_all(cls):
        return [cls.NUMBER, cls.STRING, cls.BOOLEAN, cls.DATE,
                cls.ARRAY, cls.OBJECT, cls.NULL, cls.UNDEFINED]


# ======================
#  Absent-value marker
# ======================

class Undefined:
    """
    Marker for a missing value: an array position past its end or a key that
    a record does not have. Distinct from None, which is the 'null' kind.
    Only one instance exists; copies and unpickled values are that instance.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Undefined, ())


UNDEFINED = Undefined()


# Type aliases used across the core
TypeChecker = Callable[[Any], bool]
GenericCompare = Callable[[Any, Any], int]
TypeComparer = Callable[[Any, Any, GenericCompare], int]
