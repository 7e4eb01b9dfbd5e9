"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/kinds.py
Type-classification table: default kind precedence and one predicate per kind.
"""
import datetime
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict

from sortcompare.core.models import Kind, UNDEFINED, TypeChecker


def is_number(value: Any) -> bool:
    # bool is an int subclass but has its own kind
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, datetime.date)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


# Decides the order of different kinds
TYPE_ORDER = (
    Kind.NUMBER,
    Kind.STRING,
    Kind.BOOLEAN,
    Kind.DATE,
    Kind.ARRAY,
    Kind.OBJECT,
    Kind.NULL,
    Kind.UNDEFINED,
)

TYPE_CHECKERS: Dict[str, TypeChecker] = {
    Kind.NUMBER: is_number,
    Kind.STRING: is_string,
    Kind.BOOLEAN: is_boolean,
    Kind.DATE: is_date,
    Kind.ARRAY: is_array,
    Kind.OBJECT: is_record,
    Kind.NULL: is_null,
    Kind.UNDEFINED: is_undefined,
}
