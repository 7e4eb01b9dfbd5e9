"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import datetime
import json
import re
from decimal import Decimal
from typing import Any, Optional

from sortcompare.core.models import Undefined

_ISO_DATE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_ISO_DATETIME = re.compile(
    r'^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2}(\.(\d{3}|\d{6}))?)?(Z|[+-]\d{2}:\d{2})?$'
)


class ConvertUtils:
    @staticmethod
    def text_to_date(text: str) -> Optional[datetime.date]:
        """
        Parse an ISO-8601 date ('2019-01-01') or datetime
        ('2019-01-01T10:30:00', '2019-01-01 10:30:00.250+02:00', trailing 'Z').
        Returns None when text is not in one of those forms.
        """
        text = text.strip()
        try:
            if _ISO_DATE.match(text):
                return datetime.date.fromisoformat(text)
            if _ISO_DATETIME.match(text):
                if text.endswith("Z"):
                    text = text[:-1] + "+00:00"
                return datetime.datetime.fromisoformat(text)
        except ValueError:
            # Right shape, impossible value (e.g. month 13)
            return None
        return None

    @staticmethod
    def parse_dates(value: Any) -> Any:
        """
        Return a copy of a decoded JSON value in which every ISO-8601 string
        is replaced by a date/datetime. Other values are kept as they are.
        """
        if isinstance(value, str):
            parsed = ConvertUtils.text_to_date(value)
            return value if parsed is None else parsed
        if isinstance(value, list):
            return [ConvertUtils.parse_dates(item) for item in value]
        if isinstance(value, dict):
            return {key: ConvertUtils.parse_dates(item) for key, item in value.items()}
        return value

    @staticmethod
    def json_default(obj: Any) -> Any:
        """`default=` hook for json.dumps covering the non-JSON kinds."""
        if isinstance(obj, (datetime.date, datetime.time)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, Undefined):
            return None
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def to_json(value: Any, indent: Optional[int] = None) -> str:
        return json.dumps(value, default=ConvertUtils.json_default, indent=indent, ensure_ascii=False)
