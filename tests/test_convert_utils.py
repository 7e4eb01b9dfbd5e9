"""
Tests for JSON conversion utilities used by the CLI.
"""
import json
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from sortcompare import UNDEFINED
from sortcompare.utils.convert_utils import ConvertUtils


class TestTextToDate:
    """Conversion of ISO-8601 strings to date/datetime values."""

    def test_plain_date(self):
        assert ConvertUtils.text_to_date("2019-01-01") == date(2019, 1, 1)

    def test_datetime_variants(self):
        assert ConvertUtils.text_to_date("2019-01-01T10:30") == datetime(2019, 1, 1, 10, 30)
        assert ConvertUtils.text_to_date("2019-01-01 10:30:15") == datetime(2019, 1, 1, 10, 30, 15)
        assert ConvertUtils.text_to_date("2019-01-01T10:30:15.250") == datetime(2019, 1, 1, 10, 30, 15, 250000)

    def test_timezones(self):
        assert ConvertUtils.text_to_date("2019-01-01T10:30:00Z") == datetime(
            2019, 1, 1, 10, 30, tzinfo=timezone.utc)
        assert ConvertUtils.text_to_date("2019-01-01T10:30:00+02:00") == datetime(
            2019, 1, 1, 10, 30, tzinfo=timezone(timedelta(hours=2)))

    def test_whitespace_tolerance(self):
        assert ConvertUtils.text_to_date(" 2019-01-01\n") == date(2019, 1, 1)

    @pytest.mark.parametrize("text", [
        "",
        "hello",
        "2019",
        "20190101",
        "2019-13-01",
        "2019-02-30",
        "01/02/2019",
        "2019-01-01T25:00",
    ])
    def test_rejects_non_dates(self, text):
        assert ConvertUtils.text_to_date(text) is None


class TestParseDates:
    """parse_dates() walks lists and dicts and returns a converted copy."""

    def test_nested_structure(self):
        source = ["2019-01-01", {"when": "2020-05-05T00:00:00Z", "n": 1}, ["x", ["2010-01-01"]]]
        result = ConvertUtils.parse_dates(source)
        assert result == [
            date(2019, 1, 1),
            {"when": datetime(2020, 5, 5, tzinfo=timezone.utc), "n": 1},
            ["x", [date(2010, 1, 1)]],
        ]
        # Source is left untouched
        assert source[0] == "2019-01-01"

    def test_scalars_pass_through(self):
        assert ConvertUtils.parse_dates(5) == 5
        assert ConvertUtils.parse_dates(None) is None
        assert ConvertUtils.parse_dates(True) is True


class TestToJson:
    """Serialisation of the kinds JSON has no native form for."""

    def test_dates_as_iso(self):
        text = ConvertUtils.to_json([date(2019, 1, 1), datetime(2019, 1, 1, 10, 30)])
        assert json.loads(text) == ["2019-01-01", "2019-01-01T10:30:00"]

    def test_undefined_becomes_null(self):
        assert ConvertUtils.to_json([UNDEFINED, None]) == "[null, null]"

    def test_decimal_and_tuple(self):
        assert json.loads(ConvertUtils.to_json([Decimal("1.5"), (1, 2)])) == [1.5, [1, 2]]

    def test_non_ascii_is_kept(self):
        assert ConvertUtils.to_json(["é"]) == '["é"]'

    def test_indent(self):
        assert ConvertUtils.to_json([1], indent=2) == "[\n  1\n]"

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            ConvertUtils.to_json([object()])
