"""
Tests for CLI argument parsing and option mapping.
"""
import sys
from unittest import mock

import pytest

from sortcompare.cli import CLIApplication
from sortcompare.core.models import Direction


class TestArgumentParsing:
    """Test CLI argument parsing with argparse."""

    def test_defaults(self):
        app = CLIApplication()
        with mock.patch.object(sys, 'argv', ['sortcompare']):
            args = app.parse_args()
        assert args.input is None
        assert args.output is None
        assert args.direction == "asc"
        assert args.deep is False
        assert args.type_order is None
        assert args.ignore_direction_of is None
        assert args.parse_dates is False
        assert args.indent is None

    def test_input_output_flag_variants(self):
        app = CLIApplication()

        with mock.patch.object(sys, 'argv', ['sortcompare', '--input', 'in.json', '--output', 'out.json']):
            args = app.parse_args()
        assert args.input == "in.json"
        assert args.output == "out.json"

        with mock.patch.object(sys, 'argv', ['sortcompare', '-i', 'in.json', '-o', 'out.json']):
            args = app.parse_args()
        assert args.input == "in.json"
        assert args.output == "out.json"

    @pytest.mark.parametrize("value", ["asc", "ascending", "desc", "descending"])
    def test_direction_choices(self, value):
        args = CLIApplication.parse_args(['-d', value])
        assert args.direction == value

    def test_invalid_direction_rejected_by_argparse(self, capsys):
        with pytest.raises(SystemExit) as exc:
            CLIApplication.parse_args(['--direction', 'sideways'])
        assert exc.value.code == 2

    def test_type_order_is_space_separated(self):
        args = CLIApplication.parse_args(['--type-order', 'string', 'number'])
        assert args.type_order == ["string", "number"]

    def test_ignore_direction_of_accepts_no_kinds(self):
        args = CLIApplication.parse_args(['--ignore-direction-of'])
        assert args.ignore_direction_of == []

        args = CLIApplication.parse_args(['--ignore-direction-of', 'array', 'object'])
        assert args.ignore_direction_of == ["array", "object"]


class TestCreateOptions:
    """Mapping parsed arguments onto CompareOptions."""

    def test_direction_alias_maps_to_enum(self):
        app = CLIApplication()
        options = app.create_options(app.parse_args(['-d', 'descending']))
        assert options.direction is Direction.DESC

    def test_defaults_leave_options_untouched(self):
        app = CLIApplication()
        options = app.create_options(app.parse_args([]))
        assert options.ignore_direction_of_types == frozenset({"array"})
        assert options.type_order[0] == "number"

    def test_type_order_and_exemptions(self):
        app = CLIApplication()
        options = app.create_options(app.parse_args([
            '--type-order', 'string', 'number', '--ignore-direction-of', 'string'
        ]))
        assert options.type_order == ("string", "number")
        assert options.ignore_direction_of_types == frozenset({"string"})
