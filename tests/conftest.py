"""
Shared fixtures for comparator, sorter and CLI tests.
"""
import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src/ to sys.path so 'sortcompare' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sortcompare import UNDEFINED, compare  # noqa: E402


@pytest.fixture
def ascending():
    """Comparator with all defaults."""
    return compare()


@pytest.fixture
def descending():
    """Comparator with direction 'desc' and all other defaults."""
    return compare("desc")


@pytest.fixture
def mixed_values():
    """
    One list holding every built-in kind, nested lists and records included,
    in scrambled order.
    """
    return [
        None,
        UNDEFINED,
        [
            datetime(2013, 1, 1),
            datetime(2010, 1, 1),
            datetime(2019, 1, 1),
            [datetime(2013, 1, 1), datetime(2010, 1, 1), datetime(2019, 1, 1)],
        ],
        True,
        False,
        [True, False],
        [10, -12, 100, "a", "b", None],
        [10, -12, 100, "a", "a", None],
        [10, -12, 101, "a", "a", None],
        {"b": [True, False]},
        {"b": 2},
        {"b": 1},
        datetime(2019, 1, 1),
        float("inf"),
        -12,
        "test",
        [[["c"]]],
        [[["b"]]],
    ]


@pytest.fixture
def json_file(tmp_path):
    """Factory writing a JSON document to a temporary file and returning its path."""
    def _write(document, name="data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write
