from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from snapmark.stringify import stringify, swap_quotes


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (1.0, "1"),
        (1.5, "1.5"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        ("text", '"text"'),
        ([1, "x", None], '[1,"x",null]'),
        ({"a": [1, 2], "b": {"c": True}}, "{a:[1,2],b:{c:true}}"),
        ({3, 1, 2}, "[1,2,3]"),
        (Point(1, 2), "{x:1,y:2}"),
    ],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_stringify_errors_and_functions():
    assert stringify(ValueError("bad value")) == "ValueError: bad value"
    assert stringify(lambda: None) == "Function"


def test_stringify_datetimes_as_epoch_millis():
    assert stringify(datetime(2020, 3, 6, tzinfo=timezone.utc)) == "1583452800000"


def test_swap_quotes():
    assert swap_quotes("'a' \"b\"") == "\"a\" 'b'"
    assert swap_quotes(stringify({"key": "2"})) == "{key:'2'}"
