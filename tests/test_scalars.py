from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from jsonutils.scalars import (
    TriState,
    TypeMismatchError,
    UnmarshalError,
    convert_scalar,
)


@pytest.mark.parametrize(
    "text, want",
    [("", 0), ("10", 10), ("10,000", 10000), ("200", 200)],
)
def test_string_to_int(text, want):
    assert convert_scalar(text, int) == want


@pytest.mark.parametrize(
    "text, want",
    [("", 0.0), ("10.0", 10.0), ("10,000.00", 10000.0)],
)
def test_string_to_float(text, want):
    assert convert_scalar(text, float) == want


def test_currency_strings():
    assert convert_scalar("3,118.54", float) == 3118.54
    assert convert_scalar("3.490.000,89", float) == 3490000.89


def test_invalid_int_string_raises():
    with pytest.raises(UnmarshalError):
        convert_scalar("abc", int)
    with pytest.raises(UnmarshalError):
        convert_scalar("10.5", int)


def test_int_string_out_of_range():
    with pytest.raises(UnmarshalError):
        convert_scalar("9223372036854775808", int)


def test_time_strings():
    assert convert_scalar("", datetime) is None
    got = convert_scalar("2023-03-23 12:02:19.206", datetime)
    assert got == datetime(2023, 3, 23, 12, 2, 19, 206000, tzinfo=timezone.utc)


def test_bad_time_gives_zero():
    assert convert_scalar("not a time", datetime) is None


@pytest.mark.parametrize(
    "value, want",
    [
        (False, TriState.FALSE),
        (True, TriState.TRUE),
        (0, TriState.FALSE),
        (5, TriState.TRUE),
        (0.0, TriState.FALSE),
        ("Yes", TriState.TRUE),
        ("off", TriState.FALSE),
        ("maybe", TriState.NONE),
        (None, TriState.NONE),
    ],
)
def test_tristate(value, want):
    assert convert_scalar(value, TriState) is want


@pytest.mark.parametrize(
    "target, want",
    [(int, 0), (float, 0.0), (bool, False), (str, ""), (Any, None), (list, [])],
)
def test_null_gives_zero(target, want):
    assert convert_scalar(None, target) == want


def test_optional():
    assert convert_scalar(None, Optional[int]) is None
    assert convert_scalar("43", Optional[int]) == 43
    assert convert_scalar(99.9, float | None) == 99.9


def test_int_conversions():
    assert convert_scalar(19, str) == "19"
    assert convert_scalar(3, float) == 3.0
    assert convert_scalar(0, bool) is False
    assert convert_scalar(7, Any) == 7


def test_bool_conversions():
    assert convert_scalar(True, int) == 1
    assert convert_scalar(False, float) == 0.0
    assert convert_scalar(True, str) == "true"


def test_float_conversions():
    assert convert_scalar(1.5, str) == "1.500000"
    assert convert_scalar(2.9, int) == 2
    assert convert_scalar(0.0, bool) is False


def test_string_to_bool_and_str():
    assert convert_scalar("on", bool) is True
    assert convert_scalar("nope", bool) is False
    assert convert_scalar("Aliyun", str) == "Aliyun"


def test_string_to_list():
    assert convert_scalar("Aliyun", list[str]) == ["Aliyun"]
    assert convert_scalar("5", list[int]) == [5]


def test_mismatches():
    with pytest.raises(TypeMismatchError):
        convert_scalar(3, list[int])
    with pytest.raises(TypeMismatchError):
        convert_scalar({"a": 1}, int)
    with pytest.raises(TypeMismatchError):
        convert_scalar(True, datetime)
    with pytest.raises(TypeMismatchError):
        convert_scalar("x", dict)