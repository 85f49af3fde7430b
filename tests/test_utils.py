from datetime import datetime, timedelta, timezone

import pytest

from jsonutils.querystring import parse_query_string
from jsonutils.utils import (
    MissingFieldError,
    NullFieldError,
    check_required_fields,
    get_any_string,
    get_any_string2,
    get_array_of_prefix,
    get_query_string_array,
    get_string_array,
    new_string_array,
    new_time_string,
    parse_time_string,
)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("search=zone", ["zone"]),
        ("search=abc&search=123&search=b", ["abc", "123", "b"]),
        ("search.0=123&search.1=abc", ["123", "abc"]),
    ],
)
def test_get_query_string_array(query, expected):
    assert get_query_string_array(parse_query_string(query), "search") == expected


def test_get_query_string_array_from_object_members():
    query = {"search": {"0": "a", "1": "b", "3": "d"}}
    assert get_query_string_array(query, "search") == ["a", "b"]


def test_get_query_string_array_missing():
    assert get_query_string_array({"other": "x"}, "search") is None
    assert get_query_string_array(None, "search") is None


def test_get_array_of_prefix():
    data = {f"key.{i}": f"value.{i}" for i in range(10)}
    result = get_array_of_prefix(data, "key")
    assert len(result) == 10
    assert result[3] == "value.3"


def test_get_array_of_prefix_stops_at_gap_or_null():
    assert get_array_of_prefix({"key.0": "a", "key.2": "c"}, "key") == ["a"]
    assert get_array_of_prefix({"key.0": None}, "key") == []


def test_new_time_string_round_trip():
    now = datetime.now(timezone.utc)
    parsed = parse_time_string(new_time_string(now))
    assert parsed <= now
    assert now - parsed < timedelta(seconds=1)


def test_new_time_string_naive_is_local():
    parsed = parse_time_string(new_time_string(datetime.now()))
    assert datetime.now(timezone.utc) - parsed < timedelta(seconds=2)


def test_new_time_string_format():
    moment = datetime(2020, 4, 11, 14, 44, 57, tzinfo=timezone.utc)
    assert new_time_string(moment) == "2020-04-11T14:44:57Z"
    shifted = datetime(2020, 4, 11, 22, 44, 57, tzinfo=timezone(timedelta(hours=8)))
    assert new_time_string(shifted) == "2020-04-11T14:44:57Z"


def test_parse_time_string_variants():
    assert parse_time_string("2023-03-23 12:02:19.206") == datetime(
        2023, 3, 23, 12, 2, 19, 206000, tzinfo=timezone.utc
    )
    assert parse_time_string("2018-05-24T03:00:43Z") == datetime(
        2018, 5, 24, 3, 0, 43, tzinfo=timezone.utc
    )
    with pytest.raises(ValueError):
        parse_time_string("not a time")


def test_string_arrays():
    assert new_string_array(["1", "2", "3"]) == ["1", "2", "3"]
    assert get_string_array(["a", 1, True, None]) == ["a", "1", "true", ""]


def test_check_required_fields():
    data = {"name": "x", "empty": None}
    assert check_required_fields(data, ["name"]) is None
    with pytest.raises(MissingFieldError):
        check_required_fields(data, ["name", "age"])
    with pytest.raises(NullFieldError):
        check_required_fields(data, ["empty"])
    with pytest.raises(TypeError):
        check_required_fields(["name"], ["name"])


def test_get_any_string():
    data = {"a": "", "b": "found", "c": "later"}
    assert get_any_string(data, ["a", "b", "c"]) == "found"
    assert get_any_string2(data, ["x", "c"]) == ("later", "c")
    assert get_any_string2(None, ["a"]) == ("", "")
    assert get_any_string(data, ["a", "x"]) == ""