"""Helpers for reading strings, arrays and times out of parsed JSON values."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Sequence

from .writer import to_json_string

_MISSING = object()

_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:[T ](\d{2}):(\d{2})(?::(\d{2})(?:\.(\d+))?)?)?"
    r"\s*(Z|z|[+-]\d{2}:?\d{2})?"
)


class MissingFieldError(ValueError):
    """A required field is absent from the input."""


class NullFieldError(ValueError):
    """A required field is present but null."""


def _lookup(data: Any, key: str) -> Any:
    if isinstance(data, dict) and key in data:
        return data[key]
    return _MISSING


def _text_of(value: Any) -> str | None:
    """The string form of a JSON value, or None where it has none."""
    if value is _MISSING or value is None:
        return None
    if isinstance(value, str):
        return value
    return to_json_string(value)


def new_string_array(values: Iterable[str]) -> list[str]:
    """Build a JSON array of strings."""
    return [str(value) for value in values]


def get_string_array(values: Sequence[Any]) -> list[str]:
    """Read each item as a string; items that have no string form give ""."""
    return [_text_of(value) or "" for value in values]


def new_time_string(moment: datetime) -> str:
    """Format a time in UTC as ``YYYY-MM-DDTHH:MM:SSZ``.

    A naive datetime is taken to be in local time.
    """
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_time_string(text: str) -> datetime:
    """Parse an ISO-like date or time; a time without zone is taken as UTC."""
    match = _TIME_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"unrecognised time string {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    tz = timezone.utc
    if zone and zone not in ("Z", "z"):
        digits = zone[1:].replace(":", "")
        offset = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
        tz = timezone(-offset if zone[0] == "-" else offset)
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        micro,
        tzinfo=tz,
    )


def get_query_string_array(query: Any, key: str) -> list[str] | None:
    """Read ``key`` of a parsed query as a list of strings.

    An array gives its items, a string gives a one-item list and an object
    gives its ``"0"``, ``"1"``, ... members up to the first gap. A missing
    key or any other value gives None.
    """
    if query is None:
        return None
    found = _lookup(query, key)
    if isinstance(found, list):
        return get_string_array(found)
    if isinstance(found, str):
        return [found]
    if isinstance(found, dict):
        result: list[str] = []
        while (text := _text_of(_lookup(found, str(len(result))))) is not None:
            result.append(text)
        return result
    return None


def check_required_fields(data: Any, fields: Iterable[str]) -> None:
    """Raise if any of ``fields`` is missing from, or null in, a JSON object."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    for field in fields:
        if field not in data:
            raise MissingFieldError(field)
        if data[field] is None:
            raise NullFieldError(field)


def get_any_string2(data: Any, keys: Iterable[str]) -> tuple[str, str]:
    """Return the first non-empty string among ``keys`` and the key it was under."""
    if data is None:
        return "", ""
    for key in keys:
        text = _text_of(_lookup(data, key))
        if text:
            return text, key
    return "", ""


def get_any_string(data: Any, keys: Iterable[str]) -> str:
    """Return the first non-empty string among ``keys``, or ""."""
    return get_any_string2(data, keys)[0]


def get_array_of_prefix(data: Any, prefix: str) -> list[Any]:
    """Collect ``prefix.0``, ``prefix.1``, ... up to the first missing or null one."""
    result: list[Any] = []
    if data is None:
        return result
    while True:
        found = _lookup(data, f"{prefix}.{len(result)}")
        if found is _MISSING or found is None:
            return result
        result.append(found)