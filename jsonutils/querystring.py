"""Conversion between URL query strings and nested JSON values."""

from __future__ import annotations

import re
from typing import Any, Sequence
from urllib.parse import quote_plus, unquote_plus

from .segments import (
    TextNumber,
    segments_to_string,
    sort_segment_lists,
    strings_to_segments,
)
from .writer import format_float, to_json_string

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})


class QueryStringError(ValueError):
    """A query string could not be parsed into a value."""


def to_bool(text: str) -> bool:
    """Read true, yes, on or 1 (any case) as True, anything else as False."""
    return text.strip().lower() in _TRUE_WORDS


def _unescape(text: str) -> str:
    if _BAD_ESCAPE.search(text):
        raise QueryStringError(f"invalid URL escape in {text!r}")
    return unquote_plus(text)


def _parse_pairs(text: str) -> dict[str, list[str]]:
    pairs: dict[str, list[str]] = {}
    for part in text.split("&"):
        if not part:
            continue
        if ";" in part:
            raise QueryStringError("invalid semicolon separator in query")
        key, _, value = part.partition("=")
        pairs.setdefault(_unescape(key), []).append(_unescape(value))
    return pairs


def _add_segment(body: Any, segments: Sequence[TextNumber], values: Sequence[str]) -> Any:
    if not segments:
        if len(values) == 1:
            return values[0]
        if values:
            return list(values)
        raise QueryStringError("empty value")
    head, rest = segments[0], segments[1:]
    if body is None:
        body = [] if head.is_number and head.number == 0 else {}
    if isinstance(body, dict):
        key = str(head)
        if key in body:
            _merge_existing(body[key], rest, values)
        else:
            body[key] = _add_segment(None, rest, values)
        return body
    if isinstance(body, list):
        index = head.number
        if 0 <= index < len(body):
            _merge_existing(body[index], rest, values)
        elif index == len(body):
            body.append(_add_segment(None, rest, values))
        else:
            raise QueryStringError(f"index {index} out of range")
        return body
    raise QueryStringError(
        f"type mismatch: cannot place key {segments_to_string(segments)!r} under {body!r}"
    )


def _merge_existing(body: Any, segments: Sequence[TextNumber], values: Sequence[str]) -> None:
    # A key that clashes with one already placed is dropped; the first one wins.
    try:
        _add_segment(body, segments, values)
    except QueryStringError:
        pass


def parse_query_string(text: str) -> dict[str, Any]:
    """Parse a query string; dotted keys such as ``a.0.b`` build nested values."""
    pairs = _parse_pairs(text)
    result: dict[str, Any] = {}
    for segments in sort_segment_lists(strings_to_segments(pairs)):
        _add_segment(result, segments, pairs.get(segments_to_string(segments), []))
    return result


def _simple(key: str, value: str) -> str:
    if key and value:
        return f"{quote_plus(key, safe='')}={quote_plus(value, safe='')}"
    return quote_plus(value or key, safe="")


def _query_string(value: Any, key: str) -> str:
    if isinstance(value, dict):
        return "&".join(
            _query_string(value[name], f"{key}.{name}" if key else name)
            for name in sorted(value)
        )
    if isinstance(value, (list, tuple)):
        return "&".join(
            _query_string(item, f"{key}.{index}" if key else str(index))
            for index, item in enumerate(value)
        )
    if value is None:
        return _simple(key, "")
    if isinstance(value, bool):
        return _simple(key, "true" if value else "false")
    if isinstance(value, float):
        return _simple(key, format_float(value))
    return _simple(key, str(value))


def query_string(value: Any) -> str:
    """Encode a JSON object as a query string; other values give an empty string."""
    if not isinstance(value, dict):
        return ""
    return _query_string(value, "")


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return to_json_string(value)


def query_boolean(query: Any, key: str, default: bool) -> bool:
    """Read ``key`` from a parsed query as a boolean, or return ``default``."""
    if not isinstance(query, dict) or key not in query:
        return default
    return to_bool(_as_text(query[key]))