"""Compact JSON text for plain Python values, with keys in sorted order."""

from __future__ import annotations

import json
import math
import struct
from decimal import Decimal
from typing import Any, Iterator


def quote_string(text: str) -> str:
    """Return text as a quoted JSON string literal."""
    return json.dumps(text, ensure_ascii=False)


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_float32(value: float) -> str:
    for precision in range(1, 18):
        candidate = f"{value:.{precision}g}"
        if _to_float32(float(candidate)) == value:
            return candidate
    return repr(value)


def format_float(value: float, bits: int = 64) -> str:
    """Format a float in plain decimal notation with the fewest digits.

    With ``bits`` 32 the value is first rounded to single precision; any
    other width is treated as 64.
    """
    value = float(value)
    if bits == 32:
        value = _to_float32(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    digits = _shortest_float32(value) if bits == 32 else repr(value)
    text = format(Decimal(digits), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _pieces(value: Any) -> Iterator[str]:
    if value is None:
        yield "null"
    elif isinstance(value, bool):
        yield "true" if value else "false"
    elif isinstance(value, int):
        yield str(value)
    elif isinstance(value, float):
        yield format_float(value)
    elif isinstance(value, str):
        yield quote_string(value)
    elif isinstance(value, dict):
        yield "{"
        for index, key in enumerate(sorted(value)):
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, not {type(key).__name__}")
            if index:
                yield ","
            yield quote_string(key)
            yield ":"
            yield from _pieces(value[key])
        yield "}"
    elif isinstance(value, (list, tuple)):
        yield "["
        for index, item in enumerate(value):
            if index:
                yield ","
            yield from _pieces(item)
        yield "]"
    else:
        raise TypeError(f"cannot write {type(value).__name__} as JSON")


def to_json_string(value: Any) -> str:
    """Serialise a value to compact JSON with object keys sorted."""
    return "".join(_pieces(value))


def size(value: Any) -> int:
    """Number of entries in a JSON object or array."""
    if isinstance(value, (dict, list, tuple)):
        return len(value)
    raise TypeError(f"{type(value).__name__} has no size")