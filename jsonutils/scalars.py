"""Conversion of JSON scalars (null, bool, number, string) into typed values."""

from __future__ import annotations

import enum
import logging
import math
import re
import types
import typing
from datetime import datetime
from typing import Any, Union

from .querystring import to_bool
from .utils import parse_time_string

_log = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_THOUSANDS_COMMA_RE = re.compile(r"[+-]?[0-9]+,[0-9]{3}")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


class UnmarshalError(ValueError):
    """A JSON value could not be read into the requested type."""


class TypeMismatchError(UnmarshalError):
    """The JSON value's kind does not fit the requested type."""


class TriState(enum.Enum):
    """A flag that is true, false or not set."""

    TRUE = "true"
    FALSE = "false"
    NONE = "none"


def _optional_inner(target_type: Any) -> Any:
    """The wrapped type of ``X | None``, or None when it is not optional."""
    origin = typing.get_origin(target_type)
    if origin is not Union and origin is not types.UnionType:
        return None
    args = [arg for arg in typing.get_args(target_type) if arg is not type(None)]
    if len(args) != len(typing.get_args(target_type)) - 1 or len(args) != 1:
        raise TypeMismatchError(f"unsupported union type {target_type!r}")
    return args[0]


def _is_list_type(target_type: Any) -> bool:
    return target_type is list or typing.get_origin(target_type) is list


def _list_item_type(target_type: Any) -> Any:
    args = typing.get_args(target_type)
    return args[0] if args else Any


def _zero(target_type: Any) -> Any:
    if target_type is bool:
        return False
    if target_type is int:
        return 0
    if target_type is float:
        return 0.0
    if target_type is str:
        return ""
    if target_type is TriState:
        return TriState.NONE
    if _is_list_type(target_type):
        return []
    if target_type in (Any, object, datetime) or not isinstance(target_type, type):
        return None
    try:
        return target_type()
    except TypeError:
        return None


def _normalize_currency(text: str) -> str:
    """Drop thousands separators and turn a decimal comma into a point."""
    commas, dots = text.count(","), text.count(".")
    if commas and dots:
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if commas:
        if commas > 1 or _THOUSANDS_COMMA_RE.fullmatch(text):
            return text.replace(",", "")
        return text.replace(",", ".")
    if dots > 1:
        return text.replace(".", "")
    return text


def _parse_int(text: str) -> int:
    normalized = _normalize_currency(text)
    if not _INT_RE.fullmatch(normalized):
        raise UnmarshalError(f"invalid integer {text!r}")
    number = int(normalized)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise UnmarshalError(f"integer {text!r} out of range")
    return number


def _parse_float(text: str) -> float:
    normalized = _normalize_currency(text)
    if "_" in normalized or normalized != normalized.strip():
        raise UnmarshalError(f"invalid number {text!r}")
    try:
        return float(normalized)
    except ValueError:
        raise UnmarshalError(f"invalid number {text!r}") from None


def _mismatch(value: Any, target_type: Any) -> TypeMismatchError:
    return TypeMismatchError(f"cannot read {type(value).__name__} {value!r} as {target_type!r}")


def _from_bool(value: bool, target_type: Any) -> Any:
    if target_type is TriState:
        return TriState.TRUE if value else TriState.FALSE
    if target_type is bool:
        return value
    if target_type is int:
        return 1 if value else 0
    if target_type is float:
        return 1.0 if value else 0.0
    if target_type is str:
        return "true" if value else "false"
    raise _mismatch(value, target_type)


def _from_int(value: int, target_type: Any) -> Any:
    if target_type is TriState:
        return TriState.FALSE if value == 0 else TriState.TRUE
    if target_type is int:
        return value
    if target_type is float:
        return float(value)
    if target_type is bool:
        return value != 0
    if target_type is str:
        return str(value)
    raise _mismatch(value, target_type)


def _from_float(value: float, target_type: Any) -> Any:
    if target_type in (TriState, int):
        if not math.isfinite(value):
            raise UnmarshalError(f"cannot read {value!r} as an integer")
        whole = int(value)
        if target_type is int:
            return whole
        return TriState.FALSE if whole == 0 else TriState.TRUE
    if target_type is float:
        return value
    if target_type is bool:
        return value != 0
    if target_type is str:
        return f"{value:f}"
    raise _mismatch(value, target_type)


def _from_str(value: str, target_type: Any) -> Any:
    if target_type is datetime:
        if not value:
            return None
        try:
            return parse_time_string(value)
        except ValueError as exc:
            _log.warning("cannot parse time %r: %s", value, exc)
            return None
    if target_type is TriState:
        lowered = value.lower()
        if lowered in _TRUE_WORDS:
            return TriState.TRUE
        if lowered in _FALSE_WORDS:
            return TriState.FALSE
        return TriState.NONE
    if target_type is int:
        return _parse_int(value) if value else 0
    if target_type is float:
        return _parse_float(value) if value else 0.0
    if target_type is bool:
        return to_bool(value)
    if target_type is str:
        return value
    if _is_list_type(target_type):
        return [convert_scalar(value, _list_item_type(target_type))]
    raise _mismatch(value, target_type)


def convert_scalar(value: Any, target_type: Any) -> Any:
    """Read a JSON scalar as ``target_type``.

    Supported targets are ``int``, ``float``, ``bool``, ``str``,
    :class:`TriState`, ``datetime``, ``Any``/``object``, ``X | None`` and,
    for strings, ``list``/``list[X]`` (a one-item list). Null gives the
    target's zero value. Empty strings read as zero numbers; numeric strings
    may carry thousands separators.
    """
    inner = _optional_inner(target_type)
    if inner is not None:
        return None if value is None else convert_scalar(value, inner)
    if value is None:
        return _zero(target_type)
    if isinstance(value, (dict, list, tuple)):
        raise _mismatch(value, target_type)
    if target_type in (Any, object):
        return value
    if isinstance(value, bool):
        return _from_bool(value, target_type)
    if isinstance(value, int):
        return _from_int(value, target_type)
    if isinstance(value, float):
        return _from_float(value, target_type)
    if isinstance(value, str):
        return _from_str(value, target_type)
    raise _mismatch(value, target_type)