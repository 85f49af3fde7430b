"""Hooks for types that read or write their own JSON text, and a type registry.

A type writes its own JSON through a ``marshal_json()`` method returning JSON
text. It reads its own JSON through ``unmarshal_json(text)``: as a class or
static method returning a new value, or as an instance method that updates
the instance in place.
"""

from __future__ import annotations

import inspect
import json
from datetime import datetime
from typing import Any, Callable

from .writer import to_json_string


class StdMarshalError(ValueError):
    """A value's own ``marshal_json`` failed or produced invalid JSON."""


_REGISTRY: dict[type, Callable[[], Any]] = {
    object: lambda: None,
    dict: dict,
    list: list,
}


def find_unmarshaler(target: Any) -> Callable[[str], Any] | None:
    """Return the callable that reads JSON text for ``target``, or None.

    ``target`` is a class or an instance. For a class only a class or
    static ``unmarshal_json`` counts.
    """
    if target is None:
        return None
    if isinstance(target, type):
        attr = inspect.getattr_static(target, "unmarshal_json", None)
        if isinstance(attr, (classmethod, staticmethod)):
            return getattr(target, "unmarshal_json")
        return None
    method = getattr(target, "unmarshal_json", None)
    return method if callable(method) else None


def find_marshaler(value: Any) -> Callable[[], Any] | None:
    """Return the bound ``marshal_json`` of an instance, or None."""
    if value is None or isinstance(value, type):
        return None
    method = getattr(value, "marshal_json", None)
    return method if callable(method) else None


def std_marshal(value: Any, fallback: Callable[[Any], Any]) -> Any:
    """Turn ``value`` into a JSON value through its own ``marshal_json``.

    Datetimes and values without the hook go to ``fallback``.
    """
    if not isinstance(value, datetime):
        marshaler = find_marshaler(value)
        if marshaler is not None:
            try:
                data = marshaler()
            except Exception as exc:
                raise StdMarshalError(f"marshal_json of {value!r} failed: {exc}") from exc
            try:
                return json.loads(data)
            except (TypeError, ValueError) as exc:
                raise StdMarshalError(
                    f"marshal_json of {value!r} gave invalid JSON {data!r}: {exc}"
                ) from exc
    return fallback(value)


def register_serializable(cls: type, factory: Callable[[], Any]) -> None:
    """Register the factory that makes a fresh value for ``cls``."""
    _REGISTRY[cls] = factory


def new_serializable(cls: type) -> Any:
    """Make a fresh value for a registered type; may be None for raw JSON."""
    try:
        factory = _REGISTRY[cls]
    except KeyError:
        raise LookupError(f"{cls!r} is not registered as serializable") from None
    return factory()


def json_deserialize(cls: type, text: str | bytes) -> Any:
    """Parse JSON text into a fresh value of a registered type."""
    target = new_serializable(cls)
    parsed = json.loads(text)
    if target is None:
        return parsed
    unmarshaler = find_unmarshaler(target)
    if unmarshaler is not None:
        result = unmarshaler(to_json_string(parsed))
        return target if result is None else result
    if isinstance(target, dict):
        if not isinstance(parsed, dict):
            raise TypeError(f"cannot read {type(parsed).__name__} into an object")
        target.update(parsed)
        return target
    if isinstance(target, list):
        if not isinstance(parsed, list):
            raise TypeError(f"cannot read {type(parsed).__name__} into an array")
        target.extend(parsed)
        return target
    raise TypeError(f"cannot read JSON into {type(target).__name__}")