"""Reading YAML into JSON values and writing JSON values as YAML."""

from __future__ import annotations

import json
import math
from typing import Any

import yaml

from .writer import format_float, to_json_string

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _JSONLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as plain strings."""


_JSONLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return format_float(key)
    raise ValueError(f"unsupported YAML mapping key {key!r}")


def _to_json_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {_key_text(key): _to_json_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_json_value(item) for item in value]
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"unsupported YAML value {value!r}")
        return value
    if value is None or isinstance(value, (str, int, bool)):
        return value
    raise ValueError(f"unsupported YAML value of type {type(value).__name__}")


def parse_yaml(text: str) -> Any:
    """Parse a YAML document into JSON values; mapping keys become strings."""
    try:
        data = yaml.load(text, Loader=_JSONLoader)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    return _to_json_value(data)


def yaml_string(value: Any) -> str:
    """Render a JSON value as block-style YAML with keys in sorted order."""
    data = json.loads(to_json_string(value))
    text = yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
        width=2**31 - 1,
    )
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text