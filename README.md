# jsonutils

Helpers for working with JSON values held as plain Python data (`dict`,
`list`, `str`, `int`, `float`, `bool`, `None`).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- **`jsonutils.writer`** – `to_json_string` writes compact JSON with
  dictionary keys sorted; `quote_string` quotes a string as a JSON literal;
  `format_float(value, bits)` renders a float in plain decimal notation with
  the fewest digits for 32- or 64-bit precision; `size` gives the number of
  entries in a dict or list and raises `TypeError` for anything else.
- **`jsonutils.querystring`** – `parse_query_string` turns
  `a=1&c.0=3&c.1=4` into nested dicts and lists (a repeated key gives a list
  of its values; malformed input raises `QueryStringError`), and
  `query_string` turns a dict back into a flat, dotted query string.
  `query_boolean(query, key, default)` reads a flag, and `to_bool` accepts
  `true`, `yes`, `on` or `1` in any case.
- **`jsonutils.segments`** – splits dotted keys such as `provider.0.name`
  into `TextNumber` segments (text or 64-bit integer), joins them back, and
  orders lists of segments with `sort_segment_lists`: shorter keys first,
  numbers before text.
- **`jsonutils.yamlutils`** – `parse_yaml` reads a YAML document into JSON
  values (mapping keys become strings, timestamps stay strings) and
  `yaml_string` renders a JSON value as block-style YAML with sorted keys.
- **`jsonutils.utils`** – `get_query_string_array`, `check_required_fields`
  (raising `MissingFieldError` or `NullFieldError`), `get_any_string`,
  `get_any_string2`, `get_array_of_prefix`, `new_string_array`,
  `get_string_array`, and the time helpers `new_time_string` (UTC,
  `YYYY-MM-DDTHH:MM:SSZ`) and `parse_time_string`.
- **`jsonutils.stdjson`** – hooks for types that write their own JSON through
  a `marshal_json()` method or read it through `unmarshal_json(text)`:
  `find_marshaler`, `find_unmarshaler` and `std_marshal` (which raises
  `StdMarshalError` on failure), plus a registry of factories,
  `register_serializable`, `new_serializable` and `json_deserialize`.
- **`jsonutils.session`** – `UnmarshalSession` maps node ids to values and
  calls waiting setters once a node's value is saved.
- **`jsonutils.scalars`** – `convert_scalar(value, target_type)` reads a JSON
  scalar as `int`, `float`, `bool`, `str`, `TriState`, `datetime`,
  `Any`/`object`, `X | None`, or (for strings) a one-item `list`. Null gives
  the target's zero value, empty strings read as zero numbers, and numeric
  strings may carry thousands separators such as `"3,118.54"`. Failures raise
  `UnmarshalError` or `TypeMismatchError`.

## Example

```python
from jsonutils.querystring import parse_query_string, query_string
from jsonutils.writer import to_json_string

value = parse_query_string("a=1&b=test&c.0=3&c.1=4")
print(to_json_string(value))   # {"a":"1","b":"test","c":["3","4"]}
print(query_string(value))     # a=1&b=test&c.0=3&c.1=4
```

```python
from jsonutils.scalars import TriState, convert_scalar

print(convert_scalar("3,118.54", float))   # 3118.54
print(convert_scalar("yes", TriState))     # TriState.TRUE
```

## What it does not do

The package converts single JSON scalars into typed values, but it does not
fill whole objects: there is no function that reads a JSON object into a
dataclass, a typed list or a typed dict, matches keys to fields by name, or
calls an after-reading hook on a class. Such structures have to be walked by
the caller, using `convert_scalar` for the leaves.