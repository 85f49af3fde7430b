"""Helpers for JSON values: serialisation, query strings, YAML and scalar conversion."""

__version__ = "0.1.0"

__all__ = [
    "segments",
    "writer",
    "querystring",
    "utils",
    "yamlutils",
    "stdjson",
    "session",
    "scalars",
]