"""Dotted key segments made of text or integer parts, with a fixed ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Sequence

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class TextNumber:
    """One segment of a dotted key: either an integer or a piece of text."""

    text: str = ""
    number: int = 0
    is_number: bool = False

    def compare(self, other: TextNumber) -> int:
        """Return -1, 0 or 1; numbers sort before text."""
        if self.is_number != other.is_number:
            return -1 if self.is_number else 1
        if self.is_number:
            mine, theirs = self.number, other.number
        else:
            mine, theirs = self.text, other.text
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def __str__(self) -> str:
        return str(self.number) if self.is_number else self.text


def parse_segment(text: str) -> TextNumber:
    """Read a segment as a 64-bit integer if possible, otherwise as text."""
    if _INT_RE.fullmatch(text):
        number = int(text)
        if _INT64_MIN <= number <= _INT64_MAX:
            return TextNumber(number=number, is_number=True)
    return TextNumber(text=text)


def string_to_segments(text: str) -> list[TextNumber]:
    """Split a dotted key into its segments."""
    return [parse_segment(part) for part in text.split(".")]


def segments_to_string(segments: Iterable[TextNumber]) -> str:
    """Join segments back into a dotted key."""
    return ".".join(str(segment) for segment in segments)


def strings_to_segments(texts: Iterable[str]) -> list[list[TextNumber]]:
    """Split each dotted key into segments."""
    return [string_to_segments(text) for text in texts]


def segments_to_strings(segment_lists: Iterable[Sequence[TextNumber]]) -> list[str]:
    """Join each segment list back into a dotted key."""
    return [segments_to_string(segments) for segments in segment_lists]


def _compare_lists(left: Sequence[TextNumber], right: Sequence[TextNumber]) -> int:
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for mine, theirs in zip(left, right):
        result = mine.compare(theirs)
        if result:
            return result
    return 0


def sort_segment_lists(
    segment_lists: Iterable[Sequence[TextNumber]],
) -> list[Sequence[TextNumber]]:
    """Order segment lists: shorter first, then segment by segment."""
    return sorted(segment_lists, key=cmp_to_key(_compare_lists))