"""Helpers for locating, splitting and joining values in stored lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .field import DELIM, Field


def _delimited_spans(text: str) -> Iterator[tuple[int, int]]:
    position = 0
    for piece in text.split(DELIM):
        trimmed = piece.strip()
        if trimmed:
            start = position + len(piece) - len(piece.lstrip())
            yield start, start + len(trimmed)
        position += len(piece) + len(DELIM)


def split_by_delim_to_ranges(text: str) -> list[tuple[int, int]]:
    """Split ``text`` on the delimiter into trimmed, non-empty ``(start, end)`` spans."""
    return list(_delimited_spans(text))


def split_list_field(text: str) -> Iterator[Field]:
    """Split ``text`` on the delimiter into trimmed, non-empty fields."""
    return (Field(start, end) for start, end in _delimited_spans(text))


def substring_location(string: str, substring: str) -> tuple[int, int] | None:
    """Return the span of the first occurrence of ``substring`` in ``string``."""
    index = string.find(substring)
    if index < 0:
        return None
    return index, index + len(substring)


def range_trim(source: str, start: int, end: int) -> tuple[int, int]:
    """Narrow the ``[start, end)`` span of ``source`` by surrounding whitespace."""
    if not 0 <= start <= end <= len(source):
        raise IndexError(f"location {start}..{end} is out of bounds for source {source!r}")
    piece = source[start:end]
    trimmed = piece.strip()
    begin = start + len(piece) - len(piece.lstrip())
    return begin, begin + len(trimmed)


def join_with_delim(fields: Iterable[str]) -> str:
    """Join values with the delimiter surrounded by single spaces."""
    return f" {DELIM} ".join(str(item) for item in fields)


def write_delim_list(fields: Iterable[str]) -> str:
    """Render values the way a delimited list is written inside a line."""
    parts = []
    for position, item in enumerate(fields):
        if position == 0:
            parts.append(f" {item} ")
        else:
            parts.append(f"{DELIM} {item} ")
    return "".join(parts)


def write_list_field(fields: Iterable[str]) -> str:
    """Render values as a bracketed, comma separated list."""
    return "[" + ", ".join(str(item) for item in fields) + "]"