"""Locations of values inside a stored line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DELIM = "<,>"
"""Delimiter separating the values of a list field in a stored line."""


@dataclass
class Field:
    """A half-open span ``[start, end)`` of a string holding one value."""

    start: int = 0
    end: int = 0

    def get(self, source: str) -> str:
        """Return the text this field covers in ``source``."""
        if not 0 <= self.start <= self.end <= len(source):
            raise IndexError(
                f"field {self.start}..{self.end} is out of bounds "
                f"for a string of length {len(source)}"
            )
        return source[self.start : self.end]

    def __add__(self, offset: int) -> Field:
        if not isinstance(offset, int):
            return NotImplemented
        return Field(self.start + offset, self.end + offset)


class ListField(list):
    """A list of :class:`Field` spans making up one list value."""

    def get(self, source: str) -> Iterator[str]:
        """Yield the text of every field in ``source``."""
        return (field.get(source) for field in self)