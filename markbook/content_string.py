"""A string that remembers whether it has been appended to."""

from __future__ import annotations

from collections.abc import Iterable

from .field import Field


class ContentString:
    """Backing text of a stored item, tracking whether values were pushed onto it."""

    __slots__ = ("_content", "_appended")

    def __init__(self, value: str = "") -> None:
        self._content = str(value)
        self._appended = False

    @classmethod
    def from_range(cls, source: str, start: int, end: int) -> ContentString:
        """Create from the ``[start, end)`` part of ``source``."""
        if not 0 <= start <= end <= len(source):
            raise IndexError(
                f"range {start}..{end} is out of bounds for a string of length {len(source)}"
            )
        return cls(source[start:end])

    def has_been_pushed_to(self) -> bool:
        """Whether any content has been pushed since creation."""
        return self._appended

    def push(self, content: str) -> Field:
        """Append ``content`` and return where it now lives."""
        begin = len(self._content)
        self._content += content
        self._appended = True
        return Field(begin, len(self._content))

    def extend(self, contents: Iterable[str]) -> list[Field]:
        """Append each item of ``contents`` and return their locations."""
        return [self.push(str(content)) for content in contents]

    def __str__(self) -> str:
        return self._content

    def __len__(self) -> int:
        return len(self._content)

    def __getitem__(self, key):
        return self._content[key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContentString):
            return self._content == other._content
        if isinstance(other, str):
            return self._content == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ContentString({self._content!r}, appended={self._appended})"