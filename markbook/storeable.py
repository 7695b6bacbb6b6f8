"""Base type for items that are stored one per line in sections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .content_string import ContentString
from .errors import Property


class Storeable(ABC):
    """An item stored as one line, read and written in a delimited section.

    Subclasses set ``ITEM_NAME`` and the ``TOKEN_BEGIN`` and ``TOKEN_END``
    lines that enclose their section.
    """

    ITEM_NAME: ClassVar[str]
    TOKEN_BEGIN: ClassVar[str]
    TOKEN_END: ClassVar[str]

    @abstractmethod
    def is_edited(self) -> bool:
        """Whether the item has been changed since it was read."""

    @abstractmethod
    def to_line(self) -> str:
        """Render the item as a single stored line."""

    @abstractmethod
    def get(self, prop: str) -> Property:
        """Return a property; raises PropertyDoesNotExist if unknown."""

    @abstractmethod
    def set(self, prop: str, value: Property) -> Storeable:
        """Set a property and return the item; raises PropertyDoesNotExist on mismatch."""

    @abstractmethod
    def push(self, prop: str, value: str) -> Storeable:
        """Push onto a list property and return the item."""

    @classmethod
    @abstractmethod
    def from_content_string(cls, line: ContentString, line_num: int | None = None) -> Storeable:
        """Parse an item; raises ParseError on failure."""

    @classmethod
    def from_string(cls, line, line_num: int | None = None) -> Storeable:
        """Parse an item from a plain string."""
        return cls.from_content_string(ContentString(str(line)), line_num)