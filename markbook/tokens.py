"""Tokens marking sections and fields of stored info, bookmarks and categories."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionTokens:
    """The begin and end lines of a section and the prefixes of its fields."""

    name: str
    field_names: tuple[str, ...]

    @property
    def begin(self) -> str:
        """The line after which the section begins."""
        return f"#{self.name.upper()}_BEGIN"

    @property
    def end(self) -> str:
        """The line on which the section ends."""
        return f"#{self.name.upper()}_END"

    @property
    def fields(self) -> dict[str, str]:
        """Each field name mapped to its token."""
        return {name: f"<{name}>" for name in self.field_names}

    def __getitem__(self, field: str) -> str:
        if field not in self.field_names:
            raise KeyError(field)
        return f"<{field}>"


INFO = SectionTokens("info", ("category", "tag"))
UNSORTED = SectionTokens("unsorted", ("url", "info", "tag"))
CATEGORY = SectionTokens("category", ("id", "desc", "name", "identifier", "sub"))