"""A named item with children, a description and tags, stored as one line."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

from .content_string import ContentString
from .errors import (
    LineParseError,
    ListProperty,
    Property,
    PropertyDoesNotExist,
    SingleProperty,
)
from .field import Field, ListField
from .pattern_match import (
    join_with_delim,
    range_trim,
    split_list_field,
    write_delim_list,
    write_list_field,
)
from .storeable import Storeable

_MARKERS = ("<name>", "<children>", "<info>", "<tags>")
_MARKER_RE = re.compile("|".join(re.escape(marker) for marker in _MARKERS))


class Reference(Storeable):
    """An item with a name, child names, an info text and tags."""

    def __init__(
        self,
        name: str = "",
        children: Iterable[str] = (),
        info: str = "",
        tags: Iterable[str] = (),
    ) -> None:
        line = ContentString()
        self._line = line
        self._name = line.push(name)
        self._children = ListField(line.extend(children))
        self._info = line.push(info)
        self._tags = ListField(line.extend(tags))

    @classmethod
    def _assemble(
        cls,
        line: ContentString,
        name: Field,
        children: ListField,
        info: Field,
        tags: ListField,
    ) -> Reference:
        item = cls.__new__(cls)
        item._line = line
        item._name = name
        item._children = children
        item._info = info
        item._tags = tags
        return item

    @staticmethod
    def create_line(
        name: str, children: Iterable[str], info: str, tags: Iterable[str]
    ) -> str:
        """Render values in the stored line format."""
        return (
            f"<name> {name} <children> {join_with_delim(children)} "
            f"<info> {info} <tags> {join_with_delim(tags)}"
        )

    @classmethod
    def from_content_string(
        cls, line: ContentString, line_num: int | None = None
    ) -> Reference:
        """Parse a reference from a stored line; raises LineParseError on failure."""
        if not isinstance(line, ContentString):
            line = ContentString(str(line))
        text = str(line)
        matches = list(_MARKER_RE.finditer(text))
        if len(matches) < len(_MARKERS):
            raise LineParseError(text, line_num)

        spans = []
        for position, (match, marker) in enumerate(zip(matches, _MARKERS)):
            if match.group() != marker:
                raise LineParseError(text, line_num)
            start = match.end()
            following = position + 1
            end = matches[following].start() if following < len(matches) else len(text)
            if start > end:
                raise LineParseError(text, line_num)
            spans.append((start, end))

        def single(span: tuple[int, int]) -> Field:
            return Field(*range_trim(text, *span))

        def listed(span: tuple[int, int]) -> ListField:
            start, end = span
            return ListField(field + start for field in split_list_field(text[start:end]))

        return cls._assemble(
            line, single(spans[0]), listed(spans[1]), single(spans[2]), listed(spans[3])
        )

    @property
    def name(self) -> str:
        return self._name.get(str(self._line))

    @name.setter
    def name(self, value: str) -> None:
        self._name = self._line.push(value)

    @property
    def info(self) -> str:
        return self._info.get(str(self._line))

    @info.setter
    def info(self, value: str) -> None:
        self._info = self._line.push(value)

    @property
    def children(self) -> list[str]:
        return list(self._children.get(str(self._line)))

    @children.setter
    def children(self, values: Iterable[str]) -> None:
        self._children = ListField(self._line.extend(values))

    @property
    def tags(self) -> list[str]:
        return list(self._tags.get(str(self._line)))

    @tags.setter
    def tags(self, values: Iterable[str]) -> None:
        self._tags = ListField(self._line.extend(values))

    def push_child(self, child: str) -> Reference:
        """Append a child name."""
        self._children.append(self._line.push(child))
        return self

    def push_tag(self, tag: str) -> Reference:
        """Append a tag."""
        self._tags.append(self._line.push(tag))
        return self

    def is_edited(self) -> bool:
        return self._line.has_been_pushed_to()

    def to_line(self) -> str:
        return self.create_line(self.name, self.children, self.info, self.tags)

    def get(self, prop: str) -> Property:
        if prop == "name":
            return SingleProperty(self.name)
        if prop == "info":
            return SingleProperty(self.info)
        if prop == "children":
            return ListProperty(self.children)
        if prop == "tags":
            return ListProperty(self.tags)
        raise PropertyDoesNotExist(prop)

    def set(self, prop: str, value: Property) -> Reference:
        match prop, value:
            case "name", SingleProperty(value=text):
                self.name = text
            case "info", SingleProperty(value=text):
                self.info = text
            case "children", ListProperty(values=values):
                self.children = values
            case "tags", ListProperty(values=values):
                self.tags = values
            case _:
                raise PropertyDoesNotExist(prop)
        return self

    def push(self, prop: str, value: str) -> Reference:
        if prop == "children":
            return self.push_child(value)
        if prop == "tags":
            return self.push_tag(value)
        raise PropertyDoesNotExist(prop)

    def pretty(self) -> str:
        """Render the reference in a multi-line, human readable form."""
        parts = [f"{self.name}:"]
        if self._children:
            parts.append(f"\n\tchildren: {write_list_field(self.children)}")
        parts.append(f"\n\tinfo: {self.info}")
        if self._tags:
            parts.append(f"\n\ttags: {write_list_field(self.tags)}")
        return "".join(parts)

    def __str__(self) -> str:
        return (
            f"<name> {self.name} <children>{write_delim_list(self.children)}"
            f"<info> {self.info} <tags>{write_delim_list(self.children)}"
        )

    def __repr__(self) -> str:
        return (
            f"Reference(name={self.name!r}, children={self.children!r}, "
            f"info={self.info!r}, tags={self.tags!r})"
        )


def main(argv: list[str] | None = None) -> int:
    """Parse a sample reference and show its different renderings."""
    item = Reference.from_string(
        "<name> hello there <children> general <,> kenobi <info> blast them <tags> wow <,> nice"
    )
    print(repr(item), file=sys.stderr)
    print(repr(join_with_delim(["hello", "there"])), file=sys.stderr)
    print(
        repr(Reference.create_line("Kenobi", ["hello", "there"], "general", ["nice"])),
        file=sys.stderr,
    )
    print(item)
    print(item.pretty())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())