"""Errors raised while parsing items and the property values items expose."""

from __future__ import annotations

from dataclasses import dataclass, field


class ParseError(Exception):
    """Content could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"parse issue: {self.message}"


class LineParseError(ParseError):
    """A particular line could not be parsed."""

    def __init__(self, line: str | None = None, line_num: int | None = None) -> None:
        super().__init__(line if line is not None else "")
        self.line = line
        self.line_num = line_num

    def __str__(self) -> str:
        number = "<unknown>" if self.line_num is None else str(self.line_num)
        line = "<unknown>" if self.line is None else self.line
        return f"could not parse line {number}: {line}"


class PropertyDoesNotExist(LookupError):
    """A property is missing, or is not of the expected kind."""

    def __init__(self, prop: str) -> None:
        super().__init__(prop)
        self.prop = prop

    def __str__(self) -> str:
        return f"property {self.prop} does not exist as expected type of property"


class Property:
    """Value of a property: either a single value or a list of values."""

    __slots__ = ()


@dataclass
class ListProperty(Property):
    """A property holding a list of values."""

    values: list[str] = field(default_factory=list)


@dataclass
class SingleProperty(Property):
    """A property holding one value."""

    value: str = ""