"""Reading and writing sections of stored items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import IO, TypeVar

from .errors import ParseError
from .storeable import Storeable

T = TypeVar("T", bound=Storeable)


def _numbered_lines(reader: Iterable[str]) -> Iterator[tuple[int, str]]:
    for index, raw in enumerate(reader):
        yield index, raw.removesuffix("\n").removesuffix("\r")


def load(cls: type[T], reader: Iterable[str]) -> list[T]:
    """Read the first section of ``cls`` items from a text reader."""
    return load_from(cls, _numbered_lines(reader))


def load_from(cls: type[T], lines: Iterable[tuple[int, str]]) -> list[T]:
    """Read one section of ``cls`` items from ``(line_number, text)`` pairs.

    Lines are consumed up to and including the section's end token, so one
    iterator can be passed again to read the section that follows.
    """
    iterator = iter(lines)
    items: list[T] = []
    try:
        for _, text in iterator:
            if text == cls.TOKEN_BEGIN:
                break
        for index, text in iterator:
            if text == cls.TOKEN_END:
                break
            items.append(cls.from_string(text, index))
    except (OSError, UnicodeDecodeError) as err:
        raise ParseError(str(err)) from err
    return items


def save(cls: type[T], writer: IO[str], items: Iterable[T]) -> None:
    """Write ``items`` as a section of ``cls`` to a text writer."""
    writer.write(f"{cls.TOKEN_BEGIN}\n")
    for item in items:
        writer.write(f"{item.to_line()}\n")
    writer.write(f"{cls.TOKEN_END}\n")