"""Commands working on a buffered storage of stored items."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import IO

from . import persist
from .command_map import ExecutionError, UsageError
from .container import BufferStorage, GetSelectedError
from .errors import ListProperty, ParseError, PropertyDoesNotExist, SingleProperty

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, *, signed: bool) -> int | None:
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    return int(text) if pattern.fullmatch(text) else None


def _describe(item: object) -> str:
    pretty = getattr(item, "pretty", None)
    return pretty() if callable(pretty) else str(item)


def _visible_len(buffer_storage: BufferStorage) -> int:
    count = buffer_storage.buffer.count()
    return len(buffer_storage.storage) if count is None else count


def _lines(reader: IO[str]) -> Iterator[tuple[int, str]]:
    for index, raw in enumerate(reader):
        yield index, raw.removesuffix("\n").removesuffix("\r")


def wrap_if_negative(number: int, maximum: int) -> int:
    """Turn a negative index counted from ``maximum`` into a positive one."""
    if abs(number) > maximum:
        raise ExecutionError(f"number {number} larger than max value {maximum}")
    return number if number >= 0 else maximum - abs(number)


@dataclass
class Count:
    """Print the number of items stored and in the buffer."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        if args:
            raise ExecutionError("count should be used without any arguments")
        count = self.buffer_storage.buffer.count()
        in_buffer = "All" if count is None else str(count)
        print(f"total: {len(self.buffer_storage.storage)}, in buffer: {in_buffer}")


@dataclass
class List:
    """Print items in the buffer: ``list [COUNT [FROM]]``."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        bs = self.buffer_storage
        if args:
            count = _parse_int(args[0], signed=False)
            if count is None:
                raise ExecutionError(f"could not parse {args[0]} as a positive integer")
        else:
            count = _visible_len(bs)

        start = 0
        if len(args) > 1:
            parsed = _parse_int(args[1], signed=True)
            if parsed is None:
                raise ExecutionError(f"could not parse {args[1]} as an integer")
            start = parsed
        start = wrap_if_negative(start, _visible_len(bs))

        for index, item in itertools.islice(bs.iter_indexed(), start, start + count):
            print(f"{index}. {_describe(item)}")


@dataclass
class Load:
    """Load the section of ``item_type`` items from a file into storage."""

    buffer_storage: BufferStorage
    item_type: type

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            raise ExecutionError("load should be called with one argument")
        path = args[0]
        try:
            with open(path, encoding="utf-8") as reader:
                loaded = persist.load(self.item_type, reader)
        except (OSError, ParseError) as err:
            raise ExecutionError(str(err)) from err
        if not loaded:
            raise ExecutionError(f"no lines parsed from {path}")
        self.buffer_storage.storage.extend(loaded)
        self.buffer_storage.buffer.reset()


@dataclass
class LoadAll:
    """Load consecutive sections from one file.

    ``sections`` holds ``(label, buffer_storage, item_type)`` in file order.
    """

    sections: Sequence[tuple[str, BufferStorage, type]]

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            raise ExecutionError("load should be called with one argument")
        try:
            with open(args[0], encoding="utf-8") as reader:
                lines = _lines(reader)
                for label, buffer_storage, item_type in self.sections:
                    loaded = persist.load_from(item_type, lines)
                    print(f"loaded {len(loaded)} {label}")
                    buffer_storage.storage.extend(loaded)
                    buffer_storage.buffer.reset()
        except (OSError, ParseError) as err:
            raise ExecutionError(str(err)) from err


@dataclass
class Print:
    """Print the selected item."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        if args:
            raise UsageError("print should be called without any arguments")
        index = self.buffer_storage.selected.index
        if index is None:
            raise ExecutionError("nothing selected")
        storage = self.buffer_storage.storage
        if not 0 <= index < len(storage):
            raise ExecutionError("selected item does not exist")
        print(f"{index}. {_describe(storage[index])}")


@dataclass
class Push:
    """Push values onto a list property of the selected item: ``push FIELD VALUE...``."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise UsageError("push should be called with at least two arguments")
        try:
            index, item = self.buffer_storage.get_index_and_selected()
        except GetSelectedError as err:
            raise ExecutionError(str(err)) from err

        name = args[0]
        try:
            prop = item.get(name)
            if isinstance(prop, SingleProperty):
                raise ExecutionError("push can only be used on list properties")
            for value in args[1:]:
                item.push(name, value)
        except PropertyDoesNotExist as err:
            raise ExecutionError(str(err)) from err

        print(f"{index}. {_describe(item)}")


@dataclass
class Reset:
    """Clear the buffer and selection of every given storage."""

    storages: Sequence[BufferStorage]

    def __call__(self, args: Sequence[str]) -> None:
        if args:
            raise ExecutionError("reset should be used without any arguments")
        for storage in self.storages:
            storage.reset()


@dataclass
class Save:
    """Write the items in the buffer as a section to a file."""

    buffer_storage: BufferStorage
    item_type: type

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            raise ExecutionError("save should be called with one argument")
        try:
            with open(args[0], "w", encoding="utf-8") as writer:
                persist.save(self.item_type, writer, iter(self.buffer_storage))
        except OSError as err:
            raise ExecutionError(str(err)) from err


@dataclass
class SaveAll:
    """Write every stored item of each ``(buffer_storage, item_type)`` section to one file."""

    sections: Sequence[tuple[BufferStorage, type]]

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            raise ExecutionError("save should be called with one argument")
        try:
            with open(args[0], "w", encoding="utf-8") as writer:
                for buffer_storage, item_type in self.sections:
                    persist.save(item_type, writer, buffer_storage.storage)
        except OSError as err:
            raise ExecutionError(str(err)) from err


@dataclass
class Select:
    """Select an item by its index: ``select INDEX``."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            raise UsageError("select should be called with one argument")
        index = _parse_int(args[0], signed=False)
        if index is None:
            raise UsageError(f"could not parse {args[0]} as a positive integer")
        storage = self.buffer_storage.storage
        if index >= len(storage):
            raise ExecutionError(f"{index} is not a valid index")
        print(f"selected:\n{index}. {_describe(storage[index])}")
        self.buffer_storage.selected.replace(index)


@dataclass
class Set:
    """Set a property of the selected item: ``set FIELD VALUE...``."""

    buffer_storage: BufferStorage

    def __call__(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise UsageError(
                "set needs at least two arguments (a property and a value) "
                f"{len(args)} were given"
            )
        index = self.buffer_storage.selected.index
        if index is None:
            raise ExecutionError("not item selected")
        storage = self.buffer_storage.storage
        if not 0 <= index < len(storage):
            raise ExecutionError("invalid item selected")
        item = storage[index]

        name, values = args[0], list(args[1:])
        try:
            prop = item.get(name)
            if isinstance(prop, ListProperty):
                item.set(name, ListProperty(values))
            elif len(values) == 1:
                item.set(name, SingleProperty(values[0]))
            else:
                raise ExecutionError(f"property {name} takes only a single value")
        except PropertyDoesNotExist as err:
            raise ExecutionError(str(err)) from err

        print(f"{index}. {_describe(item)}")