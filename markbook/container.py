"""Containers holding items together with a filter buffer and a selection."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class Buffer:
    """A list of indices into some storage; no list means every index."""

    def __init__(self, indices: list[int] | None = None) -> None:
        self._indices = None if indices is None else list(indices)

    def count(self) -> int | None:
        """Number of indices held, or None when the buffer stands for all items."""
        return None if self._indices is None else len(self._indices)

    def filter_in_place(self, content: Sequence[T], predicate: Callable[[T], bool]) -> Buffer:
        """Keep only the indices whose item satisfies ``predicate``."""
        if self._indices is None:
            self._indices = [index for index, item in enumerate(content) if predicate(item)]
        else:
            self._indices = [index for index in self._indices if predicate(content[index])]
        return self

    def reset(self) -> Buffer:
        """Return to standing for all items."""
        self._indices = None
        return self

    def __iter__(self) -> Iterator[int]:
        if self._indices is None:
            return itertools.count()
        return iter(list(self._indices))

    def __repr__(self) -> str:
        return f"Buffer({self._indices!r})"


@dataclass
class Selected:
    """An optional single selected index."""

    index: int | None = None

    def is_empty(self) -> bool:
        return self.index is None

    def clear(self) -> Selected:
        self.index = None
        return self

    def replace(self, value: int) -> Selected:
        self.index = value
        return self


class Storage(list):
    """The items of one kind."""

    def dedup_by(self, same_bucket: Callable[[T, T], bool]) -> None:
        """Drop items for which ``same_bucket(item, previous_kept)`` is true."""
        kept: list = []
        for item in self:
            if kept and same_bucket(item, kept[-1]):
                continue
            kept.append(item)
        self[:] = kept


class GetSelectedError(LookupError):
    """The selected item could not be found."""


class NothingSelected(GetSelectedError):
    """Nothing is selected."""

    def __str__(self) -> str:
        return "nothing selected"


class InvalidSelection(GetSelectedError):
    """The selected index is out of range."""

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"index {self.index} is invalid"


@dataclass
class BufferStorage(Generic[T]):
    """Storage combined with a filter buffer and a selection."""

    storage: Storage = field(default_factory=Storage)
    buffer: Buffer = field(default_factory=Buffer)
    selected: Selected = field(default_factory=Selected)

    def reset(self) -> BufferStorage[T]:
        """Clear the buffer and the selection, keeping the storage."""
        self.buffer.reset()
        self.selected.clear()
        return self

    def filter_in_place(self, predicate: Callable[[T], bool]) -> BufferStorage[T]:
        """Narrow the buffer to items satisfying ``predicate``."""
        self.buffer.filter_in_place(self.storage, predicate)
        return self

    def get_selected(self) -> T:
        """Return the selected item."""
        return self.get_index_and_selected()[1]

    def get_index_and_selected(self) -> tuple[int, T]:
        """Return the selected index and item."""
        index = self.selected.index
        if index is None:
            raise NothingSelected()
        if not 0 <= index < len(self.storage):
            raise InvalidSelection(index)
        return index, self.storage[index]

    def __iter__(self) -> Iterator[T]:
        return (item for _, item in self.iter_indexed())

    def iter_indexed(self) -> Iterator[tuple[int, T]]:
        """Yield ``(index, item)`` for items in the buffer, stopping at the storage end."""
        for index in self.buffer:
            if index >= len(self.storage):
                return
            yield index, self.storage[index]