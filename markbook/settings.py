"""Typed, named settings with default values that can be restored."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Key(Generic[T]):
    """Name of a setting together with the type of its value."""

    name: str
    value_type: type | None = None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        type_name = "?" if self.value_type is None else _type_name(self.value_type)
        return f"{self.name}: {type_name}"


class SettingsError(Exception):
    """Base class of errors raised by settings."""


class WrongSettingType(SettingsError, TypeError):
    """A setting was accessed with a type other than its own."""

    def __init__(self, setting: str, setting_type: str, tried_type: str) -> None:
        super().__init__(setting, setting_type, tried_type)
        self.setting = setting
        self.setting_type = setting_type
        self.tried_type = tried_type

    def __str__(self) -> str:
        return (
            f'Setting "{self.setting}" is of type <{self.setting_type}>, '
            f"not <{self.tried_type}>"
        )


class SettingDoesNotExist(SettingsError, KeyError):
    """No setting has the requested name."""

    def __init__(self, setting: str) -> None:
        super().__init__(setting)
        self.setting = setting

    def __str__(self) -> str:
        return f'Setting "{self.setting}" does not exist'


def _type_name(value_type: type) -> str:
    return value_type.__qualname__


def _type_matches(actual: type, wanted: type) -> bool:
    if actual is wanted:
        return True
    if actual is bool or wanted is bool:
        return False
    return issubclass(actual, wanted)


def _name_of(key: Key | str) -> str:
    return key.name if isinstance(key, Key) else str(key)


@dataclass
class _Entry:
    value: Any
    value_type: type
    default_constructor: Callable[[], Any]

    def reset(self) -> None:
        self.value = self.default_constructor()


class SettingsBuilder:
    """Collects settings and their defaults, then builds :class:`Settings`."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def add(self, key: Key | str, default_value: Any) -> SettingsBuilder:
        """Add a setting whose default is a copy of ``default_value``."""
        return self.add_fn(key, lambda: copy.deepcopy(default_value))

    def add_default(self, key: Key) -> SettingsBuilder:
        """Add a setting whose default is its type called with no arguments."""
        if not isinstance(key, Key) or key.value_type is None:
            raise TypeError("add_default needs a key that carries a value type")
        return self.add_fn(key, key.value_type)

    def add_fn(self, key: Key | str, default_constructor: Callable[[], Any]) -> SettingsBuilder:
        """Add a setting whose default is produced by ``default_constructor``."""
        name = _name_of(key)
        value = default_constructor()
        declared = key.value_type if isinstance(key, Key) else None
        value_type = declared if declared is not None else type(value)
        if not _type_matches(type(value), value_type):
            raise WrongSettingType(name, _type_name(value_type), _type_name(type(value)))
        self._entries[name] = _Entry(value, value_type, default_constructor)
        return self

    def build(self) -> Settings:
        """Create the settings collected so far."""
        return Settings(dict(self._entries))


class Settings:
    """A set of named settings, each with a fixed type and a default."""

    def __init__(self, entries: dict[str, _Entry] | None = None) -> None:
        self._entries: dict[str, _Entry] = entries or {}

    def _entry(self, setting: Key | str) -> _Entry:
        name = _name_of(setting)
        try:
            entry = self._entries[name]
        except KeyError:
            raise SettingDoesNotExist(name) from None
        if isinstance(setting, Key) and setting.value_type is not None:
            if not _type_matches(entry.value_type, setting.value_type):
                raise WrongSettingType(
                    name, _type_name(entry.value_type), _type_name(setting.value_type)
                )
        return entry

    def _check_value(self, name: str, entry: _Entry, value: Any) -> None:
        if not _type_matches(type(value), entry.value_type):
            raise WrongSettingType(name, _type_name(entry.value_type), _type_name(type(value)))

    def get(self, key: Key | str) -> Any:
        """Return the current value of a setting."""
        return self._entry(key).value

    def set(self, key: Key | str, value: Any) -> None:
        """Replace the value of a setting with one of the same type."""
        entry = self._entry(key)
        self._check_value(_name_of(key), entry, value)
        entry.value = value

    def check(self, setting: Key | str, other: Any) -> bool:
        """Whether the setting currently equals ``other``, which must be of its type."""
        entry = self._entry(setting)
        self._check_value(_name_of(setting), entry, other)
        return bool(other == entry.value)

    def get_default(self, setting: Key | str, value_type: type | None = None) -> Any:
        """Construct and return a fresh default value of a setting."""
        entry = self._entry(setting)
        value = entry.default_constructor()
        if value_type is not None and not _type_matches(type(value), value_type):
            raise WrongSettingType(
                _name_of(setting), _type_name(entry.value_type), _type_name(value_type)
            )
        return value

    def reset_setting(self, setting: Key | str) -> None:
        """Restore one setting to its default value."""
        name = _name_of(setting)
        try:
            entry = self._entries[name]
        except KeyError:
            raise SettingDoesNotExist(name) from None
        entry.reset()

    def reset_all(self) -> None:
        """Restore every setting to its default value."""
        for entry in self._entries.values():
            entry.reset()

    def __getitem__(self, key: Key | str) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key | str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (Key, str)):
            return _name_of(key) in self._entries
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{name!r}: {entry.value!r}" for name, entry in self._entries.items())
        return "{" + body + "}"


def define_keys(**kwargs: type) -> SimpleNamespace:
    """Create keys from ``name=type`` pairs, exposed as upper-case attributes."""
    return SimpleNamespace(
        **{name.upper(): Key(name.lower(), value_type) for name, value_type in kwargs.items()}
    )