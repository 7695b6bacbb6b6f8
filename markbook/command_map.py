"""Named commands that can be called with arguments and nested inside each other."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

Command = Callable[[list[str]], None]
"""A command takes its arguments and raises a CommandError when it fails."""


class CommandError(Exception):
    """A command could not be carried out."""


class UsageError(CommandError):
    """A command was called the wrong way."""


class ExecutionError(CommandError):
    """A command failed while running."""


class CommandLookupError(CommandError, LookupError):
    """No command has the requested name."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"command not found: {self.name}" if self.name else "command not found"


@dataclass
class _Entry:
    command: Command
    help: str | None


class Builder:
    """Collects commands and settings, then builds a :class:`CommandMap`."""

    def __init__(self) -> None:
        self._commands: list[tuple[str, _Entry]] = []
        self._name = ""
        self._fallback: str | None = None

    def push(self, name: str, help_text: str | None, command: Command) -> Builder:
        """Add a command under ``name`` with an optional help text."""
        self._commands.append((name, _Entry(command, help_text)))
        return self

    def name(self, name: str) -> Builder:
        """Set the name of the map, used in help messages."""
        self._name = name
        return self

    def lookup_backup(self, backup: str | None) -> Builder:
        """Forward calls of unknown commands to the command named ``backup``."""
        self._fallback = backup
        return self

    def build(self) -> CommandMap:
        """Create the command map."""
        return CommandMap(dict(self._commands), self._name, self._fallback)


class CommandMap:
    """A set of named commands; itself a command, so maps can be nested."""

    def __init__(
        self,
        commands: dict[str, _Entry] | None = None,
        name: str = "",
        fallback: str | None = None,
    ) -> None:
        self._commands = dict(commands or {})
        self._name = name
        self._fallback = fallback

    @property
    def name(self) -> str:
        """The name of the map."""
        return self._name

    def call(self, name: str, args: Sequence[str]) -> CommandMap:
        """Call the command ``name`` with ``args`` and return the map."""
        args = list(args)
        if name == "help":
            return self._call_help(args)

        entry = self._commands.get(name)
        if entry is not None:
            entry.command(args)
            return self

        if self._fallback is None:
            raise CommandLookupError(name)
        backup = self._commands.get(self._fallback)
        if backup is None:
            raise CommandLookupError(self._fallback)
        backup.command([name, *args])
        return self

    def _call_help(self, args: list[str]) -> CommandMap:
        if not args:
            print("available commands:")
            for command, entry in self._commands.items():
                if entry.help is not None:
                    print(f"- {command}, {entry.help}")
                else:
                    print(f"- {command}")
            return self
        if len(args) == 1:
            text = self.help(args[0])
            if text is None:
                raise ExecutionError(f"found no help for {args[0]}")
            print(text)
            return self
        raise UsageError("help called with incorrect number of arguments")

    def help(self, name: str) -> str | None:
        """Return the help text of a command, or None if there is none."""
        if name == "help":
            if not self._name:
                return "show help for a command\nusage: help COMMAND"
            return f"show help for a command\nusage: {self._name} help COMMAND"
        entry = self._commands.get(name)
        return None if entry is None else entry.help

    def __call__(self, args: Sequence[str]) -> None:
        args = list(args)
        if not args:
            raise ExecutionError("needs to be called with a subcommand")
        self.call(args[0], args[1:])

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __repr__(self) -> str:
        return f"CommandMap(name={self._name!r}, commands={list(self._commands)!r})"