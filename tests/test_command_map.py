import pytest

from markbook.command_map import (
    Builder,
    CommandLookupError,
    CommandMap,
    ExecutionError,
    UsageError,
)


def recorder(calls, label):
    def command(args):
        calls.append((label, list(args)))

    return command


def test_call_dispatches_with_arguments():
    calls = []
    cmap = Builder().push("a", None, recorder(calls, "a")).push("b", None, recorder(calls, "b")).build()
    result = cmap.call("b", ["x", "y"])
    assert result is cmap
    assert calls == [("b", ["x", "y"])]


def test_unknown_command_without_fallback():
    cmap = Builder().push("a", None, lambda args: None).build()
    with pytest.raises(CommandLookupError):
        cmap.call("zzz", [])


def test_fallback_forwards_name_and_args():
    calls = []
    cmap = (
        Builder()
        .lookup_backup("bookmark")
        .push("bookmark", None, recorder(calls, "bookmark"))
        .build()
    )
    cmap.call("list", ["3"])
    assert calls == [("bookmark", ["list", "3"])]


def test_fallback_missing_command():
    cmap = Builder().lookup_backup("missing").build()
    with pytest.raises(CommandLookupError):
        cmap.call("list", [])


def test_help_for_help_without_name():
    cmap = Builder().build()
    assert cmap.help("help") == "show help for a command\nusage: help COMMAND"


def test_help_for_help_with_name():
    cmap = Builder().name("bookmark").build()
    assert cmap.name == "bookmark"
    assert cmap.help("help") == "show help for a command\nusage: bookmark help COMMAND"


def test_help_of_commands():
    cmap = (
        Builder()
        .push("print", "print selected bookmark\nusage: print", lambda args: None)
        .push("load", None, lambda args: None)
        .build()
    )
    assert cmap.help("print") == "print selected bookmark\nusage: print"
    assert cmap.help("load") is None
    assert cmap.help("nothing") is None


def test_help_listing(capsys):
    cmap = (
        Builder()
        .push("new", "add a new empty bookmark", lambda args: None)
        .push("load", None, lambda args: None)
        .build()
    )
    cmap.call("help", [])
    out = capsys.readouterr().out.splitlines()
    assert out == ["available commands:", "- new, add a new empty bookmark", "- load"]


def test_help_of_single_command(capsys):
    cmap = Builder().push("sort", "sort bookmarks by url", lambda args: None).build()
    cmap.call("help", ["sort"])
    assert capsys.readouterr().out == "sort bookmarks by url\n"


def test_help_missing_command():
    cmap = Builder().build()
    with pytest.raises(ExecutionError, match="found no help for x"):
        cmap.call("help", ["x"])


def test_help_too_many_args():
    cmap = Builder().build()
    with pytest.raises(UsageError, match="help called with incorrect number of arguments"):
        cmap.call("help", ["a", "b"])


def test_call_as_command_requires_subcommand():
    cmap = Builder().build()
    with pytest.raises(ExecutionError, match="needs to be called with a subcommand"):
        cmap([])


def test_nested_maps():
    calls = []
    inner = Builder().name("inner").push("go", None, recorder(calls, "go")).build()
    outer = Builder().push("inner", None, inner).build()
    outer.call("inner", ["go", "1"])
    assert calls == [("go", ["1"])]


def test_command_errors_propagate():
    def failing(args):
        raise UsageError("bad")

    cmap = Builder().push("f", None, failing).build()
    with pytest.raises(UsageError, match="bad"):
        cmap.call("f", [])


def test_later_push_replaces_earlier():
    calls = []
    cmap = Builder().push("a", None, recorder(calls, 1)).push("a", None, recorder(calls, 2)).build()
    cmap.call("a", [])
    assert calls == [(2, [])]
    assert isinstance(cmap, CommandMap)