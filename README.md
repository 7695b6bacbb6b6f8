# markbook

Building blocks for a plain-text bookmark manager: a line-based record
format, section-delimited files, typed settings, a filterable item buffer,
a small nested command system and an adjacency-matrix graph.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The record format

Every stored item is one line. Fields are introduced by tokens such as
`<name>` or `<tags>`, and list fields separate their values with `<,>`
(`markbook.field.DELIM`):

```
<name> hello there <children> general <,> kenobi <info> blast them <tags> wow <,> nice
```

A file holds one or more sections, each opened and closed by a marker line.
`markbook.tokens` defines `SectionTokens` and three instances of it,
`INFO`, `UNSORTED` and `CATEGORY`; for example `INFO.begin` is
`#INFO_BEGIN`, `INFO.end` is `#INFO_END` and `CATEGORY["sub"]` is `<sub>`.

- `markbook.field` – `Field` (a `[start, end)` span, `get(source)`, `+ offset`)
  and `ListField`, a list of fields.
- `markbook.content_string` – `ContentString`, the line text; `push` and
  `extend` append values and return their fields, and `has_been_pushed_to`
  tells whether anything was appended since it was created.
- `markbook.pattern_match` – `split_list_field`, `split_by_delim_to_ranges`,
  `join_with_delim`, `range_trim`, `substring_location`, `write_delim_list`
  and `write_list_field`.
- `markbook.storeable` – `Storeable`, the abstract base every record follows
  (`from_string`, `from_content_string`, `to_line`, `get`, `set`, `push`,
  `is_edited`). A subclass that is to be read or written in sections also
  sets the class attributes `ITEM_NAME`, `TOKEN_BEGIN` and `TOKEN_END`.
- `markbook.persist` – `load(cls, reader)` reads the first section of `cls`
  records from a text reader; `load_from(cls, lines)` reads one section from
  `(line_number, text)` pairs and leaves the iterator just past the section's
  end line, so consecutive sections can be read; `save(cls, writer, items)`
  writes a section.
- `markbook.errors` – `ParseError`, `LineParseError`, `PropertyDoesNotExist`
  and the `ListProperty` / `SingleProperty` values used by `get` and `set`.

`markbook.reference.Reference` is a record with a name, child names, an info
text and tags:

```python
from markbook.reference import Reference

item = Reference.from_string(
    "<name> hello there <children> general <,> kenobi <info> blast them <tags> wow <,> nice",
    None,
)
item.push_tag("classic")
print(item.to_line())
print(item.pretty())
```

`Reference` does not define section markers, so to use it with
`markbook.persist` give it `ITEM_NAME`, `TOKEN_BEGIN` and `TOKEN_END` in a
subclass.

## Settings

`markbook.settings` stores typed values with defaults that can be restored:

```python
from markbook.settings import SettingsBuilder, define_keys

keys = define_keys(verbose=bool, greeting=str)
settings = (
    SettingsBuilder()
    .add(keys.VERBOSE, False)
    .add(keys.GREETING, "world")
    .build()
)
settings[keys.GREETING] = "there"
settings.check("greeting", "there")   # True
settings.reset_setting("greeting")
settings.get_default("greeting")      # "world"
```

`SettingsBuilder` also has `add_default(key)` (the key's type called with no
arguments) and `add_fn(key, constructor)`. `Settings` offers `get`, `set`,
`check`, `get_default`, `reset_setting`, `reset_all` and item access by key
or name. Reading a missing setting raises `SettingDoesNotExist`; using a
value of the wrong type raises `WrongSettingType`. Both derive from
`SettingsError`.

## Buffers and commands

`markbook.container.BufferStorage` combines the stored items (`Storage`),
the current filter over them (`Buffer`, where no index list means every
item) and the selected item (`Selected`). `get_selected` and
`get_index_and_selected` raise `NothingSelected` or `InvalidSelection`.

A command is any callable that takes a list of argument strings and raises a
`CommandError` (`UsageError`, `ExecutionError` or `CommandLookupError`) when
it fails. `markbook.command_map.Builder` collects commands into a
`CommandMap`; a map is itself a command, so maps can be nested. Every map
answers `help` and `help COMMAND`, and `lookup_backup(name)` forwards calls
of unknown commands to the named command.

`markbook.commands` holds ready-made commands over a `BufferStorage`:
`Count`, `List`, `Print`, `Select`, `Set`, `Push`, `Reset`, `Load`,
`LoadAll`, `Save` and `SaveAll`.

```python
from markbook.command_map import Builder
from markbook.commands import Count, List, Select
from markbook.container import BufferStorage

items = BufferStorage()
commands = (
    Builder()
    .name("reference")
    .push("count", "count items", Count(items))
    .push("list", None, List(items))
    .push("select", "select an item\nusage: select INDEX", Select(items))
    .build()
)
commands.call("count", [])   # prints "total: 0, in buffer: All"
```

`markbook.parse_command.parse_command` splits an input line into arguments,
keeping double-quoted text together.

## Graph

`markbook.graph.Graph(node_count)` is a directed graph stored as an
adjacency matrix, with `is_edge` and `set_edge`; an index outside the graph
raises `InvalidNodeError`. `Graph.from_nodes` builds one from
`(identifier, child_identifiers)` pairs, such as a category hierarchy.

## What is not included

The package has no bookmark, category or info record types, no text or
regular-expression filters, sorting or de-duplication commands, and no
interactive prompt that reads commands from standard input. It provides the
pieces such a program is built from.

## Command line

```
markbook-reference
```

parses a sample reference record and prints it in line form and in its
readable form.