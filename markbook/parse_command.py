"""Splitting a command line into arguments."""

from __future__ import annotations

import re

_ARG_RE = re.compile(r'\s*"(.*?)"\s*|\Z')


def parse_command(line: str) -> list[str]:
    """Split on whitespace, keeping double-quoted text as single arguments."""
    args: list[str] = []
    next_start = 0
    for match in _ARG_RE.finditer(line):
        args.extend(line[next_start : match.start()].split())
        next_start = match.end()
        quoted = match.group(1)
        if quoted is not None:
            args.append(quoted)
    return args