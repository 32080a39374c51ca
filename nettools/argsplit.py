"""Splitting of configuration lines into whitespace-separated fields."""

from __future__ import annotations

MAX_ARGS = 31
_BLANKS = " \t"
_QUOTES = "\"'"


def split_args(line: str) -> list[str]:
    """Split a line into at most 31 fields.

    Fields are separated by spaces or tabs. A field starting with a single
    or double quote runs to the next matching quote not preceded by a
    backslash; the backslash is kept.
    """
    args: list[str] = []
    pos = 0
    end = len(line)
    while pos < end and len(args) < MAX_ARGS:
        while pos < end and line[pos] in _BLANKS:
            pos += 1
        start = pos
        if pos < end and line[pos] in _QUOTES:
            want = line[pos]
            pos += 1
            start = pos
            while pos < end:
                if line[pos] == want and line[pos - 1] != "\\":
                    break
                pos += 1
            args.append(line[start:pos])
            if pos < end:
                pos += 1
        else:
            while pos < end and line[pos] not in _BLANKS:
                pos += 1
            args.append(line[start:pos])
        while pos < end and line[pos] in _BLANKS:
            pos += 1
    return args