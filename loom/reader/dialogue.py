"""Dialogue-line preprocessing.

A bare source line of the form ``Speaker: Text`` is shorthand for
``(say Speaker "Text")``. The rewrite is a pure text-to-text pass applied
once per line before tokenizing, so it can be exercised without the lexer.

Lines inside an open delimiter or an unterminated string are left alone,
and the number of lines never changes (token locations stay valid).
"""

from __future__ import annotations

import re

DIALOGUE_SEPARATOR = ": "

# A speaker is a single bare token: no whitespace, delimiters, quotes or
# comment markers, and not a keyword marker or keyword literal.
_SPEAKER_RE = re.compile(r'[^\s()\[\]{}<>";:#][^\s()\[\]{}<>";]*')

_OPENERS = "([{<"
_CLOSERS = ")]}>"


def dialogue_line(line: str) -> str | None:
    """Rewrite one line as a `say` call, or return None if it is not dialogue."""
    stripped = line.strip()
    speaker, sep, text = stripped.partition(DIALOGUE_SEPARATOR)
    if not sep or not _SPEAKER_RE.fullmatch(speaker):
        return None
    # strings have no escapes, so quoted text cannot be wrapped
    if '"' in text:
        return None
    return f'(say {speaker} "{text.strip()}")'


def _scan(line: str, depth: int, in_string: bool) -> tuple[int, bool]:
    """Track delimiter depth and string state across one line."""
    for ch in line:
        if in_string:
            if ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == ";":
            break
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
    return depth, in_string


def preprocess_dialogue(source: str) -> str:
    depth = 0
    in_string = False
    out: list[str] = []
    for line in source.split("\n"):
        if depth == 0 and not in_string:
            rewritten = dialogue_line(line)
            if rewritten is not None:
                out.append(rewritten)
                continue
        depth, in_string = _scan(line, depth, in_string)
        out.append(line)
    return "\n".join(out)
