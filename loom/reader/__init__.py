from __future__ import annotations

from loom import SExpression
from loom.reader.dialogue import preprocess_dialogue
from loom.reader.lexer import Token, TokenKind, tokenize
from loom.reader.parser import read, read_all, split_forms


def read_source(source: str) -> list[SExpression]:
    """Preprocess dialogue lines, tokenize and read every top-level form."""
    return read_all(tokenize(preprocess_dialogue(source)))


__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "preprocess_dialogue",
    "read",
    "read_all",
    "split_forms",
    "read_source",
]
