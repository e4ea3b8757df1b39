"""
  Loom tokenizer

Single left-to-right pass over the characters with three modes:

    NORMAL   - delimiters, sugar, whitespace and symbol accumulation
    STRING   - characters are taken verbatim until the closing quote
    COMMENT  - characters are collected until the end of the line

Sugar is expanded while scanning, as if the text had been substituted:

    {  ->  (table        }  ->  )
    <  ->  (quote        >  ->  )

The only failure is input ending inside a string literal; the error keeps
the tokens produced up to that point.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loom.errors import LoomUnterminatedString
from loom.types.location import Location


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    SYMBOL = "symbol"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"


OPENERS = (TokenKind.LPAREN, TokenKind.LBRACKET)
CLOSERS = (TokenKind.RPAREN, TokenKind.RBRACKET)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    location: Location = field(compare=False)
    value: Optional[float] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.STRING:
            return f'"{self.text}"'
        return self.text


NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Character-level sugar: opening char -> head symbol of the canonical form
SUGAR_OPEN: dict[str, str] = {
    "{": "table",
    "<": "quote",
}
SUGAR_CLOSE = "}>"


class _Mode(Enum):
    NORMAL = 0
    STRING = 1
    COMMENT = 2


class _Lexer:
    def __init__(self, source: str, keep_comments: bool):
        self.source = source
        self.keep_comments = keep_comments
        self.tokens: list[Token] = []
        self.mode = _Mode.NORMAL
        self.buffer: list[str] = []
        self.start: Optional[Location] = None
        self.line = 1
        self.column = 0

    def emit(self, kind: TokenKind, text: str, location: Location) -> None:
        self.tokens.append(Token(kind, text, location))

    def flush_symbol(self) -> None:
        if not self.buffer:
            return
        text = "".join(self.buffer)
        if NUMBER_RE.fullmatch(text):
            self.tokens.append(Token(TokenKind.NUMBER, text, self.start, float(text)))
        else:
            self.emit(TokenKind.SYMBOL, text, self.start)
        self.buffer = []
        self.start = None

    def run(self) -> list[Token]:
        for ch in self.source:
            if ch == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            here = Location(self.line, self.column)

            if self.mode is _Mode.STRING:
                if ch == '"':
                    self.emit(TokenKind.STRING, "".join(self.buffer), self.start)
                    self.buffer = []
                    self.start = None
                    self.mode = _Mode.NORMAL
                else:
                    self.buffer.append(ch)
                continue

            if self.mode is _Mode.COMMENT:
                if ch == "\n":
                    if self.keep_comments:
                        self.emit(TokenKind.COMMENT, "".join(self.buffer), self.start)
                    self.buffer = []
                    self.start = None
                    self.mode = _Mode.NORMAL
                else:
                    self.buffer.append(ch)
                continue

            self.normal(ch, here)

        if self.mode is _Mode.STRING:
            raise LoomUnterminatedString("Unterminated string literal", self.start, self.tokens)
        if self.mode is _Mode.COMMENT:
            if self.keep_comments:
                self.emit(TokenKind.COMMENT, "".join(self.buffer), self.start)
        else:
            self.flush_symbol()
        return self.tokens

    def normal(self, ch: str, here: Location) -> None:
        if ch == "(":
            self.flush_symbol()
            self.emit(TokenKind.LPAREN, ch, here)
        elif ch == ")":
            self.flush_symbol()
            self.emit(TokenKind.RPAREN, ch, here)
        elif ch == "[":
            self.flush_symbol()
            self.emit(TokenKind.LBRACKET, ch, here)
        elif ch == "]":
            self.flush_symbol()
            self.emit(TokenKind.RBRACKET, ch, here)
        elif ch in SUGAR_OPEN:
            self.flush_symbol()
            self.emit(TokenKind.LPAREN, "(", here)
            self.emit(TokenKind.SYMBOL, SUGAR_OPEN[ch], here)
        elif ch in SUGAR_CLOSE:
            self.flush_symbol()
            self.emit(TokenKind.RPAREN, ")", here)
        elif ch == '"':
            self.flush_symbol()
            self.mode = _Mode.STRING
            self.start = here
        elif ch == ";":
            self.flush_symbol()
            self.mode = _Mode.COMMENT
            self.start = here
        elif ch.isspace():
            self.flush_symbol()
        else:
            if not self.buffer:
                self.start = here
            self.buffer.append(ch)


def tokenize(source: str, keep_comments: bool = False) -> list[Token]:
    """Turn source text into a list of Tokens.

    Comments are dropped unless `keep_comments` is set; the reader ignores
    COMMENT tokens either way. Raises LoomUnterminatedString if the input
    ends inside a string literal.
    """
    return _Lexer(source, keep_comments).run()
