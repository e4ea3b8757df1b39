"""
  Loom reader

Recursive descent from tokens to expression trees:

    - ( ... )       -> Application(operator, positional, keyword)
    - [ ... ]       -> list (data, never called)
    - ()            -> Nil
    - []            -> []
    - nil           -> Nil
    - #name         -> Keyword("name")
    - :name value   -> keyword operand inside an application
    - a.b.c         -> (get a b c)
    - numbers       -> float
    - strings       -> str
    - other symbols -> Symbol

Whole files are first split into top-level spans by bracket depth
(split_forms) so that a syntax error only affects its own form.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from loom import SExpression
from loom.errors import (
    LoomUnexpectedClosingDelimiter,
    LoomUnterminatedExpression,
    LoomMissingOpeningDelimiter,
)
from loom.reader.lexer import Token, TokenKind, OPENERS, CLOSERS, NUMBER_RE
from loom.types.expression import Application
from loom.types.location import Location
from loom.types.sentinel import Nil
from loom.types.symbol import Symbol, Keyword

KEYWORD_MARKER = ":"
FIELD_SEPARATOR = "."
GET = Symbol("get")

_MATCHING = {
    TokenKind.LPAREN: TokenKind.RPAREN,
    TokenKind.LBRACKET: TokenKind.RBRACKET,
}


def _significant(tokens: Sequence[Token]) -> list[Token]:
    return [t for t in tokens if t.kind is not TokenKind.COMMENT]


def keyword_marker(expr: SExpression) -> Optional[str]:
    """Return the keyword name if `expr` is a `:name` marker symbol."""
    if isinstance(expr, Symbol) and expr.id.startswith(KEYWORD_MARKER) and len(expr.id) > 1:
        return expr.id[len(KEYWORD_MARKER):]
    return None


class ArgState(Enum):
    IDLE = 0
    AWAITING_VALUE = 1


class ApplicationBuilder:
    """Collects the elements of a parenthesized group into an Application.

    The first element fed is the operator. Afterwards the builder is a
    two-state machine: in IDLE a `:name` marker moves to AWAITING_VALUE and
    any other element is positional; in AWAITING_VALUE exactly the next
    element becomes the value of that keyword.
    """

    def __init__(self, location: Optional[Location] = None):
        self.location = location
        self.operator: SExpression = None
        self.has_operator = False
        self.positional: list[SExpression] = []
        self.keyword: dict[str, SExpression] = {}
        self.state = ArgState.IDLE
        self.pending: Optional[str] = None

    def feed(self, expr: SExpression) -> None:
        if not self.has_operator:
            self.operator = expr
            self.has_operator = True
            return
        if self.state is ArgState.AWAITING_VALUE:
            self.keyword[self.pending] = expr
            self.pending = None
            self.state = ArgState.IDLE
            return
        name = keyword_marker(expr)
        if name is not None:
            self.pending = name
            self.state = ArgState.AWAITING_VALUE
        else:
            self.positional.append(expr)

    def finish(self) -> SExpression:
        if not self.has_operator:
            return Nil
        if self.state is ArgState.AWAITING_VALUE:
            # Dangling marker: the keyword is present but has no value
            self.keyword[self.pending] = Nil
            self.state = ArgState.IDLE
        return Application(
            self.operator, tuple(self.positional), dict(self.keyword), self.location
        )


def _plain_name(part: str) -> bool:
    """True if `part` reads back as a Symbol of the same name."""
    return (
        bool(part)
        and part != "nil"
        and not part.startswith((Keyword.SIGIL, KEYWORD_MARKER))
        and not NUMBER_RE.fullmatch(part)
    )


def _field_access(text: str, location: Optional[Location]) -> Optional[Application]:
    """Desugar `a.b.c` to (get a b c); None if the text is not a field path.

    A numeric key such as the `0` in `t.0` becomes the keyword `#0`, so the
    lookup renders and re-reads unchanged.
    """
    target, *parts = text.split(FIELD_SEPARATOR)
    if not _plain_name(target):
        return None
    keys: list[SExpression] = []
    for part in parts:
        if NUMBER_RE.fullmatch(part):
            keys.append(Keyword(part))
        elif _plain_name(part):
            keys.append(Symbol(part))
        else:
            return None
    return Application(GET, (Symbol(target), *keys), {}, location)


def read_atom(token: Token) -> SExpression:
    if token.kind is TokenKind.NUMBER:
        return token.value
    if token.kind is TokenKind.STRING:
        return token.text
    text = token.text
    if text == "nil":
        return Nil
    if text.startswith(Keyword.SIGIL) and len(text) > 1:
        return Keyword(text[len(Keyword.SIGIL):])
    if FIELD_SEPARATOR in text:
        access = _field_access(text, token.location)
        if access is not None:
            return access
    return Symbol(text)


def _read_group(tokens: Sequence[Token], pos: int) -> tuple[SExpression, int]:
    """Read the group opened at tokens[pos]; return (expr, index after closer)."""
    opener = tokens[pos]
    closer_kind = _MATCHING[opener.kind]
    elements: list[SExpression] = []
    i = pos + 1
    while i < len(tokens):
        t = tokens[i]
        if t.kind in CLOSERS:
            if t.kind is not closer_kind:
                raise LoomUnexpectedClosingDelimiter(
                    f"Unexpected {t.text!r} while reading {opener.text!r} group "
                    f"opened at {opener.location}",
                    t.location,
                )
            if opener.kind is TokenKind.LBRACKET:
                return elements, i + 1
            builder = ApplicationBuilder(opener.location)
            for e in elements:
                builder.feed(e)
            return builder.finish(), i + 1
        if t.kind in OPENERS:
            expr, i = _read_group(tokens, i)
            elements.append(expr)
            continue
        elements.append(read_atom(t))
        i += 1
    raise LoomUnterminatedExpression(
        f"Unterminated expression: {opener.text!r} is never closed", opener.location
    )


def read(tokens: Sequence[Token]) -> SExpression:
    """Read exactly one expression from `tokens`.

    Empty input reads as Nil. A single bare atom is returned as-is;
    several top-level elements raise LoomMissingOpeningDelimiter.
    """
    tokens = _significant(tokens)
    if not tokens:
        return Nil
    first = tokens[0]
    if first.kind in CLOSERS:
        raise LoomUnexpectedClosingDelimiter(f"Unexpected {first.text!r}", first.location)
    if first.kind in OPENERS:
        expr, end = _read_group(tokens, 0)
    else:
        expr, end = read_atom(first), 1
    if end < len(tokens):
        extra = tokens[end]
        if extra.kind in CLOSERS:
            raise LoomUnexpectedClosingDelimiter(f"Unexpected {extra.text!r}", extra.location)
        raise LoomMissingOpeningDelimiter(
            "Expression missing opening paren/bracket", extra.location
        )
    return expr


def split_forms(tokens: Sequence[Token]) -> list[list[Token]]:
    """Split a token stream into top-level spans by bracket depth.

    Never raises: a stray closer becomes a span of its own and an
    unterminated group runs to the end of input, so the error surfaces
    when that span is read.
    """
    spans: list[list[Token]] = []
    current: list[Token] = []
    depth = 0
    for t in _significant(tokens):
        if depth == 0:
            if t.kind in OPENERS:
                current = [t]
                depth = 1
            else:
                spans.append([t])
            continue
        current.append(t)
        if t.kind in OPENERS:
            depth += 1
        elif t.kind in CLOSERS:
            depth -= 1
            if depth == 0:
                spans.append(current)
                current = []
    if depth > 0:
        spans.append(current)
    return spans


def read_all(tokens: Sequence[Token]) -> list[SExpression]:
    """Read every top-level form; raises on the first syntax error."""
    return [read(span) for span in split_forms(tokens)]
