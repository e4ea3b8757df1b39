"""Textual renderings of Loom expressions and values.

- render(expr): source text that reads back to an equal expression tree.
- display(value): the human-facing form used by `format`, `print` and `save`.
"""

from __future__ import annotations

from io import StringIO

from loom import LispValue, SExpression
from loom.types.callable import NativeCallable
from loom.types.expression import Application
from loom.types.sentinel import NilType, TrueType, ErrorType
from loom.types.symbol import Symbol, Keyword


def format_number(n: float) -> str:
    if n.is_integer() and abs(n) < 1e16:
        return str(int(n))
    return repr(n)


def render(expr: SExpression) -> str:
    with StringIO() as buffer:
        _render_into(buffer, expr)
        return buffer.getvalue()


def _render_into(buffer: StringIO, expr: SExpression) -> None:
    match expr:
        case Application(operator=op, positional=args, keyword=kwargs):
            buffer.write("(")
            _render_into(buffer, op)
            for arg in args:
                buffer.write(" ")
                _render_into(buffer, arg)
            for name, value in kwargs.items():
                buffer.write(f" :{name} ")
                _render_into(buffer, value)
            buffer.write(")")
        case list():
            buffer.write("[")
            for i, item in enumerate(expr):
                if i:
                    buffer.write(" ")
                _render_into(buffer, item)
            buffer.write("]")
        case dict():
            # Tables only appear in trees built at runtime; render as sugar
            buffer.write("{")
            for i, (k, v) in enumerate(expr.items()):
                if i:
                    buffer.write(" ")
                buffer.write(f"{Keyword.SIGIL}{k} ")
                _render_into(buffer, v)
            buffer.write("}")
        case str():
            buffer.write(f'"{expr}"')
        case float():
            buffer.write(format_number(expr))
        case _:
            buffer.write(display(expr))


def display(value: LispValue) -> str:
    """Return the display form of a runtime value (strings unquoted)."""
    match value:
        case str():
            return value
        case float():
            return format_number(value)
        case NilType():
            return "nil"
        case TrueType():
            return "true"
        case ErrorType():
            return "error"
        case Symbol() | Keyword():
            return str(value)
        case list():
            return "[" + " ".join(display(v) for v in value) + "]"
        case dict():
            return "{" + " ".join(f"{Keyword.SIGIL}{k} {display(v)}" for k, v in value.items()) + "}"
        case Application():
            return render(value)
        case NativeCallable():
            return repr(value)
    return str(value)
