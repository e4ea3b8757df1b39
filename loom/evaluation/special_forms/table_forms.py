"""Table construction and chained lookup.

    (table #a 1 #b 2)      {#a 1 #b 2}      (table :a 1 :b 2)
    (get t a b)            t.a.b
"""

from __future__ import annotations

from loom import SExpression, LispValue, EvaluatorFn
from loom.errors import LoomArityError, LoomTypeError
from loom.printer import render, display, format_number
from loom.types.environment import Environment
from loom.types.sentinel import Nil
from loom.types.symbol import Symbol, Keyword


def table_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    kwargs: dict[str, SExpression],
) -> LispValue:
    if len(tail) % 2 != 0:
        raise LoomArityError(
            f"table requires key/value pairs, got {len(tail)} operand(s)"
        )
    table: dict[str, LispValue] = {}
    for key, value_expr in zip(tail[::2], tail[1::2]):
        if not isinstance(key, Keyword):
            raise LoomTypeError(f"Table key must be a keyword, got {render(key)}")
        table[key.name] = evaluate_fn(value_expr, env)
    for name, value_expr in kwargs.items():
        table[name] = evaluate_fn(value_expr, env)
    return table


def _key_name(key: SExpression) -> str:
    if isinstance(key, Symbol):
        return key.id
    if isinstance(key, Keyword):
        return key.name
    if isinstance(key, float):
        return format_number(key)
    raise LoomTypeError(f"Table lookup key must be a symbol, got {render(key)}")


def get_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    current = evaluate_fn(tail[0], env)
    path = [render(tail[0])]
    for key in tail[1:]:
        name = _key_name(key)
        if not isinstance(current, dict):
            raise LoomTypeError(
                f"Cannot look up {name!r} in non-table {'.'.join(path)} = {display(current)}"
            )
        current = current.get(name, Nil)
        path.append(name)
    return current
