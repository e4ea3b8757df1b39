"""Core evaluator for the Loom interpreter.

Recursive and environment-threading: every call receives the same mutable
Environment, so bindings made by one form are visible to the next.
"""

from __future__ import annotations

from loom import SExpression, LispValue
from loom.errors import LoomCallError
from loom.evaluation.apply import apply
from loom.printer import display
from loom.types.callable import NativeCallable
from loom.types.environment import Environment
from loom.types.expression import Application
from loom.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against `env`.

    - Symbols are looked up (unbound -> LoomUnboundSymbol).
    - Applications evaluate their operator, then dispatch on function/macro.
    - Bracket lists are data and evaluate to themselves.
    - Every other atom is self-evaluating.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Application(operator=operator, positional=positional, keyword=keyword):
            head = evaluate(operator, env)
            if not isinstance(head, NativeCallable):
                where = f" at {expr.location}" if expr.location is not None else ""
                raise LoomCallError(f"Cannot apply non-function {display(head)}{where}")
            return apply(head, list(positional), keyword, env, evaluate)

    # --- Atoms, lists and sentinels return as-is ---
    return expr
