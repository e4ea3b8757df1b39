"""Application engine for Loom.

Centralizes the function/macro calling protocol:
- Functions receive evaluated positional arguments.
- Macros receive the raw operand expressions plus the evaluator, and decide
  themselves what to evaluate and in which order.
- Keyword operands are always passed raw, and only to callables whose
  signature tag asks for them; every other callable ignores them.
"""

from __future__ import annotations

from loom import LispValue, SExpression, EvaluatorFn
from loom.errors import LoomCallError
from loom.printer import display
from loom.types.callable import Function, Macro
from loom.types.environment import Environment


def apply_function(
    fn: Function,
    args: list[LispValue],
    kwargs: dict[str, SExpression],
    env: Environment,
) -> LispValue:
    fn.check_signature(len(args))
    if fn.accepts_keywords:
        return fn.operation(env, args, kwargs)
    return fn.operation(env, args)


def apply_macro(
    macro: Macro,
    tail: list[SExpression],
    kwargs: dict[str, SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    macro.check_signature(len(tail))
    if macro.accepts_keywords:
        return macro.operation(tail, env, evaluate_fn, kwargs)
    return macro.operation(tail, env, evaluate_fn)


def apply(
    head: LispValue,
    tail: list[SExpression],
    kwargs: dict[str, SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated operator to raw operands.

    Function operands are evaluated left to right before the call; the
    first error propagates and the remaining operands are not evaluated.
    """
    if isinstance(head, Macro):
        return apply_macro(head, tail, kwargs, env, evaluate_fn)
    if isinstance(head, Function):
        args = [evaluate_fn(arg, env) for arg in tail]
        return apply_function(head, args, kwargs, env)
    raise LoomCallError(f"Cannot apply non-function {display(head)}")
