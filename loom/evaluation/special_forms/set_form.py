from loom import EvaluatorFn
from loom import SExpression, LispValue
from loom.errors import LoomTypeError
from loom.printer import render
from loom.types.sentinel import Nil
from loom.types.symbol import Symbol
from loom.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value) / (set name value)
    The name is taken raw; the value is evaluated and bound in the flat environment.
    """
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LoomTypeError(f"Variable name must be a symbol, got {render(var_sym)}")
    value = evaluate_fn(val_expr, env)
    env.define(var_sym, value)
    return Nil
