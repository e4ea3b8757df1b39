from loom import EvaluatorFn
from loom import SExpression, LispValue
from loom.errors import LoomArityError
from loom.types.sentinel import Nil, is_truthy
from loom.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        if len(tail) < 2:
            raise LoomArityError("if has no expression for a true condition")
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
