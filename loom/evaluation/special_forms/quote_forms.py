from loom import SExpression, LispValue, EvaluatorFn
from loom.types.environment import Environment
from loom.types.sentinel import Nil


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if not tail:
        return Nil
    if len(tail) == 1:
        return tail[0]
    return list(tail)
