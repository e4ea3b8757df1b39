from loom import EvaluatorFn
from loom import SExpression, LispValue
from loom.types.environment import Environment
from loom.types.sentinel import TRUE


def evaluate_body(
    body: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = TRUE
    for e in body:
        result = evaluate_fn(e, env)
    return result


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return evaluate_body(tail, env, evaluate_fn)
