from loom import SExpression, LispValue, EvaluatorFn
from loom.errors import LoomTypeError
from loom.printer import display
from loom.types.environment import Environment
from loom.types.sentinel import Nil


def random_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(random [a b c]) evaluates and returns one element chosen uniformly."""
    choices = evaluate_fn(tail[0], env)
    if not isinstance(choices, list):
        raise LoomTypeError(f"random expects a list, got {display(choices)}")
    if not choices:
        return Nil
    return evaluate_fn(env.rng.choice(choices), env)
