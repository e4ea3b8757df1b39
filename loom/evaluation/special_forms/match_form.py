from loom import SExpression, LispValue, EvaluatorFn
from loom.errors import LoomTypeError
from loom.evaluation.special_forms.do_form import evaluate_body
from loom.printer import render
from loom.types.environment import Environment
from loom.types.expression import Application
from loom.types.sentinel import Nil
from loom.types.symbol import Symbol
from loom.types.value import is_equal

WILDCARD = Symbol("_")


def _clause_parts(clause: SExpression) -> tuple[SExpression, list[SExpression]]:
    match clause:
        case Application(operator=head, positional=body):
            return head, list(body)
        case [head, *body]:
            return head, body
    raise LoomTypeError(f"match clause must be a (pattern body...) list, got {render(clause)}")


def match_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(match subject (pattern body...) ...)

    The subject is evaluated once. Clauses are tried in order; the first whose
    evaluated pattern is structurally equal to the subject (or whose pattern
    is `_`) has its body evaluated. No match yields nil.
    """
    subject = evaluate_fn(tail[0], env)
    for clause in tail[1:]:
        head, body = _clause_parts(clause)
        if head == WILDCARD or is_equal(evaluate_fn(head, env), subject):
            return evaluate_body(body, env, evaluate_fn)
    return Nil
