from loom import SExpression, LispValue, EvaluatorFn
from loom.errors import LoomTypeError
from loom.modules.file_loader import include_file
from loom.printer import render
from loom.reader.parser import GET, FIELD_SEPARATOR
from loom.types.environment import Environment
from loom.types.expression import Application
from loom.types.symbol import Symbol, Keyword


def _file_name(target: SExpression) -> str:
    match target:
        case Symbol():
            return target.id
        case str():
            return target
        # `intro.loom` reads as field access; put the dotted name back together
        case Application(operator=operator, positional=parts, keyword=keyword) if (
            operator == GET and not keyword and all(isinstance(p, (Symbol, Keyword)) for p in parts)
        ):
            return FIELD_SEPARATOR.join(p.id if isinstance(p, Symbol) else p.name for p in parts)
    raise LoomTypeError(f"run expects a file name, got {render(target)}")


def run_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(run path) includes a file named by a raw symbol or string literal."""
    return include_file(_file_name(tail[0]), env, evaluate_fn)
