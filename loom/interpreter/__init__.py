from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loom import SExpression, LispValue
from loom.builtin.env_builtin import register
from loom.config import get_random_seed
from loom.errors import LoomError, LoomIOError, LoomUnterminatedString
from loom.evaluation.evaluator import evaluate
from loom.reader import preprocess_dialogue, tokenize, read, read_source, split_forms
from loom.reader.lexer import Token, OPENERS, CLOSERS
from loom.types.environment import Environment
from loom.types.sentinel import Nil

logger = logging.getLogger(__name__)


def _is_open(span: list[Token]) -> bool:
    depth = 0
    for t in span:
        if t.kind in OPENERS:
            depth += 1
        elif t.kind in CLOSERS:
            depth -= 1
    return depth > 0


@dataclass
class FormResult:
    """Outcome of one top-level form in batch mode."""
    index: int
    expr: Optional[SExpression] = None
    value: LispValue = Nil
    error: Optional[LoomError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    """
    Orchestrates reading and evaluating Loom code.
    Maintains one Environment across calls, so bindings persist between forms.
    """

    def __init__(self, *, seed: Optional[int] = None, prelude: Optional[str] = None):
        if seed is None:
            seed = get_random_seed()
        self.env: Environment = Environment(seed)
        register(self.env)

        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value. Errors propagate."""
        result: LispValue = Nil
        for expr in read_source(code):
            result = evaluate(expr, self.env)
        return result

    def run_source(self, code: str) -> list[FormResult]:
        """Evaluate `code` form by form, recovering from errors.

        A syntax or evaluation error only aborts its own top-level form; it is
        logged and recorded, and evaluation continues with the next form.
        Bindings made by earlier forms are kept. An unterminated string runs
        to the end of input, so it fails the form it was opened in and every
        form before it still runs.
        """
        unterminated: Optional[LoomUnterminatedString] = None
        try:
            tokens = tokenize(preprocess_dialogue(code))
        except LoomUnterminatedString as e:
            unterminated = e
            tokens = e.tokens

        spans = split_forms(tokens)
        if unterminated is not None and spans and _is_open(spans[-1]):
            # the group the string was opened in
            spans.pop()

        results: list[FormResult] = []
        for index, span in enumerate(spans):
            result = FormResult(index)
            try:
                result.expr = read(span)
                result.value = evaluate(result.expr, self.env)
            except LoomError as e:
                logger.warning("Skipping form %d: %s", index, e)
                result.error = e
            results.append(result)

        if unterminated is not None:
            logger.warning("Skipping form %d: %s", len(results), unterminated)
            results.append(FormResult(len(results), error=unterminated))
        return results

    def run_file(self, path: str | Path) -> list[FormResult]:
        try:
            code = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise LoomIOError(f"Cannot read file '{path}': {e}") from e
        logger.debug("Running %s", path)
        return self.run_source(code)
