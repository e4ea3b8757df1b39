from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from loom import LispValue, EvaluatorFn
from loom.config import get_load_roots
from loom.errors import LoomIOError
from loom.reader import read_source
from loom.types.environment import Environment
from loom.types.sentinel import Nil

logger = logging.getLogger(__name__)


def resolve_path(name: str) -> Optional[Path]:
    """Find `name` as given (relative to the working directory), then under LOOM_PATH."""
    candidate = Path(name)
    if candidate.is_file():
        return candidate
    if candidate.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def read_text(name: str) -> str:
    p = resolve_path(name)
    if p is None:
        raise LoomIOError(f"Cannot find file '{name}' (searched working directory and LOOM_PATH)")
    logger.debug("Loading %s from %s", name, p)
    try:
        return p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LoomIOError(f"Cannot read file '{p}': {e}") from e


def include_file(name: str, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate every form of a file against the caller's environment.

    Bindings made by the file persist in `env`. Returns the value of the last
    form, or nil for an empty file. Syntax and evaluation errors propagate.
    """
    result: LispValue = Nil
    for expr in read_source(read_text(name)):
        result = evaluate_fn(expr, env)
    return result


def write_text(name: str, text: str) -> None:
    """Write `text` to `name`, creating parent directories as needed."""
    p = Path(name)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding='utf-8')
    except OSError as e:
        raise LoomIOError(f"Cannot write file '{p}': {e}") from e
    logger.debug("Saved %d characters to %s", len(text), p)
