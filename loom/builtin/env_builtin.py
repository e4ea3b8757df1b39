"""Built-in functions for the Loom runtime environment.

Functions receive their arguments already evaluated, left to right. This
module defines arithmetic, equality, output, formatting and file helpers,
and the registration of all built-ins into a fresh Environment.
"""
from __future__ import annotations

from loom import LispValue
from loom.builtin import macro_builtin
from loom.errors import LoomTypeError, LoomArithmeticError
from loom.evaluation.evaluator import evaluate
from loom.modules.file_loader import include_file, write_text
from loom.printer import display
from loom.types.callable import Function
from loom.types.environment import Environment
from loom.types.sentinel import Nil, TRUE, ERROR, is_truthy
from loom.types.symbol import Symbol
from loom.types.value import is_equal


def _numbers(name: str, expr: list[LispValue]) -> list[float]:
    for x in expr:
        if not isinstance(x, float):
            raise LoomTypeError(f"All arguments to {name} must be numbers, got {display(x)}")
    return expr


def _string(name: str, what: str, x: LispValue) -> str:
    if not isinstance(x, str):
        raise LoomTypeError(f"{name} expects a string {what}, got {display(x)}")
    return x


# -------------------------------
# Equality and logic
# -------------------------------
def equals(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return true if the first argument equals every other argument, else nil."""
    if len(expr) <= 1:
        return TRUE
    first = expr[0]
    for other in expr[1:]:
        if not is_equal(first, other):
            return Nil
    return TRUE


def logical_not(env: Environment, expr: list[LispValue]) -> LispValue:
    """Logical NOT for a single value; only nil is falsey."""
    return Nil if is_truthy(expr[0]) else TRUE


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    return float(sum(_numbers("+", expr)))


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", expr)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    nums = _numbers("/", expr)
    try:
        if len(nums) == 1:
            return 1.0 / nums[0]
        result = nums[0]
        for x in nums[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise LoomArithmeticError("Division by zero") from None


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided (evaluated) arguments."""
    return list(expr)


# -------------------------------
# Output and formatting
# -------------------------------
def format_builtin(env: Environment, args: list[LispValue]) -> str:
    """Concatenate the display form of every argument."""
    return "".join(display(a) for a in args)


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print each argument's display form on its own line; returns nil."""
    for a in args:
        print(display(a))
    return Nil


def say(env: Environment, args: list[LispValue]) -> LispValue:
    """(say speaker line) prints `speaker: line`; returns nil."""
    speaker = _string("say", "speaker", args[0])
    line = _string("say", "line", args[1])
    print(f"{speaker}: {line}")
    return Nil


# -------------------------------
# Files and process
# -------------------------------
def load(env: Environment, args: list[LispValue]) -> LispValue:
    """(load "path") evaluates a file's forms in the current environment."""
    return include_file(_string("load", "path", args[0]), env, evaluate)


def save(env: Environment, args: list[LispValue]) -> LispValue:
    """(save value "path") writes the display form of value to path."""
    value, path = args
    write_text(_string("save", "path", path), display(value))
    return Nil


def exit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(exit [code]) terminates the process; not recoverable by drivers."""
    code = 0
    if args:
        code = int(_numbers("exit", args)[0])
    raise SystemExit(code)


BUILTIN_FUNCTIONS = [
    Function("+", add),
    Function("-", sub, min_args=1),
    Function("*", mul),
    Function("/", div, min_args=1),
    Function("=", equals),
    Function("not", logical_not, min_args=1, max_args=1),
    Function("list", list_builtin),
    Function("format", format_builtin),
    Function("print", print_builtin),
    Function("say", say, min_args=2, max_args=2),
    Function("load", load, min_args=1, max_args=1),
    Function("save", save, min_args=2, max_args=2),
    Function("exit", exit_builtin, max_args=1),
]


def register(env: Environment) -> None:
    """Register all builtin functions, macros and constants into the given environment."""
    env.update({Symbol(fn.name): fn for fn in BUILTIN_FUNCTIONS})
    macro_builtin.register(env)
    env.define(Symbol("true"), TRUE)
    env.define(Symbol("false"), Nil)
    env.define(Symbol("error"), ERROR)
