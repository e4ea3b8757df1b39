from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from loom.types.location import Location


class LoomError(Exception):
    """ Base class for all Loom errors"""
    pass


# -------------------------------
# Syntax errors (tokenizer / reader)
# -------------------------------
class LoomSyntaxError(LoomError):
    """ Raised when source text cannot be read. Carries the offending Location."""

    def __init__(self, message: str, location: Optional[Location] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"


class LoomUnterminatedString(LoomSyntaxError):
    """ Raised when input ends inside a string literal.
    Carries the tokens read before the string was opened."""

    def __init__(self, message: str, location: Optional[Location] = None, tokens: Sequence = ()):
        super().__init__(message, location)
        self.tokens = list(tokens)


class LoomUnexpectedClosingDelimiter(LoomSyntaxError):
    """ Raised when a closing delimiter has no matching opener"""


class LoomUnterminatedExpression(LoomSyntaxError):
    """ Raised when input ends while a group is still open"""


class LoomMissingOpeningDelimiter(LoomSyntaxError):
    """ Raised when several bare elements appear without an enclosing group"""


# -------------------------------
# Evaluation errors
# -------------------------------
class LoomEvaluationError(LoomError):
    """ Base class for errors raised while evaluating an expression"""


class LoomUnboundSymbol(LoomEvaluationError):
    """ Raised when a symbol is used before it is bound"""


class LoomArityError(LoomEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LoomTypeError(LoomEvaluationError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class LoomCallError(LoomEvaluationError):
    """ Raised when an application's operator is not a function or macro"""


class LoomIOError(LoomEvaluationError):
    """ Raised when a file cannot be read or written"""


class LoomArithmeticError(LoomEvaluationError):
    """ Raised on invalid arithmetic such as division by zero"""
