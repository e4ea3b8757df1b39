from loom.types.location import Location
from loom.types.symbol import Symbol, Keyword
from loom.types.sentinel import Nil, NilType, TRUE, TrueType, ERROR, ErrorType, is_truthy
from loom.types.expression import Application
from loom.types.callable import NativeCallable, Function, Macro
from loom.types.value import is_equal, clone_value
from loom.types.environment import Environment

__all__ = [
    "Location",
    "Symbol",
    "Keyword",
    "Nil",
    "NilType",
    "TRUE",
    "TrueType",
    "ERROR",
    "ErrorType",
    "is_truthy",
    "Application",
    "NativeCallable",
    "Function",
    "Macro",
    "is_equal",
    "clone_value",
    "Environment",
]
