# Core type aliases for Loom's data model.
# Parsed syntax and runtime values share plain Python types where possible
# (float, str, list, dict) plus a handful of tagged classes in loom.types
# (Symbol, Keyword, Application, the sentinels, Function/Macro).
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax alias (reader output)
SExpression = LispValue

# Evaluator function type: passed to macros so they can evaluate operands
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
