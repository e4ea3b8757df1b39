"""Builtin macros for Loom (implemented in Python).

Macros receive raw operand expressions; see loom.evaluation.special_forms.
"""

from loom.evaluation.special_forms import SPECIAL_FORMS
from loom.types.environment import Environment
from loom.types.symbol import Symbol


def register(env: Environment) -> None:
    """Register builtin macros in the provided Environment."""
    env.update({Symbol(name): macro for name, macro in SPECIAL_FORMS.items()})
