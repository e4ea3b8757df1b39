"""Parsed application node.

Atoms are plain values (Symbol, Keyword, float, str, Nil) and bracket lists
are Python lists; only parenthesized calls need a dedicated node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loom import SExpression
from loom.types.location import Location


@dataclass(frozen=True)
class Application:
    operator: SExpression
    positional: tuple = ()
    keyword: dict[str, SExpression] = field(default_factory=dict)
    location: Optional[Location] = field(default=None, compare=False)

    def __repr__(self):
        from loom.printer import render
        return f"Application({render(self)})"
