from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """1-based line and column of a token in the source text."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
