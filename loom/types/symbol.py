from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword:
    """A namespaced atom written `#name`. Evaluates to itself."""

    __slots__ = ("name",)

    SIGIL = "#"

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Keyword, self.name))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return f"{self.SIGIL}{self.name}"
