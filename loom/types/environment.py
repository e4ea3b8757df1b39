"""Runtime environment for Loom.

The Environment is a single flat mapping from Symbols to evaluated values,
shared by every form evaluated in a session. There are no nested scopes:
`let`/`set` rebind process-wide names. The session random generator used by
`random` also lives here so that re-entrant evaluation (`load`/`run`) sees the
same state.
"""

from __future__ import annotations

import random
from io import StringIO
from typing import Iterator, Optional

from loom import LispValue
from loom.errors import LoomTypeError, LoomUnboundSymbol
from loom.types.symbol import Symbol
from loom.types.value import clone_value


class Environment:
    """Flat mapping from Symbols to Loom values."""

    __slots__ = ("vars", "rng")

    def __init__(self, seed: Optional[int] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.rng: random.Random = random.Random(seed)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a structural copy of `value`.

        Raises LoomTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LoomTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = clone_value(value)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`; raises LoomUnboundSymbol if absent."""
        try:
            return self.vars[name]
        except KeyError:
            raise LoomUnboundSymbol(f"Cannot lookup unbound symbol {name}") from None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
