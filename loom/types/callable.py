"""Native callables exposed to Loom code.

Both kinds wrap a fixed Python operation together with a signature tag
(arity range and whether keyword operands are wanted). The evaluator
checks the arity before invoking the operation. Keyword operands are
handed over raw to callables that want them and ignored by the rest.

Function operations are called as ``op(env, args)`` with evaluated args,
or ``op(env, args, kwargs)`` when ``accepts_keywords`` is set.

Macro operations are called as ``op(tail, env, evaluate_fn)`` with raw
operand expressions, or ``op(tail, env, evaluate_fn, kwargs)``.
"""

from __future__ import annotations

from typing import Callable, Optional

from loom.errors import LoomArityError


class NativeCallable:
    __slots__ = ("name", "operation", "min_args", "max_args", "accepts_keywords")

    kind = "callable"

    def __init__(
        self,
        name: str,
        operation: Callable,
        min_args: int = 0,
        max_args: Optional[int] = None,
        accepts_keywords: bool = False,
    ):
        self.name = name
        self.operation = operation
        self.min_args = min_args
        self.max_args = max_args
        self.accepts_keywords = accepts_keywords

    def check_signature(self, count: int) -> None:
        if count < self.min_args:
            raise LoomArityError(
                f"{self.name} requires at least {self.min_args} argument(s), got {count}"
            )
        if self.max_args is not None and count > self.max_args:
            if self.max_args == self.min_args:
                raise LoomArityError(
                    f"{self.name} requires exactly {self.max_args} argument(s), got {count}"
                )
            raise LoomArityError(
                f"{self.name} accepts at most {self.max_args} argument(s), got {count}"
            )

    # Native callables never compare equal, not even to themselves.
    def __eq__(self, other):
        return False

    def __hash__(self):
        return id(self)

    def __repr__(self):
        return f"<{self.kind} {self.name}>"


class Function(NativeCallable):
    __slots__ = ()
    kind = "function"


class Macro(NativeCallable):
    __slots__ = ()
    kind = "macro"
