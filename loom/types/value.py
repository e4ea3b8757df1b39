"""Structural equality and copying for Loom values."""

from __future__ import annotations

from loom import LispValue
from loom.types.callable import NativeCallable


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality: same tag and same contents.

    Lists compare element-wise, tables key-by-key. Functions and macros
    are never equal to anything.
    """
    if isinstance(a, NativeCallable) or isinstance(b, NativeCallable):
        return False
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(is_equal(a[k], b[k]) for k in a)
    return a == b


def clone_value(value: LispValue) -> LispValue:
    """Copy lists and tables recursively; everything else is immutable."""
    if isinstance(value, list):
        return [clone_value(v) for v in value]
    if isinstance(value, dict):
        return {k: clone_value(v) for k, v in value.items()}
    return value
