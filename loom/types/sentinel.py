from __future__ import annotations


class NilType:
    """Nil doubles as "false" and "absent"."""

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TrueType:
    def __repr__(self): return "true"

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash(TrueType)


class ErrorType:
    """Error sentinel value. Distinct from a raised LoomError."""

    def __repr__(self): return "error"

    def __eq__(self, other):
        return isinstance(other, ErrorType)

    def __hash__(self):
        return hash(ErrorType)


Nil = NilType()
TRUE = TrueType()
ERROR = ErrorType()


def is_truthy(value) -> bool:
    """Only Nil is false."""
    return not isinstance(value, NilType)
