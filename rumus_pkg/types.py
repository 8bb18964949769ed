"""Exception types shared by the parser, evaluator, registry and CLI."""

from __future__ import annotations


class EquationError(Exception):
    """Base class for every error raised while building or evaluating an equation."""

    code = "E000"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class StructuralError(EquationError):
    """Malformed input: unbalanced or empty brackets, a dangling operator."""

    code = "E100"

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.column = column


class ValidationError(EquationError):
    """Input rejected before parsing (too long, invalid equation name)."""

    code = "E200"


class UnresolvedReferenceError(EquationError):
    """An identifier could not be resolved to a number."""

    code = "E300"

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class CircularReferenceError(UnresolvedReferenceError):
    """A registered equation depends on itself through the registry."""

    code = "E301"


class DivisionByZeroError(EquationError):
    """Right operand of / or % is exactly zero."""

    code = "E400"


class UnknownOperatorError(EquationError):
    code = "E401"
