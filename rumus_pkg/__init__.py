"""Rumus package: text arithmetic expressions with named, cross-referencing equations."""

__version__ = "1.0.0"

from . import api, cli, config, logging_config, parser, types
from .api import define_equation, evaluate, validate_expression
from .equation import Equation
from .registry import DEFAULT_REGISTRY, EquationRegistry
from .types import (
    CircularReferenceError,
    DivisionByZeroError,
    EquationError,
    StructuralError,
    UnknownOperatorError,
    UnresolvedReferenceError,
    ValidationError,
)

__all__ = [
    "config",
    "parser",
    "cli",
    "types",
    "api",
    "logging_config",
    "Equation",
    "EquationRegistry",
    "DEFAULT_REGISTRY",
    "evaluate",
    "validate_expression",
    "define_equation",
    "EquationError",
    "StructuralError",
    "ValidationError",
    "UnresolvedReferenceError",
    "CircularReferenceError",
    "DivisionByZeroError",
    "UnknownOperatorError",
]
