"""Dict-returning facade over Equation for the CLI and embedding applications.

Every function returns {"ok": True, ...} on success or
{"ok": False, "error": ..., "error_type": ...} when an EquationError is raised.
"""

from __future__ import annotations

from typing import Any
from typing import Mapping

from .equation import Equation
from .logging_config import get_logger
from .registry import EquationRegistry
from .types import EquationError

logger = get_logger("api")


def _error_result(error: EquationError) -> dict[str, Any]:
    result: dict[str, Any] = {
        "ok": False,
        "error": error.message,
        "error_type": type(error).__name__,
        "code": error.code,
    }
    column = getattr(error, "column", None)
    if column is not None:
        result["column"] = column
    return result


def evaluate(
    expression: str,
    variables: Mapping[str, Any] | None = None,
    registry: EquationRegistry | None = None,
) -> dict[str, Any]:
    """Parse and evaluate an expression in one step."""
    try:
        equation = Equation(expression, registry=registry)
        value = equation.evaluate(variables)
    except EquationError as e:
        logger.info(f"Evaluation of {expression!r} failed: {e}")
        return _error_result(e)
    return {
        "ok": True,
        "type": "value",
        "result": value,
        "canonical": equation.eq,
    }


def validate_expression(expression: str) -> dict[str, Any]:
    """Check that an expression parses, without evaluating it."""
    try:
        equation = Equation(expression)
    except EquationError as e:
        return _error_result(e)
    return {"ok": True, "canonical": equation.eq, "parts": list(equation.parts)}


def define_equation(
    name: str, expression: str, registry: EquationRegistry | None = None
) -> dict[str, Any]:
    """Parse an expression and register it under name."""
    try:
        equation = Equation(expression, name=name, registry=registry)
    except EquationError as e:
        logger.info(f"Definition of {name!r} failed: {e}")
        return _error_result(e)
    return {"ok": True, "type": "definition", "name": name, "canonical": equation.eq}
