"""Identifier resolution and precedence reduction of bracket-free parts.

A part such as "2 * $0 - sin$1" is split on whitespace, every operand is
resolved to a numpy float64, and the token list is folded in place one
precedence tier at a time: power and root, then multiplication, division and
modulo, then addition and subtraction. Within a tier the left-most operator is
always reduced first.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Any
from typing import Mapping

import numpy as np

from .config import ADDITIVE_TIER
from .config import ALLOWED_FUNCTIONS
from .config import FUNCTION_CALL_REGEX
from .config import MATH_CONSTANTS
from .config import MAX_REFERENCE_DEPTH
from .config import NUMBER_REGEX
from .config import OPERATORS
from .config import PRECEDENCE_TIERS
from .config import SIGNED_IDENTIFIER_REGEX
from .logging_config import get_logger
from .types import CircularReferenceError
from .types import DivisionByZeroError
from .types import StructuralError
from .types import UnknownOperatorError
from .types import UnresolvedReferenceError

if TYPE_CHECKING:
    from .equation import Equation
    from .registry import EquationRegistry

logger = get_logger("evaluator")


@dataclass
class EvaluationContext:
    """State owned by a single evaluate() call.

    refs holds the value of every part evaluated so far, keyed "$<index>".
    active is the chain of equations being evaluated, outermost first.
    """

    variables: Mapping[str, Any]
    registry: EquationRegistry
    refs: dict[str, np.float64] = field(default_factory=dict)
    active: tuple[Equation, ...] = ()

    def descend(self, equation: Equation) -> EvaluationContext:
        """Context for evaluating a registered equation: same variables, fresh refs."""
        return EvaluationContext(
            variables=self.variables,
            registry=self.registry,
            active=self.active + (equation,),
        )


def basic_math(op: str, left, right):
    """Apply a binary operator to two numbers."""
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise DivisionByZeroError("division by zero")
        return left / right
    if op == "%":
        if right == 0:
            raise DivisionByZeroError("modulo by zero")
        # Truncated remainder, sign follows the dividend
        return np.fmod(left, right)
    if op == "^":
        return np.power(left, right)
    if op == ":":
        if right == 0:
            return np.float64(1.0)
        return np.power(left, 1.0 / right)
    raise UnknownOperatorError(f"unknown operator: {op}")


def _evaluate_registered(
    name: str, equation: Equation, context: EvaluationContext
) -> np.float64:
    if any(equation is current for current in context.active):
        raise CircularReferenceError(
            f"circular reference: '{name}' depends on itself", name=name
        )
    if len(context.active) >= MAX_REFERENCE_DEPTH:
        raise UnresolvedReferenceError(
            f"reference chain deeper than {MAX_REFERENCE_DEPTH} while resolving '{name}'",
            name=name,
        )
    return evaluate_parts(equation.parts, context.descend(equation))


def resolve(name: str, context: EvaluationContext) -> np.float64:
    """Resolve an identifier to a number.

    Lookup order: numeric literal, constant, caller variable, reference to an
    earlier part, registered equation, function call of the form fname$<index>.
    """
    if NUMBER_REGEX.match(name):
        return np.float64(name)
    if name in MATH_CONSTANTS:
        return MATH_CONSTANTS[name]
    if name in context.variables:
        return np.float64(context.variables[name])
    if name in context.refs:
        return context.refs[name]

    equation = context.registry.get(name)
    if equation is not None:
        return _evaluate_registered(name, equation, context)

    missing = name
    call = FUNCTION_CALL_REGEX.match(name)
    if call:
        fname, arg = call.groups()
        if fname in ALLOWED_FUNCTIONS:
            return np.float64(ALLOWED_FUNCTIONS[fname](resolve(f"${arg}", context)))
        missing = fname or name
    raise UnresolvedReferenceError(f"'{missing}' is undefined", name=missing)


def resolve_operand(token: str, context: EvaluationContext) -> list:
    """Resolve a non-operator token into reduction tokens.

    A numeric literal keeps its sign (-2 is one number). A sign glued to an
    identifier (-x, -sin$0, -$1) is returned as a separate unary sign token.
    """
    if NUMBER_REGEX.match(token):
        return [np.float64(token)]
    match = SIGNED_IDENTIFIER_REGEX.match(token)
    if match is None:
        raise UnresolvedReferenceError(f"'{token}' is undefined", name=token)
    sign, name = match.groups()
    value = resolve(name, context)
    return [sign, value] if sign else [value]


def tokenize_part(part: str, context: EvaluationContext) -> list:
    """Split a part into operator strings and resolved float64 operands."""
    tokens: list = []
    for token in part.split():
        if token in OPERATORS:
            tokens.append(token)
        else:
            tokens.extend(resolve_operand(token, context))
    return tokens


def _find_operator(tokens: list, tier: frozenset) -> int | None:
    for index, token in enumerate(tokens):
        if isinstance(token, str) and token in tier:
            return index
    return None


def _operand(tokens: list, index: int, op: str):
    if index < 0 or index >= len(tokens) or isinstance(tokens[index], str):
        raise StructuralError(f"missing operand for '{op}'")
    return tokens[index]


def _is_unary(tokens: list, index: int) -> bool:
    return tokens[index] in ADDITIVE_TIER and (
        index == 0 or isinstance(tokens[index - 1], str)
    )


def _signed(sign: str, value):
    return basic_math("*", np.float64(-1.0 if sign == "-" else 1.0), value)


def _reduce_tier(tokens: list, tier: frozenset) -> None:
    index = _find_operator(tokens, tier)
    while index is not None:
        op = tokens[index]
        left = _operand(tokens, index - 1, op)
        end = index + 2
        if end < len(tokens) and _is_unary(tokens, index + 1):
            # 2 ^ -x: the sign belongs to the exponent
            right = _signed(tokens[index + 1], _operand(tokens, end, op))
            end += 1
        else:
            right = _operand(tokens, index + 1, op)
        tokens[index - 1 : end] = [basic_math(op, left, right)]
        index = _find_operator(tokens, tier)


def _apply_unary_signs(tokens: list) -> None:
    # Right to left so that stacked signs nest
    for index in range(len(tokens) - 1, -1, -1):
        if isinstance(tokens[index], str) and _is_unary(tokens, index):
            operand = _operand(tokens, index + 1, tokens[index])
            tokens[index : index + 2] = [_signed(tokens[index], operand)]


def reduce_tokens(tokens: list) -> np.float64:
    """Fold a resolved token list to a single number, tier by tier.

    Unary signs bind looser than power and root but tighter than the other
    tiers, so -x ^ 2 is -(x ^ 2) and 2 * -x ^ 2 is 2 * -(x ^ 2).
    """
    power_tier, *remaining_tiers = PRECEDENCE_TIERS
    _reduce_tier(tokens, power_tier)
    _apply_unary_signs(tokens)
    for tier in remaining_tiers:
        _reduce_tier(tokens, tier)

    if len(tokens) != 1:
        raise StructuralError("missing operator between operands")
    return tokens[0]


def evaluate_part(part: str, context: EvaluationContext) -> np.float64:
    return reduce_tokens(tokenize_part(part, context))


def evaluate_parts(parts, context: EvaluationContext) -> np.float64:
    """Evaluate parts in index order and return the value of the last one.

    Floating point faults follow IEEE-754 (nan, inf) instead of warning.
    """
    with np.errstate(all="ignore"):
        for index, part in enumerate(parts):
            value = evaluate_part(part, context)
            context.refs[f"${index}"] = value
            logger.debug(f"${index} = {part!r} -> {value}")
    return context.refs[f"${len(parts) - 1}"]
