"""Normalization and decomposition of raw expression text.

preprocess() turns user input into the canonical, operator-spaced form and
decompose() flattens the canonical form into bracket-free parts, innermost
group first. Later parts refer to earlier ones through $<index> tokens.
"""

from __future__ import annotations

from .config import DIGIT_LETTERS_REGEX
from .config import INNERMOST_GROUP_REGEX
from .config import MAX_INPUT_LENGTH
from .config import OPERATOR_SPACING_REGEX
from .config import SIGN_PAIR_REGEX
from .config import SPACE_RUN_REGEX
from .config import WHITESPACE_REGEX
from .logging_config import get_logger
from .types import StructuralError
from .types import ValidationError

logger = get_logger("parser")


def validate_brackets(raw: str) -> None:
    """Raise StructuralError on an extra ')' or an unclosed '('.

    Columns are indices into the raw input, whitespace included.
    """
    open_columns: list[int] = []
    for column, char in enumerate(raw):
        if char == "(":
            open_columns.append(column)
        elif char == ")":
            if not open_columns:
                raise StructuralError(
                    f"extra close bracket found at column: {column}", column=column
                )
            open_columns.pop()

    if open_columns:
        column = open_columns[-1]
        raise StructuralError(
            f"missing close bracket for '(' at column: {column}", column=column
        )


def _combine_signs(match) -> str:
    return "+" if match.group(1) == match.group(2) else "-"


def preprocess(raw: str) -> str:
    """Validate and rewrite raw input into its canonical form.

    Example: "2x+ sin( y)--1" -> "2 * x + sin(y) + 1"
    """
    if len(raw) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"input is {len(raw)} characters long, limit is {MAX_INPUT_LENGTH}"
        )
    validate_brackets(raw)

    text = WHITESPACE_REGEX.sub("", raw)
    while SIGN_PAIR_REGEX.search(text):
        text = SIGN_PAIR_REGEX.sub(_combine_signs, text)

    text = OPERATOR_SPACING_REGEX.sub(r"\1 \2 ", text)
    text = SPACE_RUN_REGEX.sub(" ", text)
    # Implicit multiplication: 2x, 2(x), 2$0
    text = DIGIT_LETTERS_REGEX.sub(r"\1 * \2", text)
    return text


def decompose(canonical: str) -> list[str]:
    """Split a canonical expression into bracket-free parts.

    The left-most innermost group is extracted first and replaced by a
    reference to its index, so part indices follow extraction order. The last
    part is the whole expression.
    """
    working = f"({canonical})"
    parts: list[str] = []

    match = INNERMOST_GROUP_REGEX.search(working)
    while match:
        content = match.group(1)
        if not content.strip():
            if match.start() == 0 and match.end() == len(working):
                raise StructuralError("empty expression")
            raise StructuralError("empty brackets '()'")
        parts.append(content.strip())
        working = f"{working[:match.start()]}${len(parts) - 1}{working[match.end():]}"
        match = INNERMOST_GROUP_REGEX.search(working)

    logger.debug(f"Decomposed '{canonical}' into {len(parts)} parts: {parts}")
    return parts
