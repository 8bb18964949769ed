"""Centralized configuration for Rumus.

This module defines:
- Input validation limits (length, reference depth)
- Output precision for the CLI and REPL
- Named constants and the fixed function library
- Operators and their precedence tiers
- Regex patterns for normalization, decomposition and resolution

Configuration can be overridden via:
- CLI flags (see cli/app.py)
- Environment variables (prefixed with RUMUS_)
"""

import os
import re

import numpy as np

from .utils.custom_functions import atan2_unary
from .utils.custom_functions import round_half_up

VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("RUMUS_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_REFERENCE_DEPTH = int(
    os.getenv("RUMUS_MAX_REFERENCE_DEPTH", "64")
)  # nested registry lookups

# Output configuration
OUTPUT_PRECISION = int(
    os.getenv("RUMUS_OUTPUT_PRECISION", "12")
)  # significant digits

# Logging
LOG_LEVEL = os.getenv("RUMUS_LOG_LEVEL", "WARNING").upper()

MATH_CONSTANTS = {
    "PI": np.float64(np.pi),
    "E": np.float64(np.e),
    "LN10": np.float64(np.log(10.0)),
    "LN2": np.float64(np.log(2.0)),
    "LOG10E": np.float64(np.log10(np.e)),
    "LOG2E": np.float64(np.log2(np.e)),
    "SQRT1_2": np.float64(np.sqrt(0.5)),
    # Square root of two
    "SQRT12": np.float64(np.sqrt(2.0)),
}

ALLOWED_FUNCTIONS = {
    "exp": np.exp,
    "expm1": np.expm1,
    # Natural logarithm, ln is an alias
    "log": np.log,
    "ln": np.log,
    "log10": np.log10,
    "log2": np.log2,
    "sin": np.sin,
    "sinh": np.sinh,
    "asin": np.arcsin,
    "asinh": np.arcsinh,
    "cos": np.cos,
    "cosh": np.cosh,
    "acos": np.arccos,
    "acosh": np.arccosh,
    "tan": np.tan,
    "tanh": np.tanh,
    "atan": np.arctan,
    "atan2": atan2_unary,
    "atanh": np.arctanh,
    # Rounding functions
    "trunc": np.trunc,
    "floor": np.floor,
    "ceil": np.ceil,
    "round": round_half_up,
    # Roots
    "sqrt": np.sqrt,
    "cbrt": np.cbrt,
    # Sign and magnitude
    "abs": np.abs,
    "sign": np.sign,
}

OPERATORS = frozenset("+-*/%^:")

# Highest precedence first; each tier is reduced left to right
PRECEDENCE_TIERS = (
    frozenset("^:"),
    frozenset("*/%"),
    frozenset("+-"),
)
ADDITIVE_TIER = PRECEDENCE_TIERS[-1]

VAR_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

WHITESPACE_REGEX = re.compile(r"\s")
SIGN_PAIR_REGEX = re.compile(r"([-+])([-+])")
OPERATOR_SPACING_REGEX = re.compile(r"([^_])([-+*/^%:])")
SPACE_RUN_REGEX = re.compile(r" {2,}")
# A number that is not the tail of an identifier such as log10 or atan2
DIGIT_LETTERS_REGEX = re.compile(r"(?<![\w$.])(\d+(?:\.\d+)?|\.\d+) ?([$(A-Za-z])")
INNERMOST_GROUP_REGEX = re.compile(r"\(([^()]*)\)")

NUMBER_REGEX = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)$")
SIGNED_IDENTIFIER_REGEX = re.compile(r"^([-+]?)([$A-Za-z].*)$")
FUNCTION_CALL_REGEX = re.compile(r"^([^$]*)\$(.*)$")
