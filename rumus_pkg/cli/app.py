from __future__ import annotations

import argparse
import sys

from ..api import define_equation
from ..api import evaluate
from ..config import LOG_LEVEL
from ..config import VERSION
from ..logging_config import get_logger
from ..logging_config import setup_logging
from ..utils.formatting import print_result_pretty
from ..utils.parsing import eval_to_float
from .context import ReplContext

_logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running rumus health check...")
    print("-" * 50)

    # Check NumPy import
    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    checks = [
        ("Operator precedence", "2 + 3 * 4", 14.0),
        ("Brackets", "(2 + 3) * 4", 20.0),
        ("Functions", "sqrt(16) + abs(-2)", 6.0),
        ("Implicit multiplication", "2(3 + 1)", 8.0),
    ]
    for label, expression, expected in checks:
        result = evaluate(expression)
        if result.get("ok") and result.get("result") == expected:
            print(f"[OK] {label} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {label}: expected {expected}, got {result}")
            checks_failed += 1

    print("-" * 50)
    print(f"Passed: {checks_passed}, Failed: {checks_failed}")
    return 0 if checks_failed == 0 else 1


def _split_assignment(text: str) -> tuple[str, str] | None:
    """Split 'NAME=VALUE' into its two halves."""
    name, sep, value = text.partition("=")
    if not sep or not name.strip() or not value.strip():
        return None
    return name.strip(), value.strip()


def repl_loop(
    output_format: str = "human", variables: dict[str, float] | None = None
) -> None:
    """Start the interactive REPL."""
    from .repl_core import REPL

    # Ensure consistent encoding for REPL interaction (Fix for Windows Unicode issues)
    if sys.platform == "win32":
        try:
            sys.stdin.reconfigure(encoding="utf-8")
            sys.stdout.reconfigure(encoding="utf-8")
        except AttributeError:
            # Older python versions might not support reconfigure
            pass

    ctx = ReplContext(output_format=output_format, variables=dict(variables or {}))
    REPL(ctx).start()


def print_help_text() -> None:
    """Print help text for REPL commands."""
    help_text = f"""rumus v{VERSION}

COMMANDS
  help           Show commands
  quit | exit    Exit
  list           Show named equations
  vars           Show session variables
  clear          Remove all equations and variables
  debug [on|off] Log parts and intermediate values

INPUT
  <expr>         Evaluate, e.g. 2x + sin(PI / 2)
  NAME = <expr>  Define a named equation other equations can use
  NAME := <expr> Evaluate now and store as a session variable

OPERATORS
  ^ power   : root (8 : 3 = 2)   * / % (truncated remainder)   + -

CONSTANTS
  PI E LN10 LN2 LOG10E LOG2E SQRT1_2 SQRT12

FUNCTIONS
  exp expm1 log ln log10 log2 sqrt cbrt abs sign
  sin cos tan asin acos atan atan2 sinh cosh tanh asinh acosh atanh
  trunc floor ceil round
"""
    print(help_text)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the rumus CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="rumus")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-D",
        "--define",
        action="append",
        metavar="NAME=EXPR",
        help="Register a named equation before evaluating (repeatable)",
    )
    parser.add_argument(
        "--var",
        action="append",
        metavar="NAME=VALUE",
        help="Set a variable; VALUE may use constants, e.g. PI/2 (repeatable)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)
    output_format = args.format

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    import rumus_pkg.config as _config

    if args.precision and args.precision > 0:
        _config.OUTPUT_PRECISION = int(args.precision)
    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    for definition in args.define or []:
        split = _split_assignment(definition)
        if split is None:
            print(f"Error: expected NAME=EXPR, got '{definition}'")
            return 1
        res = define_equation(*split)
        if not res.get("ok"):
            print_result_pretty(res, output_format)
            return 1
        _logger.debug(f"Defined {split[0]} from command line")

    variables: dict[str, float] = {}
    for assignment in args.var or []:
        split = _split_assignment(assignment)
        if split is None:
            print(f"Error: expected NAME=VALUE, got '{assignment}'")
            return 1
        try:
            variables[split[0]] = eval_to_float(split[1])
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        # Remove ">>>" prompt if present
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        if not expr:
            print("Error: Empty input. Please enter an expression.")
            return 1
        res = evaluate(expr, variables)
        print_result_pretty(res, output_format)
        return 0 if res.get("ok") else 1

    repl_loop(output_format, variables)
    return 0
