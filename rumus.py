#!/usr/bin/env python3
"""
Rumus: text arithmetic expressions with named, cross-referencing equations

Main entry point for the rumus application.
This file serves as a thin wrapper that delegates all functionality
to the rumus_pkg package.

Usage:
    python rumus.py                              # Interactive REPL
    python rumus.py -e "2x + 1" --var x=3        # Evaluate expression
    python rumus.py -D "A=2x" -e "A + 1" --var x=3
    python rumus.py --help                       # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for rumus.

    Delegates all functionality to the rumus_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from rumus_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import rumus_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
