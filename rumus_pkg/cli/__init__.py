"""Command-line entry point and interactive REPL for rumus."""

from .app import _health_check
from .app import main_entry
from .app import repl_loop
from .context import ReplContext
from .repl_core import REPL

__all__ = ["main_entry", "repl_loop", "_health_check", "REPL", "ReplContext"]
