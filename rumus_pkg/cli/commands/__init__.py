from .debug import handle_debug_command

__all__ = ["handle_debug_command"]
