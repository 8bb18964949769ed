from ..context import ReplContext
from ...logging_config import ROOT_LOGGER_NAME
import logging

def handle_debug_command(ctx: ReplContext, cmd: str) -> None:
    """Handle the 'debug' command."""
    parts = str(cmd).split()
    if len(parts) > 1:
        mode = parts[1].lower()
        if mode in ("on", "true", "enabled"):
            ctx.debug_mode = True
            logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
            print("Debug mode enabled (parts and intermediate values are logged).")
        elif mode in ("off", "false", "disabled"):
            ctx.debug_mode = False
            logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.WARNING)
            print("Debug mode disabled.")
        else:
            print("Usage: debug <on|off>")
    else:
        print(f"Debug mode is {'on' if ctx.debug_mode else 'off'}. Usage: debug <on|off>")
