import re
from typing import Optional

from ..api import define_equation
from ..api import evaluate
from ..logging_config import get_logger
from ..registry import DEFAULT_REGISTRY
from ..registry import EquationRegistry
from ..utils.formatting import format_number
from ..utils.formatting import print_result_pretty
from .commands import handle_debug_command
from .context import ReplContext

logger = get_logger("repl")

# "name = expr" defines an equation, "name := expr" stores a session variable
ASSIGNMENT_REGEX = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*(:?=)\s*(.+)$")


class REPL:
    """
    Read-eval-print loop over a shared equation registry.
    Named equations live in the registry; session variables live in the context.
    """
    def __init__(
        self,
        context: Optional[ReplContext] = None,
        registry: Optional[EquationRegistry] = None,
    ):
        self.ctx = context if context else ReplContext()
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.running = True
        self._setup_readline()

    def _setup_readline(self):
        try:
            import readline  # noqa: F401
        except ImportError:
            pass

    def start(self):
        """Main loop entry point."""
        from ..config import VERSION

        print(f"rumus v{VERSION}: type 'help' for commands, 'quit' to exit.")

        while self.running:
            self.loop_once()

    def loop_once(self):
        """Single iteration of the read-eval-print loop."""
        try:
            prompt = ">>> " if not self.ctx.debug_mode else "DEBUG>>> "
            try:
                raw = input(prompt)
            except EOFError:
                self.running = False
                return

            self.process_input(raw)
        except KeyboardInterrupt:
            print("\n[Interrupted] type 'quit' to exit")
        except Exception as e:
            logger.exception("Unexpected error in REPL loop")
            print(f"Error: {e}")

    def process_input(self, text: str):
        """Dispatch input to specific handlers."""
        text = text.strip()
        if not text or text.startswith("#"):
            return

        command = text.lower()
        if command in ("quit", "exit"):
            self.running = False
            return
        if command == "help":
            from .app import print_help_text

            print_help_text()
            return
        if command == "list":
            self.list_equations()
            return
        if command == "vars":
            self.list_variables()
            return
        if command == "clear":
            self.registry.clear()
            self.ctx.variables.clear()
            print("Cleared all equations and variables.")
            return
        if command.split()[0] == "debug":
            handle_debug_command(self.ctx, text)
            return

        assignment = ASSIGNMENT_REGEX.match(text)
        if assignment:
            name, operator, expression = assignment.groups()
            if operator == ":=":
                self.set_variable(name, expression)
            else:
                res = define_equation(name, expression, registry=self.registry)
                print_result_pretty(res, self.ctx.output_format)
            return

        res = evaluate(text, self.ctx.variables, registry=self.registry)
        print_result_pretty(res, self.ctx.output_format)

    def set_variable(self, name: str, expression: str):
        res = evaluate(expression, self.ctx.variables, registry=self.registry)
        if not res.get("ok"):
            print_result_pretty(res, self.ctx.output_format)
            return
        self.ctx.variables[name] = res["result"]
        print(f"{name} = {format_number(res['result'])}")

    def list_equations(self):
        names = self.registry.names()
        if not names:
            print("No equations defined.")
            return
        for name in names:
            equation = self.registry.get(name)
            if equation is not None:
                print(f"  {name} = {equation.eq}")

    def list_variables(self):
        if not self.ctx.variables:
            print("No variables set.")
            return
        for name, value in sorted(self.ctx.variables.items()):
            print(f"  {name} = {format_number(value)}")
