"""Name -> Equation registry used to resolve cross-equation references."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from .config import MATH_CONSTANTS
from .config import VAR_NAME_RE
from .logging_config import get_logger
from .types import ValidationError

if TYPE_CHECKING:
    from .equation import Equation

logger = get_logger("registry")


class EquationRegistry:
    """Thread-safe mapping of equation names to Equation instances.

    Last writer wins: registering an existing name replaces the previous entry.
    """

    def __init__(self) -> None:
        self._equations: dict[str, Equation] = {}
        self._lock = threading.RLock()

    def register(self, name: str, equation: Equation) -> None:
        if not VAR_NAME_RE.match(name):
            raise ValidationError(f"invalid equation name: '{name}'")
        if name in MATH_CONSTANTS:
            logger.warning(
                f"Equation name '{name}' is shadowed by a constant and will not resolve"
            )
        with self._lock:
            if name in self._equations:
                logger.debug(f"Replacing registered equation '{name}'")
            self._equations[name] = equation
        logger.debug(f"Registered equation '{name}': {equation.eq}")

    def get(self, name: str) -> Equation | None:
        with self._lock:
            return self._equations.get(name)

    def unregister(self, name: str) -> Equation | None:
        """Remove a name and return the equation it pointed to, if any."""
        with self._lock:
            equation = self._equations.pop(name, None)
        if equation is not None:
            logger.debug(f"Unregistered equation '{name}'")
        return equation

    def clear(self) -> None:
        with self._lock:
            self._equations.clear()

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._equations)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._equations

    def __len__(self) -> int:
        with self._lock:
            return len(self._equations)


# Process-wide registry used when no registry is passed explicitly
DEFAULT_REGISTRY = EquationRegistry()
