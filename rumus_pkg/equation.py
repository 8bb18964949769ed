"""The Equation class: parse once, evaluate many times."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from .evaluator import EvaluationContext
from .evaluator import evaluate_parts
from .logging_config import get_logger
from .parser import decompose
from .parser import preprocess
from .registry import DEFAULT_REGISTRY
from .registry import EquationRegistry

logger = get_logger("equation")


class Equation:
    """A parsed arithmetic expression, optionally registered under a name.

    Example:
        >>> _ = Equation("2 * x", "A")
        >>> Equation("A + 1").evaluate({"x": 3})
        7.0

    Named equations can be referenced by any other equation evaluated against
    the same registry. The referenced equation is evaluated with the caller's
    variables.
    """

    def __init__(
        self,
        text: str,
        name: str | None = None,
        registry: EquationRegistry | None = None,
    ):
        self.name = name
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self._raw = ""
        self._eq = ""
        self._parts: tuple[str, ...] = ()
        self.eq = text
        if name:
            self.registry.register(name, self)

    @classmethod
    def get(cls, name: str, registry: EquationRegistry | None = None) -> Equation | None:
        """Look up a registered equation by name."""
        registry = registry if registry is not None else DEFAULT_REGISTRY
        return registry.get(name)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def eq(self) -> str:
        """Canonical expression text. Assigning new text re-parses the equation."""
        return self._eq

    @eq.setter
    def eq(self, text: str) -> None:
        canonical = preprocess(text)
        parts = tuple(decompose(canonical))
        self._raw = text
        self._eq = canonical
        self._parts = parts
        logger.debug(f"Built equation {self.name or '<anonymous>'}: {canonical!r}")

    @property
    def parts(self) -> tuple[str, ...]:
        return self._parts

    def evaluate(self, variables: Mapping[str, Any] | None = None) -> float:
        """Evaluate with the given variable values and return the result."""
        context = EvaluationContext(
            variables=variables if variables is not None else {},
            registry=self.registry,
            active=(self,),
        )
        return float(evaluate_parts(self._parts, context))

    def __repr__(self) -> str:
        if self.name:
            return f"Equation({self._eq!r}, name={self.name!r})"
        return f"Equation({self._eq!r})"
