from ..equation import Equation
from ..registry import EquationRegistry
from ..types import EquationError


def eval_to_float(val):
    """
    Convert a value (string or number) to float, evaluating constant expressions.
    Handles 'PI', 'E / 2', 'sqrt(2)', 'inf', 'nan', etc.
    """
    if isinstance(val, (int, float)):
        return float(val)

    if isinstance(val, str):
        # Check for string representations of infinity
        val_lower = val.lower().strip()
        if val_lower in ("inf", "+inf", "infinity"):
            return float("inf")
        if val_lower == "-inf":
            return float("-inf")
        if val_lower in ("nan", "-nan"):
            return float("nan")

        try:
            # Try direct conversion first
            return float(val)
        except ValueError:
            pass

        # Evaluate as an expression over constants only; a private registry
        # keeps session definitions out of variable values
        try:
            return Equation(val, registry=EquationRegistry()).evaluate()
        except EquationError as e:
            raise ValueError(f"Could not convert '{val}' to float: {e}") from e

    # Try converting other types
    try:
        return float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Could not convert {type(val)} to float: {e}") from e
