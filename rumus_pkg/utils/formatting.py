import json
import math
from typing import Any

from .. import config


def format_number_no_trailing_zeros(num_str: str) -> str:
    """Format a number string by removing trailing zeros and decimal point if not needed."""
    try:
        # Try to parse as float
        num = float(num_str)
        if not math.isfinite(num):
            return num_str
        # If it's an integer, return as integer string
        if num.is_integer():
            return str(int(num))
        # Otherwise, remove trailing zeros
        if "e" in num_str.lower():
            return num_str
        return num_str.rstrip("0").rstrip(".")
    except (ValueError, TypeError):
        # If parsing fails, return original string
        return num_str


def format_number(value: float, precision: int | None = None) -> str:
    """Render a float with the configured number of significant digits."""
    if precision is None:
        precision = config.OUTPUT_PRECISION
    if not math.isfinite(value):
        return format_special_values(str(value))
    rendered = f"{value:.{precision}g}"
    if "e" in rendered:
        return rendered
    return format_number_no_trailing_zeros(rendered)


def format_special_values(val_str: str) -> str:
    """Format special values like nan and inf to user-friendly strings."""
    if not val_str:
        return val_str

    # Domain errors such as sqrt(-1) or acos(2)
    if val_str.strip() == "nan":
        return "undefined"

    if val_str.strip() == "inf":
        return "∞"

    if val_str.strip() == "-inf":
        return "-∞"

    return val_str


def _json_value(value: Any) -> Any:
    # JSON has no nan or inf
    if isinstance(value, float) and not math.isfinite(value):
        return format_special_values(str(value))
    return value


def print_result_pretty(res: dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format."""
    if output_format == "json":
        payload = {key: _json_value(value) for key, value in res.items()}
        print(json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False))
        return
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    typ = res.get("type", "value")
    if typ == "definition":
        print(f"{res.get('name')} defined as: {res.get('canonical')}")
    else:
        formatted_val = format_number(res.get("result", float("nan")))
        try:
            print(f"Result: {formatted_val}")
        except UnicodeEncodeError:
            print(f"Result: {formatted_val.encode('ascii', 'replace').decode()}")
