import math
from typing import Optional


def fmt_number(value: Optional[float], decimals: int = 2) -> str:
    """
    Canonical number formatter for reports.
    Whole numbers print without decimals.
    """
    if value is None:
        return "-"

    try:
        value = float(value)
    except (TypeError, ValueError):
        return "-"

    if not math.isfinite(value):
        return "-"
    if value.is_integer():
        return f"{value:,.0f}"
    return f"{value:,.{decimals}f}"


def fmt_coefficient(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:+.2f}"


def fmt_text(value: Optional[str]) -> str:
    """Table-safe text: pipes escaped, missing shown as a dash."""
    if value is None or value == "":
        return "-"
    return str(value).replace("|", "\\|")
