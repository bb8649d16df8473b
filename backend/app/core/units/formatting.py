"""Display formatting for conversion results."""

from __future__ import annotations

import math
from enum import Enum

EXPONENTIAL_UPPER = 1_000_000
EXPONENTIAL_LOWER = 0.000001
EXPONENT_DIGITS = 6
SIGNIFICANT_DIGITS = 10
FIXED_DECIMALS = 2


class FormatPolicy(str, Enum):
    GENERAL = "general"              # 10 significant digits, exponential outside [1e-6, 1e6)
    FIXED = "fixed"                  # money: always two decimals
    FIXED_TRIMMED = "fixed_trimmed"  # everyday temperatures: two decimals, zeros trimmed


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _strip_zeros(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_exponential(value: float, digits: int = EXPONENT_DIGITS) -> str:
    """``1234567.0 -> '1.234567e+6'`` (exponent without zero padding)."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def to_precision(value: float, significant: int = SIGNIFICANT_DIGITS) -> str:
    """Fixed-point rendering of ``value`` rounded to ``significant`` digits."""
    if value == 0:
        return "0"
    # Exponent after rounding, so 999999.99999999 counts as 1e6
    exponent = int(f"{value:.{significant - 1}e}".split("e")[1])
    decimals = max(0, significant - 1 - exponent)
    return f"{value:.{decimals}f}"


def format_result(value: float, policy: FormatPolicy = FormatPolicy.GENERAL) -> str:
    """Render a converted value for a text field."""
    if not math.isfinite(value):
        return _non_finite(value)

    if policy is FormatPolicy.FIXED:
        return f"{value:.{FIXED_DECIMALS}f}"
    if policy is FormatPolicy.FIXED_TRIMMED:
        return _strip_zeros(f"{value:.{FIXED_DECIMALS}f}")

    magnitude = abs(value)
    if magnitude >= EXPONENTIAL_UPPER or (value != 0 and magnitude < EXPONENTIAL_LOWER):
        return to_exponential(value)
    return _strip_zeros(to_precision(value))
