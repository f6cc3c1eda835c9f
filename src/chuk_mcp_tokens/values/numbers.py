"""Number formatting shared by value renderers."""

from __future__ import annotations


def format_number(value: float | int, decimals: int) -> str:
    """
    Format a number with at most `decimals` fractional digits.

    Trailing zeros are dropped, so 1.500 renders as "1.5" and 2.0 as "2".
    """
    rounded = round(float(value), decimals)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{decimals}f}".rstrip("0").rstrip(".")
