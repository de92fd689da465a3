"""
Numeric helpers shared by the fire record pipeline.

Kept free of package imports so every stage can depend on it.
"""

import math
from typing import Optional


def parse_number(value: Optional[str]) -> Optional[float]:
    """
    Parse a text field into a finite float.

    Args:
        value: Raw field text, or None when the field is absent

    Returns:
        The parsed value, or None if the text is absent, empty, not numeric
        or not finite (nan, inf)
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to the given number of decimals with ties going towards +inf."""
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor
