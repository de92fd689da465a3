"""
Confidence Normalization Module

FIRMS products report detection confidence either as a percentage (MODIS)
or as a categorical label (VIIRS: low / nominal / high). This module maps
both onto a single 0-100 numeric scale.
"""

from typing import Optional

from ..utils.numeric import parse_number

# Numeric band for each categorical confidence label
HIGH_CONFIDENCE = 90.0
NOMINAL_CONFIDENCE = 60.0
LOW_CONFIDENCE = 25.0

CONFIDENCE_LABELS = {
    "high": HIGH_CONFIDENCE,
    "nominal": NOMINAL_CONFIDENCE,
    "normal": NOMINAL_CONFIDENCE,
    "low": LOW_CONFIDENCE,
}

# Single-letter prefixes used by abbreviated labels (h, n, l)
_PREFIX_BANDS = (
    ("h", HIGH_CONFIDENCE),
    ("n", NOMINAL_CONFIDENCE),
    ("l", LOW_CONFIDENCE),
)


def normalize_confidence(value: Optional[str]) -> Optional[float]:
    """
    Translate a raw confidence value to a numeric band.

    Args:
        value: Raw confidence text, numeric or a label like "high" or "n"

    Returns:
        The numeric confidence, or None when the value cannot be interpreted
        (never 0 for unreadable input)
    """
    number = parse_number(value)
    if number is not None:
        return number
    if value is None:
        return None

    label = value.strip().lower()
    if not label or _is_float_text(label):
        # nan and inf parse as floats but are not readings
        return None
    if label in CONFIDENCE_LABELS:
        return CONFIDENCE_LABELS[label]
    for prefix, band in _PREFIX_BANDS:
        if label.startswith(prefix):
            return band
    return None


def _is_float_text(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True
