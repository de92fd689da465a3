"""Unit tests for confidence normalization."""

from __future__ import annotations

import pytest

from firewatch.firms.confidence import (
    HIGH_CONFIDENCE,
    LOW_CONFIDENCE,
    NOMINAL_CONFIDENCE,
    normalize_confidence,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("high", HIGH_CONFIDENCE),
        ("HIGH", HIGH_CONFIDENCE),
        ("h", HIGH_CONFIDENCE),
        ("nominal", NOMINAL_CONFIDENCE),
        ("normal", NOMINAL_CONFIDENCE),
        ("n", NOMINAL_CONFIDENCE),
        (" low ", LOW_CONFIDENCE),
        ("l", LOW_CONFIDENCE),
    ],
)
def test_normalize_confidence_maps_labels(value: str, expected: float) -> None:
    """Categorical labels should map onto their numeric bands."""
    assert normalize_confidence(value) == expected


def test_label_bands_match_map_scale() -> None:
    """Bands should sit at 90, 60 and 25 on the 0-100 scale."""
    assert (HIGH_CONFIDENCE, NOMINAL_CONFIDENCE, LOW_CONFIDENCE) == (90.0, 60.0, 25.0)


@pytest.mark.parametrize("value, expected", [("45", 45.0), (" 87.5 ", 87.5), ("0", 0.0)])
def test_normalize_confidence_passes_numbers_through(value: str, expected: float) -> None:
    """Numeric confidence should be returned unchanged."""
    assert normalize_confidence(value) == expected


@pytest.mark.parametrize(
    "value", [None, "", "   ", "unknown", "?", "nan", "NaN", "-nan", "inf", "-Infinity"]
)
def test_normalize_confidence_unreadable_is_none(value) -> None:
    """Unreadable values should report absence instead of a fake zero."""
    assert normalize_confidence(value) is None
