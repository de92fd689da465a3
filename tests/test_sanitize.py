"""Unit tests for coordinate sanitation and deduplication."""

from __future__ import annotations

import math

import pytest

from conftest import make_record
from firewatch.firms.sanitize import (
    build_dedup_key,
    is_valid_location,
    sanitize_and_dedupe,
)


@pytest.mark.parametrize(
    "latitude, longitude, expected",
    [
        (0.0, 0.0, True),
        (90.0, 180.0, True),
        (-90.0, -180.0, True),
        (90.01, 0.0, False),
        (0.0, -180.5, False),
        (math.nan, 0.0, False),
        (0.0, math.inf, False),
    ],
)
def test_is_valid_location_bounds(latitude: float, longitude: float, expected: bool) -> None:
    """Only finite coordinates within Earth bounds should be accepted."""
    assert is_valid_location(latitude, longitude) is expected


def test_sanitize_drops_invalid_coordinates() -> None:
    """Records outside Earth bounds or with NaN coordinates are removed."""
    records = [
        make_record(10.0, 10.0),
        make_record(95.0, 10.0),
        make_record(math.nan, 10.0),
    ]

    cleaned = sanitize_and_dedupe(records)

    assert cleaned == [records[0]]


def test_sanitize_collapses_near_identical_detections() -> None:
    """Coordinates equal at three decimals with the same pass are duplicates."""
    records = [
        make_record(10.12341, 20.56781, confidence=90.0),
        make_record(10.12344, 20.56779, confidence=25.0),
        make_record(10.12341, 20.56781, satellite="1"),
    ]

    cleaned = sanitize_and_dedupe(records)

    assert len(cleaned) == 2
    assert cleaned[0].confidence == 90.0
    assert cleaned[1].satellite == "1"


def test_sanitize_keeps_first_occurrence_in_input_order() -> None:
    """Later duplicates are dropped and survivors keep input order."""
    first = make_record(1.0, 1.0, frp=1.0)
    other = make_record(2.0, 2.0)
    duplicate = make_record(1.0, 1.0, frp=99.0)

    cleaned = sanitize_and_dedupe([first, other, duplicate])

    assert cleaned == [first, other]


def test_sanitize_is_idempotent() -> None:
    """Cleaning already cleaned records should change nothing."""
    records = [
        make_record(1.0, 1.0),
        make_record(1.0, 1.0),
        make_record(-5.0, 200.0),
        make_record(3.0, 3.0, acq_time="1300"),
    ]

    once = sanitize_and_dedupe(records)

    assert sanitize_and_dedupe(once) == once


def test_build_dedup_key_formats_coordinates() -> None:
    """Key coordinates use three decimals and fold negative zero."""
    key = build_dedup_key(make_record(-0.0001, 12.3456, acq_time="0930"))

    assert key == ("0.000", "12.346", "2024-08-01", "0930", "N")
