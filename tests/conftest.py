"""Shared fixtures for fire pipeline tests."""

from __future__ import annotations

import pytest

from firewatch.firms.records import NormalizedRecord

FIRMS_HEADER = (
    "latitude,longitude,bright_ti4,scan,track,acq_date,acq_time,satellite,"
    "instrument,confidence,version,bright_ti5,frp,daynight"
)


@pytest.fixture
def firms_csv_text() -> str:
    """Small VIIRS-style snapshot with one duplicate and one invalid row."""
    rows = [
        "-10.123,-55.456,330.5,0.4,0.37,2024-08-01,1342,N,VIIRS,h,2.0NRT,290.1,12.5,D",
        "-10.123,-55.456,330.5,0.4,0.37,2024-08-01,1342,N,VIIRS,h,2.0NRT,290.1,12.5,D",
        "-10.500,-55.900,310.0,0.4,0.37,2024-08-01,1342,N,VIIRS,n,2.0NRT,288.0,4.5,D",
        "95.000,-55.900,310.0,0.4,0.37,2024-08-01,1342,N,VIIRS,l,2.0NRT,288.0,4.5,D",
        "35.200,-118.400,,0.4,0.37,2024-08-01,0930,1,VIIRS,,2.0NRT,285.0,,N",
    ]
    return "\n".join([FIRMS_HEADER] + rows) + "\n"


def make_record(
    latitude: float,
    longitude: float,
    confidence: float = 60.0,
    frp: float = 5.0,
    bright_ti4: float = 320.0,
    acq_date: str = "2024-08-01",
    acq_time: str = "1200",
    satellite: str = "N",
) -> NormalizedRecord:
    """Build a normalized record with sensible defaults."""
    return NormalizedRecord(
        latitude=latitude,
        longitude=longitude,
        confidence=confidence,
        frp=frp,
        bright_ti4=bright_ti4,
        acq_date=acq_date,
        acq_time=acq_time,
        satellite=satellite,
        instrument="VIIRS",
    )
