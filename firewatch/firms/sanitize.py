"""
Sanitation and Deduplication Module

Drops detections with impossible coordinates and collapses repeated
detections of the same hotspot (overlapping satellite passes, repeated
rows across refreshes) onto the first occurrence.
"""

import math
from typing import Iterable, List, Tuple

from .records import CleanedRecord, NormalizedRecord

# Decimal places kept in the dedup key (about 100 m)
DEDUP_COORD_DECIMALS = 3

DedupKey = Tuple[str, str, str, str, str]


def is_valid_location(latitude: float, longitude: float) -> bool:
    """Return True for finite coordinates inside Earth bounds."""
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def build_dedup_key(record: NormalizedRecord) -> DedupKey:
    """
    Build the identity of a detection.

    Args:
        record: A record with finite coordinates

    Returns:
        Tuple of (latitude, longitude) formatted to three decimals,
        acquisition date, acquisition time and satellite
    """
    return (
        _key_coordinate(record.latitude),
        _key_coordinate(record.longitude),
        record.acq_date,
        record.acq_time,
        record.satellite,
    )


def sanitize_and_dedupe(records: Iterable[NormalizedRecord]) -> List[CleanedRecord]:
    """
    Remove invalid and duplicate detections.

    Order-sensitive: for each dedup key the first record in input order is
    kept and later ones are dropped.

    Args:
        records: Normalized records in upstream order

    Returns:
        Cleaned records in input order
    """
    cleaned: List[CleanedRecord] = []
    seen_keys = set()
    for record in records:
        if not is_valid_location(record.latitude, record.longitude):
            continue
        key = build_dedup_key(record)
        if key in seen_keys:
            continue
        seen_keys.add(key)
        cleaned.append(record)
    return cleaned


def _key_coordinate(value: float) -> str:
    # fold -0.000 into 0.000
    return f"{round(value, DEDUP_COORD_DECIMALS) + 0.0:.{DEDUP_COORD_DECIMALS}f}"
