"""
Imputation Module

Converts raw FIRMS rows into typed records. Missing or unreadable numeric
fields are filled with the batch mean of that field, so downstream code
never sees a non-finite confidence, FRP or brightness value.
"""

import math
from typing import Dict, List, Optional, Sequence

from ..utils.numeric import parse_number
from .confidence import normalize_confidence
from .records import UNKNOWN_SOURCE, NormalizedRecord, RawRecord

# Numeric fields that are imputed from the batch mean
IMPUTED_FIELDS = ("confidence", "frp", "bright_ti4")


def compute_field_means(records: Sequence[RawRecord]) -> Dict[str, float]:
    """
    Compute the mean of each imputed field over its parseable values.

    Args:
        records: The whole raw batch

    Returns:
        Mapping of field name to mean; 0.0 for a field with no parseable value
    """
    return _field_means([_parse_imputed_fields(record) for record in records])


def normalize_and_impute(records: Sequence[RawRecord]) -> List[NormalizedRecord]:
    """
    Type and impute a raw batch.

    Means are computed over the entire batch before any value is filled in.

    Args:
        records: Raw records from the parser

    Returns:
        One NormalizedRecord per input record, in input order
    """
    records = list(records)
    parsed = [_parse_imputed_fields(record) for record in records]
    means = _field_means(parsed)

    normalized = []
    for record, values in zip(records, parsed):
        filled = {
            name: means[name] if value is None else value
            for name, value in values.items()
        }
        normalized.append(
            NormalizedRecord(
                latitude=_coordinate(record.latitude),
                longitude=_coordinate(record.longitude),
                acq_date=_text(record.acq_date, ""),
                acq_time=_text(record.acq_time, ""),
                satellite=_text(record.satellite, UNKNOWN_SOURCE),
                instrument=_text(record.instrument, UNKNOWN_SOURCE),
                **filled,
            )
        )
    return normalized


def _parse_imputed_fields(record: RawRecord) -> Dict[str, Optional[float]]:
    return {
        "confidence": normalize_confidence(record.confidence),
        "frp": parse_number(record.frp),
        "bright_ti4": parse_number(record.bright_ti4),
    }


def _field_means(parsed: Sequence[Dict[str, Optional[float]]]) -> Dict[str, float]:
    sums = {name: 0.0 for name in IMPUTED_FIELDS}
    counts = {name: 0 for name in IMPUTED_FIELDS}
    for values in parsed:
        for name, value in values.items():
            if value is not None:
                sums[name] += value
                counts[name] += 1

    return {
        name: sums[name] / counts[name] if counts[name] else 0.0
        for name in IMPUTED_FIELDS
    }


def _coordinate(value: Optional[str]) -> float:
    number = parse_number(value)
    return math.nan if number is None else number


def _text(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()
