"""
FIRMS Fire Detection Processing Module

Turns raw FIRMS CSV text into cleaned fire detections: parse, normalize
confidence, impute missing numeric fields, drop invalid coordinates and
collapse duplicate detections. How the text is obtained (local snapshot,
cache, live API) is up to the caller.
"""

import os
from dataclasses import dataclass
from typing import List

from .imputation import normalize_and_impute
from .parser import parse_fire_csv
from .records import CleanedRecord
from .sanitize import is_valid_location, sanitize_and_dedupe


@dataclass(frozen=True)
class FireBatch:
    """Result of one ingestion pass."""

    raw_count: int
    invalid_count: int
    duplicate_count: int
    records: List[CleanedRecord]


def read_snapshot_text(file_path: str) -> str:
    """
    Read a local FIRMS CSV snapshot.

    Args:
        file_path: Path to a UTF-8 CSV file

    Returns:
        The file contents

    Raises:
        FileNotFoundError: If the snapshot does not exist
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Fire snapshot not found at: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def process_fire_data(raw_text: str, verbose: bool = True) -> FireBatch:
    """
    Run the full cleaning pipeline over one batch of FIRMS CSV text.

    Args:
        raw_text: Raw CSV text with a header row
        verbose: Whether to print progress information

    Returns:
        FireBatch with the cleaned records and drop counts

    Raises:
        InvalidFormatError: If the text is not a fire detection table
    """
    raw_records = parse_fire_csv(raw_text)
    if verbose:
        print(f"Processing {len(raw_records)} raw detections...")

    if not raw_records:
        if verbose:
            print("[WARNING] Fire data contains a header but no detections")
        return FireBatch(raw_count=0, invalid_count=0, duplicate_count=0, records=[])

    normalized = normalize_and_impute(raw_records)
    invalid_count = sum(
        1
        for record in normalized
        if not is_valid_location(record.latitude, record.longitude)
    )

    cleaned = sanitize_and_dedupe(normalized)
    duplicate_count = len(normalized) - invalid_count - len(cleaned)

    if verbose:
        if invalid_count:
            print(f"Removed {invalid_count} detections with invalid coordinates")
        if duplicate_count:
            print(f"Removed {duplicate_count} duplicate detections")
        print(f"Final result: {len(cleaned)} fire detections")

    return FireBatch(
        raw_count=len(raw_records),
        invalid_count=invalid_count,
        duplicate_count=duplicate_count,
        records=cleaned,
    )


def load_fire_records(raw_text: str, verbose: bool = True) -> List[CleanedRecord]:
    """Parse, normalize and clean raw FIRMS CSV text."""
    return process_fire_data(raw_text, verbose=verbose).records


def load_snapshot_records(file_path: str, verbose: bool = True) -> List[CleanedRecord]:
    """Read a local FIRMS CSV snapshot and return its cleaned records."""
    if verbose:
        print(f"Loading fire data from snapshot: {file_path}")
    return load_fire_records(read_snapshot_text(file_path), verbose=verbose)
