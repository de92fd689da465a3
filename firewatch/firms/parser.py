"""
FIRMS CSV Parser Module

Turns raw FIRMS CSV text (API response, cache file or local snapshot) into
RawRecord rows. Values are kept as text; typing happens in the imputation
stage.
"""

import io
from typing import List

import polars as pl

from ..errors import InvalidFormatError
from .records import RawRecord

# Columns without which the text is not a fire detection table
REQUIRED_COLUMNS = ["latitude", "longitude"]


def parse_fire_csv(raw_text: str) -> List[RawRecord]:
    """
    Parse FIRMS CSV text into raw records.

    Blank rows are skipped and header names are trimmed and lowercased.
    Quoted fields may span lines. An empty cell reads as "", a column missing
    from the header leaves its field None. Rows with extra fields are
    truncated; missing trailing fields carry no value.

    Args:
        raw_text: Delimited text with a header row

    Returns:
        One RawRecord per non-empty data row, in input order

    Raises:
        InvalidFormatError: If the text is empty, unreadable as CSV, or the
            header lacks a required column
    """
    if raw_text is None or not raw_text.strip():
        raise InvalidFormatError("Fire data is empty")

    # Blank lines before the header; blank rows after it are dropped below
    text = raw_text.lstrip()

    try:
        df = pl.read_csv(
            io.StringIO(text),
            infer_schema=False,
            truncate_ragged_lines=True,
            missing_utf8_is_empty_string=True,
        )
        df = df.rename({col: _clean_column_name(col) for col in df.columns})
    except pl.exceptions.PolarsError as e:
        raise InvalidFormatError(f"Could not read fire data as CSV: {e}") from e

    missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        raise InvalidFormatError(
            f"Fire data is missing required columns {missing_cols} (found: {df.columns[:10]})"
        )

    records = []
    for row in df.iter_rows(named=True):
        if all(value is None or not value.strip() for value in row.values()):
            continue
        records.append(RawRecord.from_row(row))
    return records


def _clean_column_name(name: str) -> str:
    return name.replace("\ufeff", "").strip().lower()
