"""Unit tests for FIRMS CSV parsing."""

from __future__ import annotations

import pytest

from firewatch.errors import FireWatchError, InvalidFormatError
from firewatch.firms.parser import parse_fire_csv


def test_parse_fire_csv_reads_well_formed_rows(firms_csv_text: str) -> None:
    """Every data row should become one raw record holding the field text."""
    records = parse_fire_csv(firms_csv_text)

    assert len(records) == 5
    assert records[0].latitude == "-10.123"
    assert records[0].longitude == "-55.456"
    assert records[0].confidence == "h"
    assert records[0].satellite == "N"
    assert records[4].acq_time == "0930"


def test_parse_fire_csv_empty_cells_are_empty_text(firms_csv_text: str) -> None:
    """Empty cells should read as empty text, distinct from absent columns."""
    records = parse_fire_csv(firms_csv_text)

    assert records[4].confidence == ""
    assert records[4].frp == ""
    assert records[4].bright_ti4 == ""


def test_parse_fire_csv_trailing_empty_cell() -> None:
    """A trailing separator marks an empty cell, not a missing one."""
    records = parse_fire_csv("latitude,longitude,confidence\n1.0,2.0,\n")

    assert records[0].confidence == ""


def test_parse_fire_csv_normalizes_header_names() -> None:
    """Header names should be matched after trimming and lowercasing."""
    records = parse_fire_csv(" Latitude , LONGITUDE ,Confidence\n1.5,2.5,high\n")

    assert len(records) == 1
    assert records[0].latitude == "1.5"
    assert records[0].longitude == "2.5"
    assert records[0].confidence == "high"


def test_parse_fire_csv_missing_column_leaves_field_none() -> None:
    """Columns absent from the header should leave the field unset."""
    records = parse_fire_csv("latitude,longitude\n1.0,2.0\n")

    assert records[0].frp is None
    assert records[0].satellite is None


def test_parse_fire_csv_skips_blank_lines() -> None:
    """Blank lines anywhere in the text should not produce records."""
    text = "latitude,longitude\n\n1.0,2.0\n   \n3.0,4.0\n\n"

    records = parse_fire_csv(text)

    assert [record.latitude for record in records] == ["1.0", "3.0"]


def test_parse_fire_csv_header_only_returns_no_records() -> None:
    """A header with no data rows is valid and empty."""
    assert parse_fire_csv("latitude,longitude,confidence\n") == []


def test_parse_fire_csv_rejects_missing_required_column() -> None:
    """Text without a longitude column is not a fire detection table."""
    with pytest.raises(InvalidFormatError):
        parse_fire_csv("latitude,confidence\n1.0,high\n")


@pytest.mark.parametrize("text", ["", "   \n\n"])
def test_parse_fire_csv_rejects_empty_text(text: str) -> None:
    """Empty input should raise the package error type."""
    with pytest.raises(FireWatchError):
        parse_fire_csv(text)


def test_invalid_format_error_is_value_error() -> None:
    """Callers catching ValueError should also catch format errors."""
    with pytest.raises(ValueError):
        parse_fire_csv("<html>Service unavailable</html>\n")


def test_parse_fire_csv_tolerates_ragged_rows() -> None:
    """Short rows lose their trailing fields and long rows are truncated."""
    text = "latitude,longitude,confidence,frp\n1.0,2.0\n3.0,4.0,high,5,extra,more\n"

    records = parse_fire_csv(text)

    assert len(records) == 2
    assert (records[0].latitude, records[0].longitude) == ("1.0", "2.0")
    assert records[0].confidence in (None, "")
    assert records[0].frp in (None, "")
    assert (records[1].confidence, records[1].frp) == ("high", "5")


def test_parse_fire_csv_keeps_quoted_newlines() -> None:
    """A quoted field spanning lines stays within one record."""
    text = 'latitude,longitude,satellite\n1.0,2.0,"Terra\nAqua"\n3.0,4.0,N\n'

    records = parse_fire_csv(text)

    assert len(records) == 2
    assert records[0].satellite == "Terra\nAqua"
    assert records[1].latitude == "3.0"


def test_parse_fire_csv_skips_leading_blank_lines() -> None:
    """Blank lines before the header should not hide it."""
    records = parse_fire_csv("\n\n  \nlatitude,longitude\n1.0,2.0\n")

    assert [record.latitude for record in records] == ["1.0"]
