"""
Data validation utilities for FIRMS fire detection snapshots.

Provides validation of raw snapshot files and DataFrames to report data
quality problems before they reach the cleaning pipeline.
"""

import os
import time
from typing import Any, Dict, List, Optional

import polars as pl

from ..firms.confidence import normalize_confidence
from ..firms.parser import REQUIRED_COLUMNS

# Snapshot freshness threshold used by the map service's refresh cycle
DEFAULT_MAX_AGE_MINUTES = 20

# Columns a complete FIRMS product carries
EXPECTED_COLUMNS = [
    "latitude",
    "longitude",
    "acq_date",
    "acq_time",
    "satellite",
    "instrument",
    "confidence",
    "frp",
]

# Columns identifying a detection for duplicate reporting
DUPLICATE_COLUMNS = ["latitude", "longitude", "acq_date", "acq_time", "satellite"]


def _empty_result() -> Dict[str, Any]:
    return {
        "file_exists": False,
        "file_size_mb": 0,
        "file_age_minutes": float("inf"),
        "is_fresh": False,
        "record_count": 0,
        "column_count": 0,
        "missing_columns": [],
        "invalid_coordinates": 0,
        "duplicate_count": 0,
        "errors": [],
        "warnings": [],
        "is_valid": False,
    }


def validate_fire_frame(
    df: pl.DataFrame,
    expected_columns: Optional[List[str]] = None,
    min_records: int = 1,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Validate a raw FIRMS DataFrame.

    Args:
        df: DataFrame as read from a snapshot, columns may be text
        expected_columns: Columns that should be present. If None, uses default.
        min_records: Minimum number of records required
        verbose: Whether to print each issue as it is found

    Returns:
        Dictionary containing validation results and statistics
    """
    if expected_columns is None:
        expected_columns = EXPECTED_COLUMNS

    result = _empty_result()
    _check_frame(df, result, expected_columns, min_records, verbose)
    result["is_valid"] = len(result["errors"]) == 0
    return result


def validate_snapshot_file(
    file_path: str,
    max_age_minutes: int = DEFAULT_MAX_AGE_MINUTES,
    expected_columns: Optional[List[str]] = None,
    min_records: int = 1,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Validate a FIRMS CSV snapshot on disk.

    Args:
        file_path: Path to the CSV snapshot
        max_age_minutes: Maximum age of file in minutes to be considered fresh
        expected_columns: Columns that should be present. If None, uses default.
        min_records: Minimum number of records required
        verbose: Whether to print each issue as it is found

    Returns:
        Dictionary containing validation results and statistics
    """
    if expected_columns is None:
        expected_columns = EXPECTED_COLUMNS

    result = _empty_result()

    # Step 1: Check file existence
    if not os.path.exists(file_path):
        _error(result, f"File does not exist: {file_path}", verbose)
        return result

    result["file_exists"] = True

    # Step 2: Check file age
    file_stat = os.stat(file_path)
    file_age_minutes = (time.time() - file_stat.st_mtime) / 60
    result["file_age_minutes"] = file_age_minutes

    if file_age_minutes <= max_age_minutes:
        result["is_fresh"] = True
    else:
        _warning(
            result,
            f"File is {file_age_minutes:.1f} minutes old (>{max_age_minutes} minutes)",
            verbose,
        )

    # Step 3: Check file size
    result["file_size_mb"] = file_stat.st_size / (1024 * 1024)
    if file_stat.st_size == 0:
        _error(result, "File is empty (0 bytes)", verbose)
        return result

    # Step 4: Try to read the file
    try:
        df = pl.read_csv(file_path, infer_schema=False, truncate_ragged_lines=True)
    except pl.exceptions.PolarsError as e:
        _error(result, f"Failed to read file: {e}", verbose)
        return result

    # Step 5: Frame checks
    _check_frame(df, result, expected_columns, min_records, verbose)

    result["is_valid"] = len(result["errors"]) == 0
    return result


def _check_frame(
    df: pl.DataFrame,
    result: Dict[str, Any],
    expected_columns: List[str],
    min_records: int,
    verbose: bool,
) -> None:
    df = df.rename({col: col.strip().lower() for col in df.columns})
    result["record_count"] = len(df)
    result["column_count"] = len(df.columns)

    if len(df) < min_records:
        _error(
            result,
            f"Insufficient records: {len(df)} (minimum required: {min_records})",
            verbose,
        )

    # Required columns are errors, other expected columns only warnings
    missing_columns = [col for col in expected_columns if col not in df.columns]
    result["missing_columns"] = missing_columns
    missing_required = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_required:
        _error(result, f"Missing required columns: {missing_required}", verbose)
        return
    optional_missing = [col for col in missing_columns if col not in REQUIRED_COLUMNS]
    if optional_missing:
        _warning(result, f"Missing expected columns: {optional_missing}", verbose)

    # Coordinates: unparseable or out of range rows will be dropped
    coords = df.select(
        [
            pl.col("latitude").cast(pl.Utf8).str.strip_chars().cast(pl.Float64, strict=False),
            pl.col("longitude").cast(pl.Utf8).str.strip_chars().cast(pl.Float64, strict=False),
        ]
    )
    invalid_coordinates = coords.filter(
        pl.col("latitude").is_null()
        | pl.col("longitude").is_null()
        | pl.col("latitude").is_nan()
        | pl.col("longitude").is_nan()
        | ~pl.col("latitude").is_between(-90, 90)
        | ~pl.col("longitude").is_between(-180, 180)
    ).height
    result["invalid_coordinates"] = invalid_coordinates
    if invalid_coordinates:
        _warning(
            result,
            f"Found {invalid_coordinates} rows with missing or out-of-range coordinates",
            verbose,
        )

    # Confidence values that will be imputed
    if "confidence" in df.columns:
        values = df["confidence"].cast(pl.Utf8).to_list()
        unreadable = sum(1 for value in values if normalize_confidence(value) is None)
        if values and unreadable == len(values):
            _warning(result, "All confidence values are unreadable", verbose)
        elif unreadable:
            _warning(
                result,
                f"{unreadable}/{len(values)} confidence values are unreadable and will be imputed",
                verbose,
            )

    # Brightness temperatures should be in Kelvin
    if "bright_ti4" in df.columns:
        brightness = (
            df["bright_ti4"].cast(pl.Utf8).str.strip_chars().cast(pl.Float64, strict=False)
        ).drop_nulls()
        if len(brightness) > 0:
            min_val = brightness.min()
            max_val = brightness.max()
            if min_val < 200 or max_val > 2000:
                _warning(
                    result,
                    f"bright_ti4 has unusual values: range {min_val:.1f} - {max_val:.1f} K",
                    verbose,
                )

    # Duplicate detections
    dup_cols = [col for col in DUPLICATE_COLUMNS if col in df.columns]
    duplicate_count = len(df) - len(df.unique(subset=dup_cols))
    result["duplicate_count"] = duplicate_count
    if duplicate_count > 0:
        _warning(result, f"Found {duplicate_count} potential duplicate records", verbose)


def _error(result: Dict[str, Any], message: str, verbose: bool) -> None:
    result["errors"].append(message)
    if verbose:
        print(f"[ERROR] {message}")


def _warning(result: Dict[str, Any], message: str, verbose: bool) -> None:
    result["warnings"].append(message)
    if verbose:
        print(f"[WARNING] {message}")


def print_validation_report(validation_result: Dict[str, Any]) -> None:
    """Print a formatted validation report."""

    print("\n" + "=" * 50)
    print("VALIDATION REPORT")
    print("=" * 50)

    # File status
    print("[FILE] File Status:")
    print(f"   Exists: {'OK' if validation_result['file_exists'] else 'FAIL'}")
    print(f"   Size: {validation_result['file_size_mb']:.2f} MB")
    print(f"   Age: {validation_result['file_age_minutes']:.1f} minutes")
    print(f"   Fresh: {'OK' if validation_result['is_fresh'] else 'WARN'}")

    # Data status
    print("\n[DATA] Data Status:")
    print(f"   Records: {validation_result['record_count']:,}")
    print(f"   Columns: {validation_result['column_count']}")
    print(f"   Invalid coordinates: {validation_result['invalid_coordinates']}")
    print(f"   Potential duplicates: {validation_result['duplicate_count']}")

    # Issues
    if validation_result["errors"]:
        print(f"\n[ERROR] ERRORS ({len(validation_result['errors'])}):")
        for error in validation_result["errors"]:
            print(f"   - {error}")

    if validation_result["warnings"]:
        print(f"\n[WARN] WARNINGS ({len(validation_result['warnings'])}):")
        for warning in validation_result["warnings"]:
            print(f"   - {warning}")

    # Overall status
    overall_status = "PASSED" if validation_result.get("is_valid", False) else "FAILED"
    print(f"\n[RESULT] Overall Status: {overall_status}")
    print("=" * 50)


def validate_and_report(
    file_path: str,
    max_age_minutes: int = DEFAULT_MAX_AGE_MINUTES,
    expected_columns: Optional[List[str]] = None,
    min_records: int = 1,
    print_report: bool = True,
) -> bool:
    """
    Validate a snapshot file and optionally print a formatted report.

    Args:
        file_path: Path to file to validate
        max_age_minutes: Maximum acceptable file age in minutes
        expected_columns: List of expected column names
        min_records: Minimum number of records required
        print_report: Whether to print the validation report

    Returns:
        True if validation passed, False otherwise
    """
    validation_result = validate_snapshot_file(
        file_path=file_path,
        max_age_minutes=max_age_minutes,
        expected_columns=expected_columns,
        min_records=min_records,
    )

    if print_report:
        print_validation_report(validation_result)

    return validation_result.get("is_valid", False)
