"""
Validation helpers for fire data processing.

Contains utilities for validating snapshot files and raw fire tables.
"""

from .data_validator import (
    validate_fire_frame,
    validate_snapshot_file,
    print_validation_report,
    validate_and_report,
)

__all__ = [
    'validate_fire_frame',
    'validate_snapshot_file',
    'print_validation_report',
    'validate_and_report',
]
