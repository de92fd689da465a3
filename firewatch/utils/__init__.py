"""
Utility functions for fire data processing.

Common utilities for numeric parsing, rounding, frame conversion and file output.
"""

from .numeric import parse_number, round_half_up
from .data_utils import (
    save_frame,
    save_outputs,
    print_summary_statistics,
    records_to_frame,
    clusters_to_frame,
)

__all__ = [
    'parse_number',
    'round_half_up',
    'save_frame',
    'save_outputs',
    'print_summary_statistics',
    'records_to_frame',
    'clusters_to_frame',
]
