"""
Error types for fire data processing.

Structural failures are raised to the caller. Per-record data quality
problems never raise: they are recovered by imputation or omission.
"""


class FireWatchError(Exception):
    """Base class for all fire data processing failures."""


class InvalidFormatError(FireWatchError, ValueError):
    """Raised when raw text does not look like a fire detection table.

    Callers must not cache or store anything derived from the offending text.
    """


class RegionNotFoundError(FireWatchError, KeyError):
    """Raised when a named region is not in the region bounds table."""

    def __init__(self, region_name: str):
        self.region_name = region_name
        super().__init__(region_name)

    def __str__(self) -> str:
        return f"Unknown region: {self.region_name!r}"
