"""
Fire Detection Record Types

Fixed-schema records for each stage of the FIRMS pipeline, and their polars
DataFrame form. Raw rows are decoded into RawRecord once at the parser
boundary and never travel as untyped dictionaries past it.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence

import polars as pl

UNKNOWN_SOURCE = "Unknown"


@dataclass(frozen=True)
class RawRecord:
    """One row of a FIRMS table. Every field is untrusted text or None when absent."""

    latitude: Optional[str] = None
    longitude: Optional[str] = None
    bright_ti4: Optional[str] = None
    scan: Optional[str] = None
    track: Optional[str] = None
    acq_date: Optional[str] = None
    acq_time: Optional[str] = None
    satellite: Optional[str] = None
    instrument: Optional[str] = None
    confidence: Optional[str] = None
    version: Optional[str] = None
    bright_ti5: Optional[str] = None
    frp: Optional[str] = None
    daynight: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> "RawRecord":
        """Build a record from a column-name mapping, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        return cls(**{name: value for name, value in row.items() if name in known})


@dataclass(frozen=True)
class NormalizedRecord:
    """
    Typed fire detection with imputed numeric fields.

    latitude and longitude are NaN when they could not be parsed; the
    sanitizer drops such records. confidence, frp and bright_ti4 are always
    finite.
    """

    latitude: float
    longitude: float
    confidence: float
    frp: float
    bright_ti4: float
    acq_date: str = ""
    acq_time: str = ""
    satellite: str = UNKNOWN_SOURCE
    instrument: str = UNKNOWN_SOURCE

    def to_payload(self) -> Dict[str, Any]:
        """Render the record in the shape served to map clients."""
        return {
            "lat": self.latitude,
            "lon": self.longitude,
            "confidence": self.confidence,
            "temp": self.bright_ti4,
            "frp": self.frp,
            "date": self.acq_date,
            "time": self.acq_time,
            "satellite": self.satellite,
            "instrument": self.instrument,
        }


# A NormalizedRecord that passed bounds validation and deduplication
CleanedRecord = NormalizedRecord


@dataclass(frozen=True)
class ClusterCell:
    """Summary of all cleaned records falling into one grid cell."""

    lat: float
    lon: float
    count: int
    avg_confidence: float
    avg_temp: float
    avg_frp: float

    def to_payload(self) -> Dict[str, Any]:
        return {
            "lat": self.lat,
            "lon": self.lon,
            "count": self.count,
            "avgConfidence": self.avg_confidence,
            "avgTemp": self.avg_temp,
            "avgFrp": self.avg_frp,
        }


# Column types for the DataFrame form of fire records
RECORD_SCHEMA = {
    "latitude": pl.Float64,
    "longitude": pl.Float64,
    "confidence": pl.Float64,
    "frp": pl.Float64,
    "bright_ti4": pl.Float64,
    "acq_date": pl.Utf8,
    "acq_time": pl.Utf8,
    "satellite": pl.Utf8,
    "instrument": pl.Utf8,
}

# Column types for the DataFrame form of cluster cells
CLUSTER_SCHEMA = {
    "lat": pl.Float64,
    "lon": pl.Float64,
    "count": pl.Int64,
    "avg_confidence": pl.Float64,
    "avg_temp": pl.Float64,
    "avg_frp": pl.Float64,
}


def records_to_frame(records: Sequence[NormalizedRecord]) -> pl.DataFrame:
    """
    Convert fire records to a polars DataFrame.

    Args:
        records: Normalized or cleaned fire records

    Returns:
        DataFrame with one row per record and RECORD_SCHEMA columns
    """
    columns = {
        name: [getattr(record, name) for record in records] for name in RECORD_SCHEMA
    }
    return pl.DataFrame(columns, schema=RECORD_SCHEMA)


def clusters_to_frame(clusters: Sequence[ClusterCell]) -> pl.DataFrame:
    """Convert cluster cells to a polars DataFrame."""
    columns = {
        name: [getattr(cluster, name) for cluster in clusters]
        for name in CLUSTER_SCHEMA
    }
    return pl.DataFrame(columns, schema=CLUSTER_SCHEMA)
