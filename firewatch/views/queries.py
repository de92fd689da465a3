"""
Fire Query Views

Stateless filters and reductions over cleaned fire detections: global
statistics, named-region subsets, bounding-box subsets and risk banding.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from ..errors import RegionNotFoundError
from ..firms.records import CleanedRecord
from ..utils.numeric import round_half_up

# Confidence above which a detection counts as high risk
HIGH_RISK_CONFIDENCE = 80.0
# Confidence above which a detection counts as medium risk
MEDIUM_RISK_CONFIDENCE = 50.0

# Region proxy: distinct 2x2 degree cells, clamped
REGION_PROXY_CELL_DEG = 2.0
REGION_PROXY_MIN = 1
REGION_PROXY_MAX = 200


@dataclass(frozen=True)
class RegionBounds:
    """Rectangular lat/lon bounds, inclusive on every side."""

    south: float
    north: float
    west: float
    east: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.south <= latitude <= self.north
            and self.west <= longitude <= self.east
        )


# Coarse rectangles for the regions the map client offers
REGION_BOUNDS: Dict[str, RegionBounds] = {
    "Brazil": RegionBounds(south=-33.75, north=5.27, west=-73.99, east=-34.79),
    "United States": RegionBounds(south=24.52, north=49.38, west=-125.0, east=-66.93),
    "Canada": RegionBounds(south=41.67, north=83.11, west=-141.0, east=-52.62),
    "Australia": RegionBounds(south=-43.64, north=-10.06, west=113.34, east=153.57),
    "Indonesia": RegionBounds(south=-11.0, north=6.0, west=95.0, east=141.0),
    "Russia": RegionBounds(south=41.19, north=81.86, west=19.64, east=180.0),
}

# Portuguese names used by the map client
REGION_ALIASES = {
    "Brasil": "Brazil",
    "Estados Unidos": "United States",
    "Canadá": "Canada",
    "Austrália": "Australia",
    "Indonésia": "Indonesia",
    "Rússia": "Russia",
}


@dataclass(frozen=True)
class GlobalStats:
    total: int
    high_risk_count: int
    avg_confidence: float
    region_proxy_count: int

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalFires": self.total,
            "highRisk": self.high_risk_count,
            "avgConfidence": self.avg_confidence,
            "countriesAffected": self.region_proxy_count,
        }


@dataclass(frozen=True)
class RegionStats:
    fires: int
    high_risk_count: int
    avg_temp: float
    avg_confidence: float

    def to_payload(self) -> Dict[str, Any]:
        return {
            "fires": self.fires,
            "highRisk": self.high_risk_count,
            "avgTemp": self.avg_temp,
            "confidence": self.avg_confidence,
        }


def risk_level(confidence: float) -> str:
    """Return "high", "medium" or "low" for a confidence value."""
    if confidence > HIGH_RISK_CONFIDENCE:
        return "high"
    if confidence > MEDIUM_RISK_CONFIDENCE:
        return "medium"
    return "low"


def count_by_risk_level(records: Iterable[CleanedRecord]) -> Dict[str, int]:
    """Count detections per risk level."""
    counts = {"high": 0, "medium": 0, "low": 0}
    for record in records:
        counts[risk_level(record.confidence)] += 1
    return counts


def compute_global_stats(records: Sequence[CleanedRecord]) -> GlobalStats:
    """
    Summarize all cleaned detections.

    The region proxy counts distinct 2x2 degree cells and is clamped to
    [1, 200]. It approximates the number of affected countries and makes no
    claim of accuracy.

    Args:
        records: Cleaned fire records

    Returns:
        GlobalStats; an empty input gives total 0, average 0 and proxy 1
    """
    total = len(records)
    high_risk = sum(1 for record in records if record.confidence > HIGH_RISK_CONFIDENCE)
    avg_confidence = (
        sum(record.confidence for record in records) / total if total else 0.0
    )

    cells = {
        (
            math.floor(record.latitude / REGION_PROXY_CELL_DEG),
            math.floor(record.longitude / REGION_PROXY_CELL_DEG),
        )
        for record in records
    }
    region_proxy = min(REGION_PROXY_MAX, max(REGION_PROXY_MIN, len(cells)))

    return GlobalStats(
        total=total,
        high_risk_count=high_risk,
        avg_confidence=round_half_up(avg_confidence, 1),
        region_proxy_count=region_proxy,
    )


def compute_region_stats(records: Sequence[CleanedRecord]) -> RegionStats:
    """Summarize a subset of detections, typically the output of filter_by_region."""
    total = len(records)
    high_risk = sum(1 for record in records if record.confidence > HIGH_RISK_CONFIDENCE)
    avg_temp = sum(record.bright_ti4 for record in records) / total if total else 0.0
    avg_confidence = (
        sum(record.confidence for record in records) / total if total else 0.0
    )
    return RegionStats(
        fires=total,
        high_risk_count=high_risk,
        avg_temp=round_half_up(avg_temp, 1),
        avg_confidence=round_half_up(avg_confidence, 1),
    )


def get_region_bounds(region_name: str) -> RegionBounds:
    """
    Look up the bounds of a named region.

    Matching ignores case and surrounding whitespace, and accepts the
    Portuguese aliases in REGION_ALIASES.

    Raises:
        RegionNotFoundError: If the name is not registered
    """
    wanted = region_name.strip().casefold()
    for name, bounds in REGION_BOUNDS.items():
        if name.casefold() == wanted:
            return bounds
    for alias, name in REGION_ALIASES.items():
        if alias.casefold() == wanted:
            return REGION_BOUNDS[name]
    raise RegionNotFoundError(region_name)


def filter_by_region(
    records: Iterable[CleanedRecord], region_name: str
) -> List[CleanedRecord]:
    """
    Return the detections inside a named region's bounds.

    Raises:
        RegionNotFoundError: If the name is not registered
    """
    bounds = get_region_bounds(region_name)
    return [
        record for record in records if bounds.contains(record.latitude, record.longitude)
    ]


def filter_by_bounding_box(
    records: Iterable[CleanedRecord],
    south: float = -90.0,
    north: float = 90.0,
    west: float = -180.0,
    east: float = 180.0,
) -> List[CleanedRecord]:
    """
    Return the detections inside a bounding box.

    Bounds are inclusive. When west > east the box is taken to cross the
    antimeridian, so longitudes >= west or <= east match. A plain rectangle
    filter would return nothing for such a box.

    Args:
        records: Cleaned fire records
        south: Minimum latitude
        north: Maximum latitude
        west: Western longitude edge
        east: Eastern longitude edge

    Returns:
        Matching records in input order

    Raises:
        ValueError: If any bound is NaN
    """
    if any(math.isnan(bound) for bound in (south, north, west, east)):
        raise ValueError(
            f"Bounding box contains NaN: south={south}, north={north}, west={west}, east={east}"
        )

    crosses_antimeridian = west > east
    filtered = []
    for record in records:
        if not south <= record.latitude <= north:
            continue
        if crosses_antimeridian:
            if not (record.longitude >= west or record.longitude <= east):
                continue
        elif not west <= record.longitude <= east:
            continue
        filtered.append(record)
    return filtered
