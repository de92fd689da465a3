"""
Fire Clustering Module

Provides grid-based spatial aggregation of cleaned fire detections for map
overview rendering. Detections are bucketed into fixed-size lat/lon cells and
each occupied cell is reduced to a single summary point.
"""

import math
from typing import Iterable, List

import polars as pl

from ..utils.numeric import round_half_up
from .records import CleanedRecord, ClusterCell, records_to_frame

# Grid clustering configuration
DEFAULT_CELL_SIZE_DEG = 0.1  # ~11 km at the equator
DEFAULT_MAX_CELLS = 1000  # Caps response size for map rendering


def grid_cell_index(value: float, cell_size_deg: float = DEFAULT_CELL_SIZE_DEG) -> int:
    """
    Return the grid index of a coordinate along one axis.

    Halfway values round up (towards +inf), e.g. with 0.5 degree cells
    0.25 maps to index 1 and -0.25 to index 0.
    """
    return math.floor(value * (1 / cell_size_deg) + 0.5)


def assign_grid_cells(
    df: pl.DataFrame, cell_size_deg: float = DEFAULT_CELL_SIZE_DEG
) -> pl.DataFrame:
    """
    Add integer grid cell columns to a fire record DataFrame.

    Args:
        df: DataFrame with 'latitude' and 'longitude' columns
        cell_size_deg: Cell edge length in degrees

    Returns:
        DataFrame with additional 'cell_lat' and 'cell_lon' columns
    """
    # 0.15 * 10 is exactly 1.5; 0.15 / 0.1 is 1.4999999999999998
    per_degree = 1 / cell_size_deg
    return df.with_columns(
        [
            ((pl.col("latitude") * per_degree) + 0.5)
            .floor()
            .cast(pl.Int64)
            .alias("cell_lat"),
            ((pl.col("longitude") * per_degree) + 0.5)
            .floor()
            .cast(pl.Int64)
            .alias("cell_lon"),
        ]
    )


def aggregate_clusters(
    records: Iterable[CleanedRecord],
    max_cells: int = DEFAULT_MAX_CELLS,
    cell_size_deg: float = DEFAULT_CELL_SIZE_DEG,
) -> List[ClusterCell]:
    """
    Group cleaned fire detections into grid cells.

    Args:
        records: Cleaned fire records
        max_cells: Maximum number of cells returned
        cell_size_deg: Cell edge length in degrees

    Returns:
        Cluster cells sorted by member count, largest first. Cells with equal
        counts keep the order in which they were first seen. Cells beyond
        max_cells are dropped.

    Raises:
        ValueError: If max_cells is negative or cell_size_deg is not positive
    """
    if max_cells < 0:
        raise ValueError(f"max_cells must be >= 0, got {max_cells}")
    if not cell_size_deg > 0:
        raise ValueError(f"cell_size_deg must be > 0, got {cell_size_deg}")

    records = list(records)
    if not records or max_cells == 0:
        return []

    cell_stats = (
        assign_grid_cells(records_to_frame(records), cell_size_deg)
        .lazy()
        .group_by(["cell_lat", "cell_lon"], maintain_order=True)
        .agg(
            [
                pl.col("latitude").mean().alias("lat"),
                pl.col("longitude").mean().alias("lon"),
                pl.len().alias("count"),
                pl.col("confidence").mean().alias("avg_confidence"),
                pl.col("bright_ti4").mean().alias("avg_temp"),
                pl.col("frp").mean().alias("avg_frp"),
            ]
        )
        .sort("count", descending=True, maintain_order=True)
        .head(max_cells)
        .collect()
    )

    return [
        ClusterCell(
            lat=row["lat"],
            lon=row["lon"],
            count=int(row["count"]),
            avg_confidence=round_half_up(row["avg_confidence"], 1),
            avg_temp=round_half_up(row["avg_temp"], 1),
            avg_frp=round_half_up(row["avg_frp"], 1),
        )
        for row in cell_stats.iter_rows(named=True)
    ]
