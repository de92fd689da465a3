"""
Data utility functions for fire detection processing.

Provides file saving and summary printing shared by the pipeline entry points.
"""

import os
from typing import Dict, Sequence

import polars as pl

from ..firms.records import (
    ClusterCell,
    NormalizedRecord,
    clusters_to_frame,
    records_to_frame,
)


def save_frame(df: pl.DataFrame, file_path: str) -> str:
    """
    Save a DataFrame as parquet or csv depending on the file suffix.

    Args:
        df: DataFrame to save
        file_path: Output path ending in .parquet or .csv

    Returns:
        The path written

    Raises:
        ValueError: If the suffix is not supported
    """
    if file_path.endswith(".parquet"):
        df.write_parquet(file_path)
    elif file_path.endswith(".csv"):
        df.write_csv(file_path)
    else:
        raise ValueError(f"Unsupported output format: {file_path}")
    return file_path


def save_outputs(
    records: Sequence[NormalizedRecord],
    clusters: Sequence[ClusterCell],
    output_dir: str,
    verbose: bool = True,
) -> Dict[str, str]:
    """
    Save cleaned records and cluster cells to the output directory.

    Args:
        records: Cleaned fire records
        clusters: Cluster cells from the spatial aggregator
        output_dir: Directory to write into, created if missing
        verbose: Whether to print file save information

    Returns:
        Dictionary mapping output kind to filename
    """
    os.makedirs(output_dir, exist_ok=True)
    saved_files = {}

    fires_file = os.path.join(output_dir, "fires_cleaned.parquet")
    saved_files["fires"] = save_frame(records_to_frame(records), fires_file)
    if verbose:
        print(f"   Saved {len(records)} cleaned fire records to: {fires_file}")

    clusters_file = os.path.join(output_dir, "fire_clusters.parquet")
    saved_files["clusters"] = save_frame(clusters_to_frame(clusters), clusters_file)
    if verbose:
        print(f"   Saved {len(clusters)} cluster cells to: {clusters_file}")

    return saved_files


def print_summary_statistics(
    raw_count: int,
    records: Sequence[NormalizedRecord],
    clusters: Sequence[ClusterCell],
    risk_counts: Dict[str, int],
) -> None:
    """Print summary statistics for a processed fire batch."""

    print("\n=== Summary Statistics ===")
    print(f"Raw detections: {raw_count}")
    print(f"Cleaned detections: {len(records)}")
    if raw_count:
        print(f"Dropped as invalid or duplicate: {raw_count - len(records)}")

    print(f"Cluster cells: {len(clusters)}")
    if clusters:
        largest = clusters[0]
        print(
            f"  Largest cell: {largest.count} detections near ({largest.lat:.3f}, {largest.lon:.3f})"
        )

    for level in ("high", "medium", "low"):
        count = risk_counts.get(level, 0)
        share = count / len(records) * 100 if records else 0.0
        print(f"  {level} risk: {count} ({share:.1f}%)")
