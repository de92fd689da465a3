"""
FireWatch - Main Processing Module

Cleans a FIRMS fire detection snapshot and writes the derived views a map
client consumes.

Process:
1. Validates and reads a local FIRMS CSV snapshot
2. Normalizes confidence, imputes missing values, drops invalid coordinates
   and duplicate detections
3. Aggregates detections into grid cells
4. Computes global statistics
5. Writes cleaned records, cluster cells and GeoJSON to the output directory

Usage:
    firewatch --snapshot data/fires_snapshot.csv --output-dir output
    python -m firewatch.firewatch_main --max-clusters 500 --cell-size 0.25
"""

import argparse
import os
import sys
from typing import List, Optional

from .config import load_settings
from .errors import InvalidFormatError
from .firms import aggregate_clusters, process_fire_data, read_snapshot_text
from .utils import print_summary_statistics, save_outputs
from .validation import print_validation_report, validate_snapshot_file
from .views import (
    clusters_to_geojson,
    compute_global_stats,
    count_by_risk_level,
    records_to_geojson,
    save_geojson,
)


def run(
    snapshot_path: str,
    output_dir: str,
    max_clusters: int,
    cell_size_deg: float,
    max_age_minutes: int,
    verbose: bool = True,
) -> dict:
    """
    Process one snapshot end to end.

    Args:
        snapshot_path: Local FIRMS CSV snapshot
        output_dir: Directory for output files
        max_clusters: Maximum number of cluster cells to keep
        cell_size_deg: Cluster cell edge length in degrees
        max_age_minutes: Snapshot age above which a freshness warning is issued
        verbose: Whether to print progress and reports

    Returns:
        The global statistics payload

    Raises:
        FileNotFoundError: If the snapshot does not exist
        InvalidFormatError: If the snapshot is not a fire detection table
    """
    if verbose:
        print("=== FireWatch - Fire Data Processing ===\n")

    # Step 1: Validate and read the snapshot
    if verbose:
        print("1. Validating snapshot...")
    validation_result = validate_snapshot_file(snapshot_path, max_age_minutes)
    if verbose:
        print_validation_report(validation_result)
    raw_text = read_snapshot_text(snapshot_path)

    # Step 2: Clean
    if verbose:
        print("\n2. Cleaning fire detections...")
    batch = process_fire_data(raw_text, verbose=verbose)

    # Step 3: Cluster
    if verbose:
        print(f"\n3. Aggregating detections into {cell_size_deg} degree cells...")
    clusters = aggregate_clusters(
        batch.records, max_cells=max_clusters, cell_size_deg=cell_size_deg
    )
    if verbose:
        print(f"   Kept {len(clusters)} cluster cells")

    # Step 4: Statistics
    stats = compute_global_stats(batch.records)

    # Step 5: Save
    if verbose:
        print("\n4. Saving outputs...")
    save_outputs(batch.records, clusters, output_dir, verbose=verbose)
    fires_geojson = os.path.join(output_dir, "fires.geojson")
    clusters_geojson = os.path.join(output_dir, "fire_clusters.geojson")
    save_geojson(records_to_geojson(batch.records), fires_geojson)
    save_geojson(clusters_to_geojson(clusters), clusters_geojson)
    if verbose:
        print(f"   Saved GeoJSON to: {fires_geojson}, {clusters_geojson}")

    if verbose:
        print_summary_statistics(
            batch.raw_count, batch.records, clusters, count_by_risk_level(batch.records)
        )
        payload = stats.to_payload()
        print("\n=== Global Statistics ===")
        for key, value in payload.items():
            print(f"{key}: {value}")
        print(f"\n[SUCCESS] Processed {len(batch.records)} fire detections")
        print("\n=== Processing Complete ===")

    return stats.to_payload()


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"[ERROR] Invalid configuration: {e}")
        return 1

    parser = argparse.ArgumentParser(
        description="Clean a FIRMS fire detection snapshot and build map views"
    )
    parser.add_argument(
        "--snapshot",
        default=settings.snapshot_path,
        help=f"FIRMS CSV snapshot (default: {settings.snapshot_path})",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help=f"Output directory (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--max-clusters",
        type=int,
        default=settings.max_cluster_cells,
        help=f"Maximum cluster cells (default: {settings.max_cluster_cells})",
    )
    parser.add_argument(
        "--cell-size",
        type=float,
        default=settings.cluster_cell_deg,
        help=f"Cluster cell size in degrees (default: {settings.cluster_cell_deg})",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print errors"
    )
    args = parser.parse_args(argv)

    try:
        run(
            snapshot_path=args.snapshot,
            output_dir=args.output_dir,
            max_clusters=args.max_clusters,
            cell_size_deg=args.cell_size,
            max_age_minutes=settings.snapshot_max_age_minutes,
            verbose=not args.quiet,
        )
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        return 1
    except InvalidFormatError as e:
        print(f"[ERROR] Snapshot is not valid fire data: {e}")
        return 1
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
