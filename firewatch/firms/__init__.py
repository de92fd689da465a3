"""
FIRMS (Fire Information for Resource Management System) Package

This package provides functionality for parsing and cleaning NASA FIRMS
fire detection data, including grid-based aggregation of nearby detections.
"""

from .records import (
    RawRecord,
    NormalizedRecord,
    CleanedRecord,
    ClusterCell,
    records_to_frame,
    clusters_to_frame,
)
from .parser import parse_fire_csv
from .confidence import normalize_confidence
from .imputation import compute_field_means, normalize_and_impute
from .sanitize import build_dedup_key, is_valid_location, sanitize_and_dedupe
from .clustering import (
    aggregate_clusters,
    assign_grid_cells,
    grid_cell_index,
    DEFAULT_CELL_SIZE_DEG,
    DEFAULT_MAX_CELLS,
)
from .firms_pipeline import (
    FireBatch,
    process_fire_data,
    load_fire_records,
    load_snapshot_records,
    read_snapshot_text,
)

__all__ = [
    'RawRecord',
    'NormalizedRecord',
    'CleanedRecord',
    'ClusterCell',
    'records_to_frame',
    'clusters_to_frame',
    'parse_fire_csv',
    'normalize_confidence',
    'compute_field_means',
    'normalize_and_impute',
    'build_dedup_key',
    'is_valid_location',
    'sanitize_and_dedupe',
    'aggregate_clusters',
    'assign_grid_cells',
    'grid_cell_index',
    'DEFAULT_CELL_SIZE_DEG',
    'DEFAULT_MAX_CELLS',
    'FireBatch',
    'process_fire_data',
    'load_fire_records',
    'load_snapshot_records',
    'read_snapshot_text',
]
