"""
Fire Query Views Package

Contains stateless query helpers over cleaned fire detections and GeoJSON
export for map clients.
"""

from .queries import (
    GlobalStats,
    RegionBounds,
    RegionStats,
    REGION_BOUNDS,
    REGION_ALIASES,
    compute_global_stats,
    compute_region_stats,
    count_by_risk_level,
    filter_by_bounding_box,
    filter_by_region,
    get_region_bounds,
    risk_level,
)
from .export_geojson import (
    create_fire_point_feature,
    create_cluster_feature,
    create_geojson_featurecollection,
    records_to_geojson,
    clusters_to_geojson,
    save_geojson,
)

__all__ = [
    "GlobalStats",
    "RegionBounds",
    "RegionStats",
    "REGION_BOUNDS",
    "REGION_ALIASES",
    "compute_global_stats",
    "compute_region_stats",
    "count_by_risk_level",
    "filter_by_bounding_box",
    "filter_by_region",
    "get_region_bounds",
    "risk_level",
    "create_fire_point_feature",
    "create_cluster_feature",
    "create_geojson_featurecollection",
    "records_to_geojson",
    "clusters_to_geojson",
    "save_geojson",
]
