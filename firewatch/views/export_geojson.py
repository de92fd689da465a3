"""
GeoJSON Export Helper Module

Provides functionality for converting cleaned fire detections and cluster
cells into GeoJSON for map clients, and for saving the result to disk.
"""

import json
from typing import Iterable, List, Optional

from ..firms.records import CleanedRecord, ClusterCell
from .queries import risk_level


def create_fire_point_feature(record: CleanedRecord) -> dict:
    """
    Create a point feature for a single fire detection.

    Args:
        record: Cleaned fire record

    Returns:
        dict: GeoJSON feature with point geometry
    """
    properties = record.to_payload()
    del properties["lat"], properties["lon"]
    properties["risk"] = risk_level(record.confidence)

    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [
                float(record.longitude),
                float(record.latitude),
            ],  # GeoJSON order is [lon, lat]
        },
        "properties": properties,
    }


def create_cluster_feature(cluster: ClusterCell) -> dict:
    """
    Create a point feature for a cluster cell centroid.

    Args:
        cluster: Cluster cell

    Returns:
        dict: GeoJSON feature with point geometry
    """
    properties = cluster.to_payload()
    del properties["lat"], properties["lon"]
    properties["feature_type"] = "cluster"

    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [float(cluster.lon), float(cluster.lat)]},
        "properties": properties,
    }


def create_geojson_featurecollection(
    features: List[dict], metadata: Optional[dict] = None
) -> dict:
    """
    Create a GeoJSON FeatureCollection from a list of features.

    Args:
        features (list): List of GeoJSON features
        metadata (dict, optional): Extra top-level members, e.g. a timestamp

    Returns:
        dict: GeoJSON FeatureCollection
    """
    collection = {"type": "FeatureCollection", "features": features}
    if metadata:
        collection.update(metadata)
    return collection


def records_to_geojson(records: Iterable[CleanedRecord]) -> dict:
    """Convert cleaned fire records into a FeatureCollection of points."""
    return create_geojson_featurecollection(
        [create_fire_point_feature(record) for record in records]
    )


def clusters_to_geojson(clusters: Iterable[ClusterCell]) -> dict:
    """Convert cluster cells into a FeatureCollection of centroid points."""
    return create_geojson_featurecollection(
        [create_cluster_feature(cluster) for cluster in clusters]
    )


def save_geojson(geojson: dict, filepath: str):
    """
    Save GeoJSON to file.

    Args:
        geojson (dict): GeoJSON object
        filepath (str): Output file path
    """
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(geojson, f, indent=2, ensure_ascii=False)
