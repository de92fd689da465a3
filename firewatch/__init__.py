"""
FireWatch

Normalization, deduplication and spatial aggregation of NASA FIRMS
satellite fire detections for map-based clients.
"""

__version__ = "1.0.0"
