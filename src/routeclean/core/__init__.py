from .point import EARTH_RADIUS_M, GeoPoint, haversine_distance
from .route import Route, sort_by_timestamp

__all__ = [
    "EARTH_RADIUS_M",
    "GeoPoint",
    "haversine_distance",
    "Route",
    "sort_by_timestamp",
]
