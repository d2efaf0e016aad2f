import math
from dataclasses import dataclass

# Mean Earth radius in meters (spherical approximation).
EARTH_RADIUS_M = 6371000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float,
                       radius: float = EARTH_RADIUS_M) -> float:
    """
    Great-circle distance in meters between two (lat, lon) pairs given in degrees.
    Pass a different radius to measure on another body.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)

    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(d_lon / 2) * math.sin(d_lon / 2)
    )
    # Rounding can push near-antipodal pairs just past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return abs(radius * c)


@dataclass(frozen=True)
class GeoPoint:
    """
    Represents a single GPS fix (lat, lon, t).
    timestamp is an integer number of seconds (epoch or any monotonic unit).
    """
    lat: float
    lon: float
    timestamp: int

    @property
    def lat_radians(self) -> float:
        return math.radians(self.lat)

    @property
    def lon_radians(self) -> float:
        return math.radians(self.lon)

    @property
    def tuple(self):
        return (self.lat, self.lon, self.timestamp)

    def distance_to(self, other: 'GeoPoint', radius: float = EARTH_RADIUS_M) -> float:
        """Distance in meters to another point along the sphere surface."""
        return haversine_distance(self.lat, self.lon, other.lat, other.lon, radius)

    def speed_to(self, other: 'GeoPoint') -> float:
        """
        Average speed in km/h needed to travel from this point to `other`.

        Elapsed time is other.timestamp - self.timestamp, so callers pass points
        in chronological order. Simultaneous fixes report 0 rather than infinity.
        """
        d_time = other.timestamp - self.timestamp
        if d_time == 0:
            return 0.0

        meters_per_second = self.distance_to(other) / d_time
        return meters_per_second * 3600 / 1000
