from typing import List, Optional
from routeclean.core.point import GeoPoint

def calculate_speed_samples(points: List[GeoPoint]) -> List[float]:
    """
    Collects the speed (km/h) of every consecutive pair of points that moved.

    Pairs with exactly zero displacement are stationary periods and contribute
    no sample. Points are expected in chronological order.

    Args:
        points: Timestamp-ordered list of points.

    Returns:
        Speeds of the moving transitions, in sequence order.
    """
    samples = []
    for p_prev, p_cur in zip(points, points[1:]):
        if p_prev.distance_to(p_cur) == 0:
            continue
        samples.append(p_prev.speed_to(p_cur))
    return samples

def calculate_average_speed(points: List[GeoPoint]) -> Optional[float]:
    """
    Arithmetic mean of the moving speed samples.
    Returns None when nothing moved (empty, single point or all coincident).
    """
    samples = calculate_speed_samples(points)
    if not samples:
        return None
    return sum(samples) / len(samples)
