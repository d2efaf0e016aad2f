from typing import List
from routeclean.core.point import GeoPoint

def calculate_noise_fraction(original: List[GeoPoint], noise: List[GeoPoint]) -> float:
    """
    Calculates the share of the original points classified as noise.
    Fraction = Noise Count / Original Count.

    Args:
        original: List of original points.
        noise: List of points removed as noise.

    Returns:
        Fraction in [0, 1] (e.g., 0.05 for 5 removed out of 100). Returns 0.0 if original is empty.
    """
    if not original:
        return 0.0
    return len(noise) / len(original)
