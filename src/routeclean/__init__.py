"""Speed-based noise removal for GPS journeys."""

from routeclean.core.point import GeoPoint
from routeclean.core.route import Route
from routeclean.modules.noise_filter import NoiseFilter, NoiseSplit, classify

__version__ = "0.1.0"

__all__ = [
    "GeoPoint",
    "NoiseFilter",
    "NoiseSplit",
    "Route",
    "classify",
]
