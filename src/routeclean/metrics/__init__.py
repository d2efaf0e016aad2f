from .noise import calculate_noise_fraction
from .speed import calculate_average_speed, calculate_speed_samples

__all__ = [
    "calculate_average_speed",
    "calculate_noise_fraction",
    "calculate_speed_samples",
]
