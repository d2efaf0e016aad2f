import logging
import math
from typing import Iterable, List, NamedTuple, Optional

from routeclean.config import DEFAULT_NOISE_RATIO
from routeclean.core.point import GeoPoint
from routeclean.core.route import sort_by_timestamp
from routeclean.metrics.speed import calculate_average_speed

logger = logging.getLogger(__name__)


class NoiseSplit(NamedTuple):
    kept: List[GeoPoint]
    noise: List[GeoPoint]


def _check_ratio(ratio: float) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
        raise ValueError(f"Noise ratio must be a number, got {ratio!r}")
    if not math.isfinite(ratio) or ratio <= 0:
        raise ValueError(f"Noise ratio must be a positive finite number, got {ratio!r}")
    return float(ratio)


class NoiseFilter:
    """
    Speed-based outlier filter for a single journey.

    A point is noise when the speed needed to reach it from its previous
    neighbor and the speed needed to leave it for its next neighbor both exceed
    average speed * ratio. The first and last points have one neighbor only, so
    a single fast transition is enough to flag them.
    """

    def __init__(self, ratio: float = DEFAULT_NOISE_RATIO):
        """
        Args:
            ratio: multiples of the route's average speed above which a
                transition is considered suspicious.
        """
        self.ratio = _check_ratio(ratio)

    def classify(self, points: Iterable[GeoPoint], ratio: Optional[float] = None) -> NoiseSplit:
        """
        Splits the points into kept and noise lists, both in timestamp order.

        Args:
            points: Fixes of one journey, in any order.
            ratio: Optional ratio override for this specific call.
        """
        target_ratio = _check_ratio(ratio) if ratio is not None else self.ratio
        ordered = sort_by_timestamp(points)

        avg_speed = calculate_average_speed(ordered)
        if avg_speed is None:
            # Nothing moved, so every point is valid
            logger.debug("No moving transitions among %d points; reporting no noise", len(ordered))
            return NoiseSplit(kept=ordered, noise=[])

        noise_margin = avg_speed * target_ratio
        logger.debug(
            "Average speed %.2f km/h, ratio %.2f, noise margin %.2f km/h",
            avg_speed, target_ratio, noise_margin,
        )

        kept = []
        noise = []
        last = len(ordered) - 1
        for i, p_cur in enumerate(ordered):
            # Missing neighbors count as suspicious
            noise_prev = i == 0 or ordered[i - 1].speed_to(p_cur) > noise_margin
            noise_next = i == last or p_cur.speed_to(ordered[i + 1]) > noise_margin

            if noise_prev and noise_next:
                noise.append(p_cur)
            else:
                kept.append(p_cur)

        logger.debug("Classified %d points: %d kept, %d noise", len(ordered), len(kept), len(noise))
        return NoiseSplit(kept=kept, noise=noise)

    def clean(self, points: Iterable[GeoPoint]) -> List[GeoPoint]:
        """Returns the route with noise points removed."""
        return self.classify(points).kept

    def noise(self, points: Iterable[GeoPoint]) -> List[GeoPoint]:
        """Returns only the points that were filtered out."""
        return self.classify(points).noise


def classify(points: Iterable[GeoPoint], ratio: float = DEFAULT_NOISE_RATIO) -> NoiseSplit:
    """Partitions points into (kept, noise) using a one-off NoiseFilter."""
    return NoiseFilter(ratio).classify(points)
