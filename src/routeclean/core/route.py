from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable, Iterator, Tuple

from .point import GeoPoint


def sort_by_timestamp(points: Iterable[GeoPoint]) -> list[GeoPoint]:
    """
    Returns the points ordered by timestamp ascending.
    The sort is stable: fixes sharing a timestamp keep their input order.
    """
    return sorted(points, key=attrgetter('timestamp'))


@dataclass(frozen=True)
class Route:
    """
    A journey as an ordered sequence of fixes.
    Build it with from_points() to get the timestamp ordering.
    """
    points: Tuple[GeoPoint, ...] = field(default_factory=tuple)

    @classmethod
    def from_points(cls, points: Iterable[GeoPoint]) -> 'Route':
        return cls(points=tuple(sort_by_timestamp(points)))

    @property
    def start_time(self) -> int:
        if not self.points:
            raise ValueError("Route is empty")
        return self.points[0].timestamp

    @property
    def end_time(self) -> int:
        if not self.points:
            raise ValueError("Route is empty")
        return self.points[-1].timestamp

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self.points)
