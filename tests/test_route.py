import pytest
from routeclean.core.point import GeoPoint
from routeclean.core.route import Route, sort_by_timestamp

def test_from_points_sorts_by_timestamp():
    a = GeoPoint(lat=1.0, lon=1.0, timestamp=30)
    b = GeoPoint(lat=2.0, lon=2.0, timestamp=10)
    c = GeoPoint(lat=3.0, lon=3.0, timestamp=20)

    route = Route.from_points([a, b, c])

    assert list(route) == [b, c, a]
    assert len(route) == 3
    assert route.start_time == 10
    assert route.end_time == 30

def test_sort_is_stable_for_equal_timestamps():
    first = GeoPoint(lat=1.0, lon=1.0, timestamp=5)
    second = GeoPoint(lat=2.0, lon=2.0, timestamp=5)
    earlier = GeoPoint(lat=3.0, lon=3.0, timestamp=1)

    assert sort_by_timestamp([first, second, earlier]) == [earlier, first, second]
    assert sort_by_timestamp([second, first, earlier]) == [earlier, second, first]

def test_empty_route_has_no_times():
    route = Route.from_points([])
    assert len(route) == 0
    with pytest.raises(ValueError, match="Route is empty"):
        route.start_time
    with pytest.raises(ValueError, match="Route is empty"):
        route.end_time
