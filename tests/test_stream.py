import io
import pytest

from routeclean.core.point import GeoPoint
from routeclean.core.stream import RouteReader, parse_record, read_route, write_route
from routeclean.errors import MalformedRecordError, RouteCleanError, RouteFileError

@pytest.fixture
def sample_csv(tmp_path):
    p = tmp_path / "journey.csv"
    p.write_text(
        "51.498714933833,-0.16011779913771,1326378718\n"
        "51.498405862027,-0.16040688237893,1326378723\n"
        "51.498205021215,-0.16062694283829,1326378728\n"
    )
    return p

def test_stream_points(sample_csv):
    points = list(RouteReader(sample_csv).stream())

    assert len(points) == 3
    assert points[0] == GeoPoint(lat=51.498714933833, lon=-0.16011779913771, timestamp=1326378718)
    assert points[2].timestamp == 1326378728
    assert isinstance(points[1].timestamp, int)

def test_stream_across_chunks(sample_csv):
    points = list(RouteReader(sample_csv, chunksize=2).stream())
    assert [p.timestamp for p in points] == [1326378718, 1326378723, 1326378728]

def test_read_route_sorts_by_timestamp(tmp_path):
    p = tmp_path / "unsorted.csv"
    p.write_text("1.0,1.0,30\n2.0,2.0,10\n3.0,3.0,20\n")

    route = read_route(p)

    assert [pt.timestamp for pt in route] == [10, 20, 30]

def test_semicolon_separator(tmp_path):
    p = tmp_path / "semi.csv"
    p.write_text("1.5;2.5;7\n")

    assert list(RouteReader(p, sep=';').stream()) == [GeoPoint(lat=1.5, lon=2.5, timestamp=7)]

def test_empty_file(tmp_path):
    p = tmp_path / "empty.csv"
    p.write_text("")

    assert len(read_route(p)) == 0

def test_missing_file(tmp_path):
    with pytest.raises(RouteFileError, match="File not found"):
        RouteReader(tmp_path / "nope.csv")

@pytest.mark.parametrize("content, record_number, message", [
    ("1.0,2.0,3\nabc,2.0,4\n", 2, "latitude 'abc' is not a number"),
    ("1.0,2.0,3\n1.0,2.0,4.5\n", 2, "timestamp '4.5' is not an integer"),
    ("91.0,2.0,3\n", 1, "latitude 91.0 outside"),
    ("1.0,-180.5,3\n", 1, "longitude -180.5 outside"),
    ("nan,2.0,3\n", 1, "latitude 'nan' is not finite"),
    ("1.0,,3\n", 1, "longitude is empty"),
    ("1.0,2.0,3\n4.0,5.0\n", 2, "timestamp is empty"),
    ("1.0,2.0,3,4\n", 1, "expected 3 fields, found 4"),
    ("1_0.5,2.0,3\n", 1, "latitude '1_0.5' is not a plain number"),
    ("1.0,2.0,3\n1.0,2.0,1_000\n", 2, "timestamp '1_000' is not a plain number"),
])
def test_malformed_records(tmp_path, content, record_number, message):
    p = tmp_path / "bad.csv"
    p.write_text(content)

    with pytest.raises(MalformedRecordError, match=message) as excinfo:
        list(RouteReader(p).stream())

    assert excinfo.value.record_number == record_number
    assert isinstance(excinfo.value, RouteCleanError)

def test_extra_field_after_first_record(tmp_path):
    p = tmp_path / "ragged.csv"
    p.write_text("1.0,2.0,3\n1.0,2.0,4,5\n")

    with pytest.raises(MalformedRecordError, match="Expected 3 fields") as excinfo:
        read_route(p)

    assert excinfo.value.record_number == 2

def test_parse_record_keeps_raw_fields():
    with pytest.raises(MalformedRecordError) as excinfo:
        parse_record(("1.0", "x", "3"), record_number=9)

    assert excinfo.value.raw == ("1.0", "x", "3")
    assert str(excinfo.value).startswith("record 9:")

def test_write_to_stream():
    out = io.StringIO()
    count = write_route([GeoPoint(lat=51.5, lon=-0.1, timestamp=100), GeoPoint(lat=-33.25, lon=151.0, timestamp=160)], out)

    assert count == 2
    assert out.getvalue() == "51.5,-0.1,100\n-33.25,151.0,160\n"

def test_written_file_reads_back(tmp_path, sample_csv):
    route = read_route(sample_csv)
    out = tmp_path / "out.csv"

    write_route(route, out)

    assert list(read_route(out)) == list(route)
