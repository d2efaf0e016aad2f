import csv
import logging
import math
import re
from pathlib import Path
from typing import IO, Iterable, Iterator, Sequence

import pandas as pd

from routeclean.config import CSV_CHUNKSIZE
from routeclean.errors import MalformedRecordError, RouteFileError
from .point import GeoPoint
from .route import Route

logger = logging.getLogger(__name__)

FIELD_COUNT = 3

_PARSER_LINE = re.compile(r"in line (\d+)")


def _parse_coordinate(raw: str, name: str, limit: float, record_number: int, fields) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise MalformedRecordError(f"{name} {raw!r} is not a number", record_number, fields) from None
    if not math.isfinite(value):
        raise MalformedRecordError(f"{name} {raw!r} is not finite", record_number, fields)
    if not -limit <= value <= limit:
        raise MalformedRecordError(f"{name} {value} outside [-{limit:g}, {limit:g}]", record_number, fields)
    return value


def parse_record(fields: Sequence, record_number: int) -> GeoPoint:
    """
    Builds a GeoPoint from one (lat, lon, timestamp) record.
    Raises MalformedRecordError instead of coercing bad fields.
    """
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(
            f"expected {FIELD_COUNT} fields, found {len(fields)}", record_number, fields
        )

    values = []
    for name, raw in zip(("latitude", "longitude", "timestamp"), fields):
        # pandas fills fields missing from short rows with NaN
        if not isinstance(raw, str) or not raw.strip():
            raise MalformedRecordError(f"{name} is empty", record_number, fields)
        # float() and int() accept digit separators such as "1_000"
        if '_' in raw:
            raise MalformedRecordError(f"{name} {raw.strip()!r} is not a plain number", record_number, fields)
        values.append(raw.strip())

    lat = _parse_coordinate(values[0], "latitude", 90.0, record_number, fields)
    lon = _parse_coordinate(values[1], "longitude", 180.0, record_number, fields)
    try:
        timestamp = int(values[2])
    except ValueError:
        raise MalformedRecordError(
            f"timestamp {values[2]!r} is not an integer", record_number, fields
        ) from None

    return GeoPoint(lat=lat, lon=lon, timestamp=timestamp)


class RouteReader:
    """
    Reads fixes from a headerless delimited file, one lat,lon,timestamp record per line.
    Records are parsed in chunks so large journeys are not tokenized at once.
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: str = ',',
        chunksize: int = CSV_CHUNKSIZE,
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise RouteFileError(f"File not found: {self.filepath}")
        self.sep = sep
        self.chunksize = chunksize

    def stream(self) -> Iterator[GeoPoint]:
        """
        Yields points in file order.
        """
        try:
            reader = pd.read_csv(
                self.filepath,
                sep=self.sep,
                header=None,
                dtype=str,
                keep_default_na=False,
                chunksize=self.chunksize,
            )
        except pd.errors.EmptyDataError:
            logger.info("%s is empty", self.filepath)
            return
        except UnicodeDecodeError as exc:
            raise RouteFileError(f"{self.filepath} is not a text file: {exc}") from exc

        try:
            with reader:
                for chunk in reader:
                    for row in chunk.itertuples(index=True, name=None):
                        index, fields = row[0], row[1:]
                        yield parse_record(fields, record_number=index + 1)
        except pd.errors.ParserError as exc:
            # e.g. "Expected 3 fields in line 2, saw 4"
            match = _PARSER_LINE.search(str(exc))
            record_number = int(match.group(1)) if match else None
            raise MalformedRecordError(str(exc).strip(), record_number) from exc
        except UnicodeDecodeError as exc:
            raise RouteFileError(f"{self.filepath} is not a text file: {exc}") from exc


def read_route(filepath: str | Path, sep: str = ',') -> Route:
    """Reads a whole file into a timestamp-ordered Route."""
    points = list(RouteReader(filepath, sep=sep).stream())
    logger.info("Read %d points from %s", len(points), filepath)
    return Route.from_points(points)


def write_route(points: Iterable[GeoPoint], target: str | Path | IO[str], sep: str = ',') -> int:
    """
    Writes points as lat,lon,timestamp lines, the same format read_route accepts.
    `target` is a path or an open text stream (e.g. sys.stdout).
    Returns the number of records written.
    """
    if hasattr(target, 'write'):
        return _write_rows(points, target, sep)

    with open(target, 'w', newline='', encoding='utf-8') as f:
        count = _write_rows(points, f, sep)
    logger.info("Wrote %d points to %s", count, target)
    return count


def _write_rows(points: Iterable[GeoPoint], f: IO[str], sep: str) -> int:
    writer = csv.writer(f, delimiter=sep, lineterminator='\n')
    count = 0
    for p in points:
        writer.writerow(p.tuple)
        count += 1
    return count
