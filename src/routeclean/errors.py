"""Error types raised by the record adapters."""

from __future__ import annotations


class RouteCleanError(Exception):
    """Base error for routeclean failures."""


class RouteFileError(RouteCleanError):
    """Raised when an input file is missing or is not delimited text."""


class MalformedRecordError(RouteCleanError):
    """Raised when a record cannot be parsed into a fix."""

    def __init__(self, message: str, record_number: int | None = None, raw=None):
        if record_number is not None:
            message = f"record {record_number}: {message}"
        super().__init__(message)
        self.record_number = record_number
        self.raw = raw


__all__ = [
    "RouteCleanError",
    "RouteFileError",
    "MalformedRecordError",
]
