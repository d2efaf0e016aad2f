"""Default settings for routeclean.

Values are module constants read by the rest of the package. Each can be
overridden through an environment variable; unparseable values are ignored.
"""

from __future__ import annotations

import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Multiples of the average speed before a transition is deemed suspicious.
DEFAULT_NOISE_RATIO = _env_float("ROUTECLEAN_NOISE_RATIO", 1.34)

# Rows parsed per pandas chunk when reading records.
CSV_CHUNKSIZE = _env_int("ROUTECLEAN_CSV_CHUNKSIZE", 1000)
