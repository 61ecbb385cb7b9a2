import logging
import math
import unicodedata
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)


def normalize_place(value: Optional[str]) -> Optional[str]:
    """Normalize a city or region name for case/diacritic-insensitive matching.

    "Trois-Rivières" and "trois rivieres" both become "trois rivieres".
    Returns None for empty input.
    """
    if value is None:
        return None
    decomposed = unicodedata.normalize('NFKD', str(value))
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    key = ' '.join(stripped.replace('-', ' ').replace("'", ' ').lower().split())
    return key or None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC (SQLite drops tzinfo on round-trip)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_float(value: Any) -> Optional[float]:
    """Convert Decimal/int/str to float, None if missing or unparseable."""
    if value is None:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Could not convert {value!r} to float")
        return None
    if math.isnan(result):
        return None
    return result
