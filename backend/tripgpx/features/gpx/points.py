"""
Point normalization.

Validates the raw text of a GPX point. Bad values never raise: a point
without usable coordinates is reported invalid and dropped by the caller,
a bad elevation or timestamp is simply absent.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from .xml_adapter import RawPoint


class Coordinates(NamedTuple):
    lat: float
    lon: float
    valid: bool


class Timestamp(NamedTuple):
    date: datetime
    iso_string: str


@dataclass(frozen=True)
class ParsedPoint:
    """A point that passed coordinate validation."""
    lat: float
    lon: float
    elevation: Optional[float] = None
    time: Optional[Timestamp] = None
    name: Optional[str] = None


def _to_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_coordinates(raw: RawPoint) -> Coordinates:
    """Parse lat/lon attributes; valid only if both are finite numbers."""
    lat = _to_float(raw.lat)
    lon = _to_float(raw.lon)
    if lat is None or lon is None:
        return Coordinates(math.nan, math.nan, False)
    return Coordinates(lat, lon, True)


def parse_elevation(raw: RawPoint) -> Optional[float]:
    """Elevation in meters, or None if missing or not numeric."""
    return _to_float(raw.ele)


def to_iso_string(moment: datetime) -> str:
    """UTC ISO 8601 with Z suffix; milliseconds only when non-zero."""
    moment = moment.astimezone(timezone.utc)
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    millis = moment.microsecond // 1000
    if millis:
        return f"{base}.{millis:03d}Z"
    return f"{base}Z"


def parse_timestamp(raw: RawPoint) -> Optional[Timestamp]:
    """
    Parse the <time> child.

    Values without an offset are taken as UTC. Unparseable values
    are treated as missing.
    """
    if not raw.time:
        return None
    try:
        moment = datetime.fromisoformat(raw.time)
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return Timestamp(moment, to_iso_string(moment))
    except (ValueError, OverflowError):
        return None


def parse_point(raw: RawPoint) -> Optional[ParsedPoint]:
    """Full point, or None when its coordinates are invalid."""
    coords = parse_coordinates(raw)
    if not coords.valid:
        return None
    return ParsedPoint(
        lat=coords.lat,
        lon=coords.lon,
        elevation=parse_elevation(raw),
        time=parse_timestamp(raw),
        name=raw.name,
    )
