"""Point geometry parsing.

Locations are stored as WKT text, ``POINT(<longitude> <latitude>)``. Callers go
through ``GeoPointParser`` so the stored representation can change without
touching the weather pipeline.
"""
import re
from dataclasses import dataclass

from backoffice.errors import LocationFormatError

_POINT_RE = re.compile(
    r"POINT\s*\(\s*([+-]?\d+(?:\.\d+)?)\s+([+-]?\d+(?:\.\d+)?)\s*\)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class GeoPoint:
    longitude: float
    latitude: float


def parse_point(value: str) -> GeoPoint:
    """Extract (longitude, latitude) from a ``POINT(lon lat)`` string.

    Raises:
        LocationFormatError: if the text is not a point geometry.
    """
    match = _POINT_RE.fullmatch(str(value).strip())
    if not match:
        raise LocationFormatError(f"Invalid location format: {value!r}")
    return GeoPoint(longitude=float(match.group(1)), latitude=float(match.group(2)))


class GeoPointParser:
    """Reads coordinates from the storage layer's geometry encoding."""

    def parse(self, value: str) -> GeoPoint:
        return parse_point(value)
