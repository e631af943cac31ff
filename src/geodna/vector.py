"""
Planar vector arithmetic on (lat, lon) pairs in degrees.

Both axes wrap around: latitude is folded into [-90, 90) and longitude
into [-180, 180). Shifting past the antimeridian therefore lands on the
other side of the globe rather than outside the valid range.
"""

from typing import Tuple

from .codec import decode


def _fmod(x: float, m: float) -> float:
    # Result always has the sign of m, and never equals m.
    return (x % m + m) % m


def normalise(lat: float, lon: float) -> Tuple[float, float]:
    """
    Wrap a (lat, lon) pair back into the valid ranges.

    Args:
        lat: Latitude in degrees, any value
        lon: Longitude in degrees, any value

    Returns:
        Tuple of (lat, lon) with lat in [-90, 90) and lon in [-180, 180)
    """
    return (
        _fmod(lat + 90.0, 180.0) - 90.0,
        _fmod(lon + 180.0, 360.0) - 180.0,
    )


def add_vector(code: str, dlat: float, dlon: float) -> Tuple[float, float]:
    """
    Shift the centre of a code's box by (dlat, dlon) degrees.

    Args:
        code: GeoDNA code
        dlat: Latitude offset in degrees
        dlon: Longitude offset in degrees

    Returns:
        Tuple of (lat, lon) after wrapping
    """
    lat, lon = decode(code)
    return (
        _fmod(lat + 90.0 + dlat, 180.0) - 90.0,
        _fmod(lon + 180.0 + dlon, 360.0) - 180.0,
    )
