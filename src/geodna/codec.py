"""
Encoding and decoding between WGS84 coordinates and GeoDNA codes.

A GeoDNA code is a hemisphere marker ('w' for negative longitudes, 'e'
otherwise) followed by refinement characters from ALPHABET. Each
refinement character halves the latitude and the longitude interval of
the enclosing box, so every prefix of a code is a box containing the
boxes of all its extensions.

Precision counts every character of the code, marker included. A
precision of 1 or less produces the bare marker.

Coordinates are not clamped or validated. Out-of-range values still
produce a code, which is geometrically meaningless.
"""

import math
from typing import Dict, List, Optional, Tuple

from .bbox import BoundingBox
from .errors import InvalidCodeError
from .options import DEFAULT_PRECISION, Options, resolve_options


ALPHABET: List[str] = ["g", "a", "t", "c"]
DECODE_MAP: Dict[str, int] = {ch: value for value, ch in enumerate(ALPHABET)}
HEMISPHERES = ("w", "e")


def deg2rad(d: float) -> float:
    return (d / 180.0) * math.pi


def rad2deg(r: float) -> float:
    return (r / math.pi) * 180.0


def encode(
    lat: float,
    lon: float,
    precision: Optional[int] = None,
    radians: Optional[bool] = None,
    options: Optional[Options] = None,
) -> str:
    """
    Encode a coordinate pair as a GeoDNA code.

    Args:
        lat: Latitude (degrees unless radians is set)
        lon: Longitude (degrees unless radians is set)
        precision: Code length including the hemisphere marker (default: 22)
        radians: Interpret lat/lon as radians
        options: Options record; explicit keyword arguments take priority

    Returns:
        GeoDNA code string
    """
    opts = resolve_options(options, precision, radians)
    length = opts.precision_or(DEFAULT_PRECISION)

    if opts.radians:
        lat = rad2deg(lat)
        lon = rad2deg(lon)

    marker = "w" if lon < 0.0 else "e"
    box = BoundingBox.for_hemisphere(marker)
    chars = [marker]

    while len(chars) < length:
        index = box.child_index_for_point(lat, lon)
        box = box.child(index)
        chars.append(ALPHABET[index])

    return "".join(chars)


def bounding_box(code: str) -> BoundingBox:
    """
    Return the box a GeoDNA code denotes.

    Raises:
        InvalidCodeError: If the hemisphere marker is missing or a
            refinement character is outside ALPHABET
    """
    if not code:
        raise InvalidCodeError(code)

    marker = code[0]
    if marker not in HEMISPHERES:
        raise InvalidCodeError(code, marker)

    box = BoundingBox.for_hemisphere(marker)
    for ch in code[1:]:
        value = DECODE_MAP.get(ch)
        if value is None:
            raise InvalidCodeError(code, ch)
        box = box.child(value)

    return box


def decode(
    code: str,
    radians: Optional[bool] = None,
    options: Optional[Options] = None,
) -> Tuple[float, float]:
    """
    Decode a GeoDNA code to the centre of its bounding box.

    Args:
        code: GeoDNA code
        radians: Return radians instead of degrees
        options: Options record; only radians is used

    Returns:
        Tuple of (lat, lon)
    """
    opts = resolve_options(options, radians=radians)
    lat, lon = bounding_box(code).centre()
    if opts.radians:
        return deg2rad(lat), deg2rad(lon)
    return lat, lon


def is_valid(code: str) -> bool:
    """Check if a string decodes as a GeoDNA code."""
    try:
        bounding_box(code)
    except InvalidCodeError:
        return False
    return True
