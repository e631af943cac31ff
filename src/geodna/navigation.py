"""
Spherical-earth navigation between GeoDNA codes.

distance_in_km() is an equirectangular approximation, not a great-circle
distance. Its error grows with distance and latitude; it is meant for
short to medium ranges such as radius searches of a few hundred km.
"""

import math
from typing import Optional

from .codec import decode, deg2rad, encode
from .options import Options, resolve_options
from .vector import add_vector


RADIUS_OF_EARTH = 6378100.0
"""Spherical earth radius in metres."""


def point_from_point_bearing_and_distance(
    code: str,
    bearing: float,
    distance: float,
    precision: Optional[int] = None,
    options: Optional[Options] = None,
) -> str:
    """
    Find the code reached by travelling from a code along a bearing.

    Args:
        code: Origin GeoDNA code
        bearing: Initial bearing in radians, clockwise from north
        distance: Distance in kilometres
        precision: Length of the returned code (default: len(code))
        options: Options record; only precision is used

    Returns:
        GeoDNA code of the destination
    """
    opts = resolve_options(options, precision)
    length = opts.precision_or(len(code))

    d = (distance * 1000.0) / RADIUS_OF_EARTH
    lat1, lon1 = decode(code, radians=True)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(d)
        + math.cos(lat1) * math.sin(d) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(d) * math.cos(lat1),
        math.cos(d) - math.sin(lat1) * math.sin(lat2),
    )

    return encode(lat2, lon2, precision=length, radians=True)


def distance_in_km(code_a: str, code_b: str) -> float:
    """
    Approximate distance between the centres of two codes.

    When the two centres lie on opposite sides of the antimeridian, both
    are first shifted 180 degrees in longitude so the difference does not
    wrap.

    Returns:
        Distance in kilometres
    """
    a = decode(code_a)
    b = decode(code_b)

    if a[1] * b[1] < 0.0 and abs(a[1] - b[1]) > 180.0:
        a = add_vector(code_a, 0.0, 180.0)
        b = add_vector(code_b, 0.0, 180.0)

    x = (deg2rad(b[1]) - deg2rad(a[1])) * math.cos((deg2rad(a[0]) + deg2rad(b[0])) / 2.0)
    y = deg2rad(b[0]) - deg2rad(a[0])
    return math.sqrt(x * x + y * y) * RADIUS_OF_EARTH / 1000.0
