"""
Same-sized neighbours of a GeoDNA code.
"""

from typing import List

from .codec import bounding_box, encode
from .vector import add_vector


def neighbours(code: str) -> List[str]:
    """
    Return the eight codes surrounding a code, at the same precision.

    Neighbours are found by shifting the centre of the code's box by one
    box width and/or height, wrapping around the antimeridian and poles.

    Order is row-major: dlat in (-1, 0, 1), then dlon in (-1, 0, 1),
    skipping (0, 0).

    Args:
        code: GeoDNA code

    Returns:
        List of 8 GeoDNA codes
    """
    box = bounding_box(code)
    width = box.width
    height = box.height

    result = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            lat, lon = add_vector(code, height * dy, width * dx)
            result.append(encode(lat, lon, precision=len(code)))
    return result
