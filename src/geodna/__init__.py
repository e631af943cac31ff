"""
geodna: Quaternary geospatial encoding of latitude/longitude pairs.

This package maps WGS84 (lat, lon) coordinates to GeoDNA codes, short
strings that recursively split the globe into quadrants, and provides
decoding, bounding boxes, neighbour lookup, distance approximation,
radius search and reduction of code sets to minimal covers.
"""

__version__ = "0.1.0"

from .errors import InvalidCodeError
from .options import Options, DEFAULT_PRECISION, DEFAULT_SEARCH_PRECISION
from .bbox import BoundingBox
from .codec import ALPHABET, DECODE_MAP, encode, decode, bounding_box, is_valid
from .vector import add_vector, normalise
from .navigation import RADIUS_OF_EARTH, point_from_point_bearing_and_distance, distance_in_km
from .neighbours import neighbours
from .search import RadiusSearch, SearchConfig, SearchStats, neighbours_within_radius
from .cover import reduce
from .point import Point

__all__ = [
    "InvalidCodeError",
    "Options",
    "DEFAULT_PRECISION",
    "DEFAULT_SEARCH_PRECISION",
    "BoundingBox",
    "ALPHABET",
    "DECODE_MAP",
    "encode",
    "decode",
    "bounding_box",
    "is_valid",
    "add_vector",
    "normalise",
    "RADIUS_OF_EARTH",
    "point_from_point_bearing_and_distance",
    "distance_in_km",
    "neighbours",
    "RadiusSearch",
    "SearchConfig",
    "SearchStats",
    "neighbours_within_radius",
    "reduce",
    "Point",
]
