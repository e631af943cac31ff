"""
Object wrapper around the GeoDNA functions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .bbox import BoundingBox
from .codec import bounding_box, decode, encode, rad2deg
from .cover import reduce
from .navigation import distance_in_km
from .neighbours import neighbours
from .search import neighbours_within_radius
from . import vector


@dataclass(frozen=True)
class Point:
    """
    An immutable GeoDNA code together with its coordinates in degrees.

    Two points are equal when their codes are equal.
    """
    code: str
    lat: float = field(compare=False)
    lon: float = field(compare=False)

    @classmethod
    def from_code(cls, code: str) -> Point:
        """Create a point from a GeoDNA code."""
        lat, lon = decode(code)
        return cls(code, lat, lon)

    @classmethod
    def from_coordinates(
        cls,
        lat: float,
        lon: float,
        precision: Optional[int] = None,
        radians: bool = False,
    ) -> Point:
        """
        Create a point by encoding coordinates.

        The stored lat/lon are the given coordinates in degrees, not the
        centre of the resulting box.
        """
        code = encode(lat, lon, precision=precision, radians=radians)
        if radians:
            lat, lon = rad2deg(lat), rad2deg(lon)
        return cls(code, lat, lon)

    def __str__(self) -> str:
        return self.code

    @property
    def precision(self) -> int:
        return len(self.code)

    @property
    def coordinates(self) -> Tuple[float, float]:
        return self.lat, self.lon

    def bounding_box(self) -> BoundingBox:
        return bounding_box(self.code)

    def add_vector(self, dlat: float, dlon: float) -> Point:
        """Shift by (dlat, dlon) degrees, keeping the same precision."""
        lat, lon = vector.add_vector(self.code, dlat, dlon)
        return Point.from_coordinates(lat, lon, precision=self.precision)

    def neighbours(self) -> List[Point]:
        return [Point.from_code(code) for code in neighbours(self.code)]

    def distance_in_km(self, other: Union[Point, str]) -> float:
        return distance_in_km(self.code, str(other))

    def neighbours_within_radius(
        self, radius: float, precision: Optional[int] = None
    ) -> List[Point]:
        codes = neighbours_within_radius(self.code, radius, precision=precision)
        return [Point.from_code(code) for code in codes]

    def reduced_neighbours_within_radius(
        self, radius: float, precision: Optional[int] = None
    ) -> List[Point]:
        """Radius search reduced to a minimal covering set."""
        codes = neighbours_within_radius(self.code, radius, precision=precision)
        return [Point.from_code(code) for code in reduce(codes)]

    def contains(self, other: Union[Point, str]) -> bool:
        """Check if other's box lies within this point's box (prefix match)."""
        return str(other).startswith(self.code)
