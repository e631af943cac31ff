"""
Bounding boxes and the bisection step shared by encoding and decoding.

A GeoDNA code names a box on the (latitude, longitude) plane. Every
refinement character halves the box along both axes, so each box has
exactly four children, indexed by a 2-bit value:

- bit 1 set: upper half of the longitude interval
- bit 0 set: upper half of the latitude interval
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple


LAT_BIT = 1
LON_BIT = 2


@dataclass(frozen=True)
class BoundingBox:
    """
    A pair of closed intervals in degrees.

    Iterating yields the latitude interval and then the longitude interval,
    so a box unpacks as ``(lat_min, lat_max), (lon_min, lon_max) = box``.
    """
    lat: Tuple[float, float]  # (lat_min, lat_max)
    lon: Tuple[float, float]  # (lon_min, lon_max)

    @classmethod
    def for_hemisphere(cls, marker: str) -> BoundingBox:
        """Root box for a hemisphere marker ('w' or 'e')."""
        if marker == "w":
            return cls((-90.0, 90.0), (-180.0, 0.0))
        return cls((-90.0, 90.0), (0.0, 180.0))

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        yield self.lat
        yield self.lon

    @property
    def width(self) -> float:
        """Extent along the longitude axis in degrees."""
        return abs(self.lon[1] - self.lon[0])

    @property
    def height(self) -> float:
        """Extent along the latitude axis in degrees."""
        return abs(self.lat[1] - self.lat[0])

    def midpoints(self) -> Tuple[float, float]:
        """Return the (lat_mid, lon_mid) bisection points."""
        return (self.lat[0] + self.lat[1]) / 2.0, (self.lon[0] + self.lon[1]) / 2.0

    def centre(self) -> Tuple[float, float]:
        """Return the centroid as (lat, lon)."""
        return self.midpoints()

    def child_index_for_point(self, lat: float, lon: float) -> int:
        """
        Determine which child contains (lat, lon).

        Values on a midpoint go to the lower half. Points outside the box
        are not rejected; they fall into the nearest half on each axis.

        Returns:
            Child index in 0..3
        """
        lat_mid, lon_mid = self.midpoints()
        index = 0
        if lon > lon_mid:
            index |= LON_BIT
        if lat > lat_mid:
            index |= LAT_BIT
        return index

    def child(self, index: int) -> BoundingBox:
        """
        Narrow the box to one of its four children.

        Args:
            index: 2-bit child index (see module docstring)
        """
        lat_mid, lon_mid = self.midpoints()
        if index & LON_BIT:
            lon = (lon_mid, self.lon[1])
        else:
            lon = (self.lon[0], lon_mid)
        if index & LAT_BIT:
            lat = (lat_mid, self.lat[1])
        else:
            lat = (self.lat[0], lat_mid)
        return BoundingBox(lat, lon)
