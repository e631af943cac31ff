"""
Radius search over GeoDNA cells.

The search walks a rectangular grid of cells covering the square that
circumscribes the search circle, and keeps the cells whose centre lies
within the radius of the origin according to distance_in_km().

The walk starts at the north-west corner of the square (reached by
travelling radius * sqrt(2) on a bearing of -45 degrees) and spans the
longitude difference between that corner and the north-east corner, both
eastwards and southwards, one cell at a time. This is an approximation:
cells near a boundary that is not axis-aligned can be missed, and the
accuracy is bounded by the cell size of the requested precision.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from .codec import bounding_box, decode, encode
from .navigation import distance_in_km, point_from_point_bearing_and_distance
from .options import DEFAULT_SEARCH_PRECISION, Options, resolve_options
from .vector import add_vector, normalise


SQRT2 = math.sqrt(2.0)


@dataclass
class SearchConfig:
    """Configuration for a radius search."""

    precision: int = DEFAULT_SEARCH_PRECISION
    """Length of the returned cell codes."""

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError("precision must be an int")
        if self.precision < 2:
            raise ValueError("precision must be at least 2")


@dataclass
class SearchStats:
    """Statistics collected during a radius search."""

    rows_scanned: int = 0
    cells_visited: int = 0
    cells_accepted: int = 0
    duplicates_skipped: int = 0


class RadiusSearch:
    """
    Grid-walk search for the cells within a radius of a code.

    Each call to search() resets the statistics.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the search.

        Args:
            config: Search configuration (defaults to SearchConfig())
        """
        self.config = config or SearchConfig()
        self.stats = SearchStats()

    def search(self, code: str, radius: float) -> List[str]:
        """
        Find the cells within radius km of a code.

        Args:
            code: Origin GeoDNA code
            radius: Search radius in kilometres

        Returns:
            Cell codes at the configured precision, in visiting order,
            without duplicates

        Raises:
            InvalidCodeError: If code is not a valid GeoDNA code
            ValueError: If radius is negative
        """
        if radius < 0:
            raise ValueError("radius must be non-negative")

        self.stats = SearchStats()
        precision = self.config.precision
        half_diagonal = radius * SQRT2

        start = point_from_point_bearing_and_distance(
            code, -(math.pi / 4), half_diagonal, precision=precision
        )
        end = point_from_point_bearing_and_distance(
            code, math.pi / 4, half_diagonal, precision=precision
        )

        cell = bounding_box(start)
        step_lat = cell.height
        step_lon = cell.width

        _, start_lon = decode(start)
        _, end_lon = decode(end)
        delta = abs(normalise(0.0, abs(end_lon - start_lon))[1])

        found: List[str] = []
        seen = set()
        current = start
        tlat = 0.0

        while tlat <= delta:
            self.stats.rows_scanned += 1
            tlon = 0.0
            while tlon <= delta:
                lat, lon = add_vector(current, 0.0, step_lon)
                current = encode(lat, lon, precision=precision)
                self.stats.cells_visited += 1
                if distance_in_km(current, code) <= radius:
                    if current in seen:
                        self.stats.duplicates_skipped += 1
                    else:
                        seen.add(current)
                        found.append(current)
                        self.stats.cells_accepted += 1
                tlon += step_lon

            tlat += step_lat
            lat, lon = add_vector(start, -tlat, 0.0)
            current = encode(lat, lon, precision=precision)

        return found


def neighbours_within_radius(
    code: str,
    radius: float,
    precision: Optional[int] = None,
    options: Optional[Options] = None,
) -> List[str]:
    """
    Convenience function to run a radius search.

    Args:
        code: Origin GeoDNA code
        radius: Search radius in kilometres
        precision: Length of the returned codes (default: 12)
        options: Options record; only precision is used

    Returns:
        List of cell codes within the radius
    """
    opts = resolve_options(options, precision)
    config = SearchConfig(precision=opts.precision_or(DEFAULT_SEARCH_PRECISION))
    return RadiusSearch(config).search(code, radius)
