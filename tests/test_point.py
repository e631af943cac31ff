"""Tests for the Point wrapper."""

import math

import pytest
from geodna.bbox import BoundingBox
from geodna.point import Point


WELLINGTON = "etctttagatagtgacagtcta"
NELSON = "etcttgctagcttagt"


class TestPointCreation:
    """Tests for creating points."""

    def test_from_code(self):
        """Test creating a point from a code."""
        p = Point.from_code(WELLINGTON)
        assert p.code == WELLINGTON
        assert p.lat == pytest.approx(-41.288889, abs=0.005)
        assert p.lon == pytest.approx(174.777222, abs=0.005)

    def test_from_coordinates(self):
        """Test creating a point from coordinates."""
        p = Point.from_coordinates(-41.288889, 174.777222)
        assert p.code == WELLINGTON
        assert p.coordinates == (-41.288889, 174.777222)
        assert p.precision == 22

    def test_from_coordinates_precision(self):
        """Test an explicit precision."""
        p = Point.from_coordinates(-41.283333, 173.283333, precision=16)
        assert p.code == NELSON

    def test_from_radians(self):
        """Test creating a point from radians."""
        p = Point.from_coordinates(math.radians(-41.288889), math.radians(174.777222), radians=True)
        assert p.code == WELLINGTON
        assert p.lat == pytest.approx(-41.288889)

    def test_str(self):
        """Test the string form is the code."""
        assert str(Point.from_code(NELSON)) == NELSON

    def test_equality_by_code(self):
        """Test points with the same code are equal and hash alike."""
        a = Point.from_code(WELLINGTON)
        b = Point.from_coordinates(-41.288889, 174.777222)
        assert a == b
        assert len({a, b}) == 1

    def test_immutable(self):
        """Test points cannot be modified."""
        p = Point.from_code(NELSON)
        with pytest.raises(AttributeError):
            p.code = WELLINGTON


class TestPointOperations:
    """Tests for point methods."""

    def test_bounding_box(self):
        """Test the bounding box of a point."""
        p = Point.from_code("etctttagatag")
        assert p.bounding_box() == BoundingBox(
            (-41.30859375, -41.220703125),
            (174.7265625, 174.814453125),
        )

    def test_add_vector(self):
        """Test shifting a point keeps its precision."""
        p = Point.from_code(WELLINGTON).add_vector(10.0, 10.0)
        assert p.precision == 22
        assert p.lat == pytest.approx(-31.288889, abs=0.005)
        assert p.lon == pytest.approx(-175.222777, abs=0.005)
        assert p.code.startswith("w")

    def test_neighbours(self):
        """Test neighbours are points of the same precision."""
        result = Point.from_code("etctttagatag").neighbours()
        assert len(result) == 8
        assert all(isinstance(n, Point) and n.precision == 12 for n in result)

    def test_distance(self):
        """Test distance between two points."""
        w = Point.from_code(WELLINGTON)
        n = Point.from_code(NELSON)
        assert 120.0 < w.distance_in_km(n) < 140.0
        assert w.distance_in_km(NELSON) == w.distance_in_km(n)

    def test_contains(self):
        """Test prefix containment."""
        region = Point.from_code(WELLINGTON[:6])
        inner = Point.from_code(WELLINGTON)
        assert region.contains(inner)
        assert region.contains(WELLINGTON)
        assert not inner.contains(region)
        assert not region.contains(NELSON[:3] + "g" * 5)

    def test_neighbours_within_radius(self):
        """Test radius search from a point."""
        result = Point.from_code(NELSON).neighbours_within_radius(40.0, precision=10)
        assert result
        assert all(p.precision == 10 for p in result)

    def test_reduced_neighbours_within_radius(self):
        """Test reduced radius search finds Wellington from Nelson."""
        wellington = Point.from_code(WELLINGTON)
        result = Point.from_code(NELSON).reduced_neighbours_within_radius(140.0, precision=11)
        assert any(p.contains(wellington) for p in result)
