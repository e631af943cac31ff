"""Tests for neighbour lookup."""

import pytest
from geodna.codec import encode, bounding_box
from geodna.errors import InvalidCodeError
from geodna.neighbours import neighbours


CODE = "etctttagatag"


class TestNeighbours:
    """Tests for neighbours()."""

    def test_count_and_length(self):
        """Test there are eight neighbours of the same length."""
        result = neighbours(CODE)
        assert len(result) == 8
        for code in result:
            assert len(code) == len(CODE)

    def test_distinct_and_exclude_self(self):
        """Test neighbours are distinct and exclude the code itself."""
        result = neighbours(CODE)
        assert len(set(result)) == 8
        assert CODE not in result

    def test_same_size_boxes(self):
        """Test every neighbour box has the same size."""
        box = bounding_box(CODE)
        for code in neighbours(CODE):
            other = bounding_box(code)
            assert other.width == box.width
            assert other.height == box.height

    def test_order_is_row_major(self):
        """Test neighbours are ordered south-west to north-east."""
        result = neighbours(CODE)

        # dy=-1, dx=-1: south-west
        assert tuple(bounding_box(result[0])) == (
            (-41.396484375, -41.30859375),
            (174.638671875, 174.7265625),
        )
        # dy=0, dx=-1: west
        assert tuple(bounding_box(result[3])) == (
            (-41.30859375, -41.220703125),
            (174.638671875, 174.7265625),
        )
        # dy=0, dx=1: east
        assert tuple(bounding_box(result[4])) == (
            (-41.30859375, -41.220703125),
            (174.814453125, 174.90234375),
        )
        # dy=1, dx=0: north
        assert tuple(bounding_box(result[6])) == (
            (-41.220703125, -41.1328125),
            (174.7265625, 174.814453125),
        )

    def test_deterministic(self):
        """Test repeated calls return the same list."""
        assert neighbours(CODE) == neighbours(CODE)

    def test_wraps_across_antimeridian(self):
        """Test eastern neighbours of a cell at 180 degrees are in the west."""
        code = encode(0.0, 179.99, precision=8)
        result = neighbours(code)
        for index in (2, 4, 7):
            assert result[index].startswith("w")
        for index in (0, 3, 5):
            assert result[index].startswith("e")

    def test_full_precision(self, wellington):
        """Test neighbours of a full-length code."""
        result = neighbours(wellington)
        assert len(result) == 8
        assert all(len(code) == 22 for code in result)

    def test_invalid_code(self):
        """Test that an invalid code raises."""
        with pytest.raises(InvalidCodeError):
            neighbours("etcz")
