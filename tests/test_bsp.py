"""Tests for the recursive tile computation."""

import itertools

import pytest

from bsptile.tiling.bsp import compute_tiles, split_count, split_zone
from bsptile.tiling.rect import Rect


ZONE = Rect(0, 0, 1000, 500)

# Zones large enough that 0..12 windows never produce empty tiles
ROOMY_ZONES = [
    Rect(0, 0, 1000, 500),
    Rect(0, 0, 500, 1000),
    Rect(0, 0, 640, 640),
    Rect(-1920, 0, 1920, 1040),
    Rect(100, 40, 1366, 728),
    Rect(0, 0, 3840, 200),
]


def _disjoint(a, b):
    """Closed rectangles [left, right] x [top, bottom] share no point."""
    return (
        a.right < b.left
        or b.right < a.left
        or a.bottom < b.top
        or b.bottom < a.top
    )


class TestScenarios:
    """Worked examples with exact expected tiles."""

    def test_zero_windows(self):
        """No windows, no tiles."""
        assert compute_tiles(0, ZONE) == []

    def test_single_window_gets_whole_zone(self):
        """One window receives the zone unchanged."""
        assert compute_tiles(1, ZONE) == [ZONE]

    def test_two_windows_wide_zone(self):
        """A wide zone is split into left/right columns with a 1px gap."""
        assert compute_tiles(2, ZONE) == [
            Rect(0, 0, 500, 500),
            Rect(501, 0, 499, 500),
        ]

    def test_three_windows_wide_zone(self):
        """The odd window goes to the second half, which splits in rows."""
        assert compute_tiles(3, ZONE) == [
            Rect(0, 0, 500, 500),
            Rect(501, 0, 499, 250),
            Rect(501, 251, 499, 249),
        ]

    def test_four_windows_square_halves(self):
        """Each 500x500 half is square and therefore splits in rows."""
        assert compute_tiles(4, ZONE) == [
            Rect(0, 0, 500, 250),
            Rect(0, 251, 500, 249),
            Rect(501, 0, 499, 250),
            Rect(501, 251, 499, 249),
        ]

    def test_offset_zone(self):
        """Tiles are placed relative to the zone origin."""
        zone = Rect(100, 40, 800, 600)
        assert compute_tiles(2, zone) == [
            Rect(100, 40, 400, 600),
            Rect(501, 40, 399, 600),
        ]


class TestSplit:
    """Tests for the single split step."""

    @pytest.mark.parametrize("count", range(0, 20))
    def test_counts_sum_and_second_gets_ceil(self, count):
        """The halves sum to count and the second half gets ceil(count/2)."""
        first, second = split_count(count)
        assert first + second == count
        assert second == (count + 1) // 2
        assert first == count // 2

    def test_wide_zone_splits_columns(self):
        """width > height cuts left/right."""
        first, second = split_zone(Rect(0, 0, 11, 10))
        assert first == Rect(0, 0, 5, 10)
        assert second == Rect(6, 0, 5, 10)

    def test_tall_zone_splits_rows(self):
        """height > width cuts top/bottom."""
        first, second = split_zone(Rect(0, 0, 10, 11))
        assert first == Rect(0, 0, 10, 5)
        assert second == Rect(0, 6, 10, 5)

    def test_square_zone_splits_rows(self):
        """A square zone resolves the tie with a row split, never columns."""
        first, second = split_zone(Rect(0, 0, 400, 400))
        assert first.w == second.w == 400
        assert first == Rect(0, 0, 400, 200)
        assert second == Rect(0, 201, 400, 199)

    def test_gap_between_halves(self):
        """The halves are exactly one unit apart."""
        first, second = split_zone(ZONE)
        assert second.left - first.right == 1


class TestProperties:
    """Invariants checked over a sweep of zones and counts."""

    @pytest.mark.parametrize("zone", ROOMY_ZONES, ids=str)
    @pytest.mark.parametrize("count", range(0, 13))
    def test_exact_count(self, zone, count):
        """Exactly count tiles come back."""
        assert len(compute_tiles(count, zone)) == count

    @pytest.mark.parametrize("zone", ROOMY_ZONES, ids=str)
    @pytest.mark.parametrize("count", range(2, 13))
    def test_tiles_pairwise_disjoint(self, zone, count):
        """No two tiles share a point, not even a boundary coordinate."""
        tiles = compute_tiles(count, zone)
        for a, b in itertools.combinations(tiles, 2):
            assert _disjoint(a, b), f"{a} overlaps {b}"

    @pytest.mark.parametrize("zone", ROOMY_ZONES, ids=str)
    @pytest.mark.parametrize("count", range(1, 13))
    def test_tiles_stay_inside_zone(self, zone, count):
        """Every tile lies within the zone and is non-empty."""
        for tile in compute_tiles(count, zone):
            assert tile.w > 0 and tile.h > 0
            assert zone.left <= tile.left and tile.right <= zone.right
            assert zone.top <= tile.top and tile.bottom <= zone.bottom

    @pytest.mark.parametrize("count", range(0, 13))
    def test_deterministic(self, count):
        """Same input, same output."""
        assert compute_tiles(count, ZONE) == compute_tiles(count, ZONE)

    def test_float_zone(self):
        """Floating point coordinates are floored at each split."""
        tiles = compute_tiles(2, Rect(0.0, 0.0, 101.0, 50.0))
        assert tiles == [Rect(0.0, 0.0, 50.0, 50.0), Rect(51.0, 0.0, 50.0, 50.0)]


class TestDegenerateZones:
    """
    Current behaviour for zones too small for the window count.

    Nothing is validated: degenerate rectangles are returned as-is.
    """

    @pytest.mark.parametrize("w,h", [(0, 0), (1, 1), (2, 1), (1, 3), (3, 3)])
    @pytest.mark.parametrize("count", range(0, 9))
    def test_count_still_exact(self, w, h, count):
        """The tile count never depends on the zone size."""
        assert len(compute_tiles(count, Rect(0, 0, w, h))) == count

    def test_one_pixel_zone_two_windows(self):
        """A 1x1 zone yields two zero-height tiles."""
        assert compute_tiles(2, Rect(0, 0, 1, 1)) == [
            Rect(0, 0, 1, 0),
            Rect(0, 1, 1, 0),
        ]

    def test_empty_zone_goes_negative(self):
        """A 0x0 zone produces a negative height on the second half."""
        tiles = compute_tiles(2, Rect(0, 0, 0, 0))
        assert tiles == [Rect(0, 0, 0, 0), Rect(0, 1, 0, -1)]
        assert any(t.h < 0 for t in tiles)

    @pytest.mark.parametrize("count", range(2, 9))
    def test_tiny_zone_has_empty_tiles(self, count):
        """With more windows than pixels, some tiles are empty."""
        tiles = compute_tiles(count, Rect(0, 0, 2, 2))
        assert any(t.w <= 0 or t.h <= 0 for t in tiles)
