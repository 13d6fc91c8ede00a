"""Tests for the window filter chain and its standard predicates."""

import pytest

from bsptile.core.filter import (
    default_predicates,
    filter_windows,
    has_size,
    is_non_minimized,
    is_within_work_area,
    outside_work_area,
    within_work_area,
)
from bsptile.core.window import WindowState
from bsptile.tiling.rect import Rect

from conftest import make_window


AREA = Rect(0, 0, 1000, 500)


class TestIsNonMinimized:
    """Tests for the minimized-state predicate."""

    @pytest.mark.parametrize(
        "state", [WindowState.NORMAL, WindowState.MAXIMIZED, WindowState.HIDDEN]
    )
    def test_other_states_pass(self, state):
        """Anything but minimized is kept."""
        assert is_non_minimized(make_window(1, state=state))

    def test_minimized_rejected(self):
        """Minimized windows are dropped."""
        assert not is_non_minimized(make_window(1, state=WindowState.MINIMIZED))


class TestIsWithinWorkArea:
    """Tests for the top-left corner containment predicate."""

    @pytest.mark.parametrize(
        "left,top",
        [(0, 0), (1000, 500), (0, 500), (1000, 0), (500, 250)],
    )
    def test_inclusive_bounds(self, left, top):
        """Corners exactly on either bound count as inside."""
        assert is_within_work_area(make_window(1, left=left, top=top), AREA)

    @pytest.mark.parametrize(
        "left,top",
        [(-1, 0), (0, -1), (1001, 0), (0, 501), (1920, 100)],
    )
    def test_outside(self, left, top):
        """One unit past any bound is outside."""
        assert not is_within_work_area(make_window(1, left=left, top=top), AREA)

    def test_far_corner_ignored(self):
        """A window hanging off the right/bottom edge is still inside."""
        window = make_window(1, left=900, top=400, width=5000, height=5000)
        assert is_within_work_area(window, AREA)

    def test_offset_work_area(self):
        """Bounds follow the work area origin."""
        area = Rect(-1920, 40, 1920, 1040)
        assert is_within_work_area(make_window(1, left=-1920, top=40), area)
        assert is_within_work_area(make_window(1, left=0, top=1080), area)
        assert not is_within_work_area(make_window(1, left=0, top=39), area)

    def test_bound_predicate(self):
        """within_work_area() binds the area into a one-argument predicate."""
        predicate = within_work_area(AREA)
        assert predicate(make_window(1, left=10, top=10))
        assert not predicate(make_window(2, left=-10, top=10))


class TestHasSize:
    """Tests for the zero-size rule applied when listing host windows."""

    def test_zero_by_zero_rejected(self):
        """A 0x0 helper window at the origin would otherwise get a tile."""
        window = make_window(1, left=0, top=0, width=0, height=0)
        assert not has_size(window)
        assert is_within_work_area(window, AREA)

    @pytest.mark.parametrize("width,height", [(300, 200), (0, 200), (300, 0)])
    def test_sized_on_either_axis_kept(self, width, height):
        """Only windows empty on both axes are dropped."""
        assert has_size(make_window(1, width=width, height=height))

    def test_negative_extent_rejected(self):
        """Inverted rectangles count as empty."""
        assert not has_size(make_window(1, width=-5, height=-1))

    def test_listing_chain_drops_zero_size(self):
        """Filtering a listing keeps only the sized windows, in order."""
        windows = [
            make_window(1),
            make_window(2, width=0, height=0),
            make_window(3),
        ]
        assert [w.id for w in filter_windows(windows, [has_size])] == [1, 3]


class TestFilterWindows:
    """Tests for the filter chain itself."""

    def test_preserves_order(self):
        """Survivors keep their relative order."""
        windows = [make_window(i) for i in (5, 3, 9, 1)]
        result = filter_windows(windows, [lambda w: w.id != 3])
        assert [w.id for w in result] == [5, 9, 1]

    def test_all_predicates_must_pass(self):
        """A window failing any predicate is excluded."""
        windows = [
            make_window(1),
            make_window(2, state=WindowState.MINIMIZED),
            make_window(3, left=-500),
            make_window(4, left=-500, state=WindowState.MINIMIZED),
            make_window(5, left=999, top=499),
        ]
        result = filter_windows(windows, default_predicates(AREA))
        assert [w.id for w in result] == [1, 5]

    def test_empty_chain_keeps_everything(self):
        """No predicates means no filtering."""
        windows = [make_window(1), make_window(2, state=WindowState.MINIMIZED)]
        assert filter_windows(windows, []) == windows

    def test_input_not_mutated(self):
        """The snapshot list is left untouched."""
        windows = [make_window(1), make_window(2, state=WindowState.MINIMIZED)]
        before = list(windows)
        filter_windows(windows, [is_non_minimized])
        assert windows == before

    def test_empty_input(self):
        """No windows in, no windows out."""
        assert filter_windows([], default_predicates(AREA)) == []

    def test_predicates_called_in_order(self):
        """Predicates run in chain order; evaluation stops at the first failure."""
        calls = []

        def first(w):
            calls.append(("first", w.id))
            return w.id != 1

        def second(w):
            calls.append(("second", w.id))
            return True

        filter_windows([make_window(1), make_window(2)], [first, second])
        assert calls == [("first", 1), ("first", 2), ("second", 2)]


class TestOutsideWorkArea:
    """Tests for the off-screen window report."""

    def test_counts_minimized_too(self):
        """Minimized windows off the primary screen are still reported."""
        windows = [
            make_window(1),
            make_window(2, left=2000, state=WindowState.MINIMIZED),
            make_window(3, left=2000),
        ]
        assert [w.id for w in outside_work_area(windows, AREA)] == [2, 3]
