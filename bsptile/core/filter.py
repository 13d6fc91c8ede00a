"""
bsptile.core.filter - Window inclusion rules for a tiling pass.

A pass only tiles the windows for which every predicate in the chain
returns True.  Predicates are plain callables ``WindowInfo -> bool`` so
new rules can be added without touching the filter itself.

The standard chain is:
    1. Not minimized.
    2. Top-left corner inside the primary work area.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from bsptile.core.window import WindowInfo, WindowState
from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)


# Type for inclusion predicates
WindowPredicate = Callable[[WindowInfo], bool]


# ============================================================================
# Core filter function
# ============================================================================
def filter_windows(
    windows: Iterable[WindowInfo],
    predicates: Sequence[WindowPredicate],
) -> list[WindowInfo]:
    """
    Return the windows that pass ALL *predicates*, in their original order.

    The input is not modified.  An empty predicate chain keeps everything.
    """
    return [w for w in windows if all(p(w) for p in predicates)]


# ============================================================================
# Standard predicates
# ============================================================================
def is_non_minimized(window: WindowInfo) -> bool:
    return window.state is not WindowState.MINIMIZED


def is_within_work_area(window: WindowInfo, work_area: Rect) -> bool:
    """
    True if the window's top-left corner lies inside *work_area*.

    The corner stands in for "this window is on the primary screen"; the
    far corner may extend past the screen edge and is ignored.  Both bounds
    of each axis are inclusive.
    """
    return work_area.contains_point(window.left, window.top)


def has_size(window: WindowInfo) -> bool:
    """False for windows that are zero-sized on both axes (hidden helpers)."""
    return window.width > 0 or window.height > 0


def within_work_area(work_area: Rect) -> WindowPredicate:
    """Bind *work_area* into a single-argument predicate for the chain."""

    def _predicate(window: WindowInfo) -> bool:
        return is_within_work_area(window, work_area)

    return _predicate


def default_predicates(work_area: Rect) -> list[WindowPredicate]:
    """The standard chain used by every tiling pass."""
    return [is_non_minimized, within_work_area(work_area)]


def outside_work_area(
    windows: Iterable[WindowInfo], work_area: Rect,
) -> list[WindowInfo]:
    """Windows whose top-left corner is outside *work_area*."""
    outside = [w for w in windows if not is_within_work_area(w, work_area)]
    for w in outside:
        log.debug("Outside work area %s: %s", work_area, w)
    return outside
