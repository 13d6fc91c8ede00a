"""
bsptile.core.applier - Pair windows with tiles and issue the resizes.

Each resize is scheduled as its own asyncio task and never awaited here:
the caller continues (and may arm the retry timer) while the host is
still applying geometry.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from bsptile.core.window import WindowInfo, WindowState
from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)


# resize(window_id, geometry, state) -> awaitable completion
ResizeFn = Callable[[int, Rect, WindowState], Awaitable[None]]

# Called once per resize when its task is done
FinishedCallback = Callable[[WindowInfo, "asyncio.Task[None]"], None]


def resize_finished(window: WindowInfo, task: asyncio.Task[None]) -> None:
    """
    Default completion callback.

    Resize results are not acted upon; a failure is only logged so the
    event loop does not complain about an unretrieved exception.
    """
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.debug("Resize of %s failed: %r", window, exc)


def apply_tiles(
    windows: Sequence[WindowInfo],
    tiles: Sequence[Rect],
    resize: ResizeFn,
    on_finished: FinishedCallback | None = None,
) -> list[asyncio.Task[None]]:
    """
    Issue ``resize(windows[i].id, tiles[i], NORMAL)`` for every index.

    Forcing the NORMAL state un-minimizes / un-maximizes the window so the
    new geometry actually shows.  Must be called from a running event loop.

    Args:
        windows:     Filtered windows, in tiling order.
        tiles:       Computed tiles, same length as *windows*.
        resize:      Host update function.
        on_finished: Extra completion callback per resize, called after
                     resize_finished (which always runs and retrieves
                     any exception).

    Returns:
        The scheduled (not awaited) resize tasks, in window order.

    Raises:
        ValueError: If *windows* and *tiles* differ in length.
    """
    if len(windows) != len(tiles):
        raise ValueError(
            f"{len(tiles)} tiles computed for {len(windows)} windows"
        )

    def _finished(window: WindowInfo, task: asyncio.Task[None]) -> None:
        resize_finished(window, task)
        if on_finished is not None:
            on_finished(window, task)

    tasks: list[asyncio.Task[None]] = []

    for window, tile in zip(windows, tiles):
        log.debug("Repositioning window %#010x to %s", window.id, tile)
        task = asyncio.ensure_future(resize(window.id, tile, WindowState.NORMAL))
        task.add_done_callback(lambda t, w=window: _finished(w, t))
        tasks.append(task)

    return tasks
