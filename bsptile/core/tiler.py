"""
bsptile.core.tiler - WindowTiler: one trigger, two tiling passes.

The sequence for a single trigger is:

  1. IDLE -> FETCHING: ask the host for the window list (contents not
     populated) and cache it as the session snapshot.
  2. FETCHING -> TILING (first pass): filter, compute tiles, issue one
     resize per window.  Windows outside the primary work area are
     reported to the user once, here.
  3. TILING -> SCHEDULED: arm a fixed-delay timer right after the resizes
     are issued, without waiting for any of them to complete.
  4. SCHEDULED -> TILING (retry pass): same snapshot, no re-fetch, no
     notification.  Some hosts do not honour the first geometry change.
  5. TILING -> IDLE.

Every trigger gets its own TilingSession; nothing is shared between
sessions, and overlapping triggers are allowed to interleave.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass, field
from typing import Any

from bsptile.core.applier import FinishedCallback, apply_tiles
from bsptile.core.filter import default_predicates, filter_windows, outside_work_area
from bsptile.core.host import Notifier, ScreenProvider, WindowService
from bsptile.core.window import WindowInfo
from bsptile.tiling.bsp import compute_tiles
from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)

# Delay before the retry pass, in seconds
RETRY_DELAY = 0.3

OFFSCREEN_MESSAGE = (
    "{count} windows are outside of your main screen, and multiple "
    "monitors are not supported. Only windows on the main screen will "
    "be tiled."
)


# ============================================================================
# Session state
# ============================================================================
class TilerState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    TILING = "tiling"
    SCHEDULED = "scheduled"


@dataclass(slots=True)
class TilePass:
    """What one filter -> compute -> apply cycle did."""

    first_pass: bool
    work_area: Rect
    windows: list[WindowInfo]
    tiles: list[Rect]
    outside_count: int
    notified: bool


@dataclass(slots=True)
class TilingSession:
    """
    State of one trigger, owned by the WindowTiler that created it.

    The snapshot is written once, after the fetch, and only read by the
    two passes.
    """

    context: Any = None
    state: TilerState = TilerState.IDLE
    windows: tuple[WindowInfo, ...] = ()
    passes: list[TilePass] = field(default_factory=list)
    pending: set[asyncio.Task[None]] = field(default_factory=set)

    def track(self, tasks: list[asyncio.Task[None]]) -> None:
        """Keep references to in-flight resizes until they finish."""
        for task in tasks:
            self.pending.add(task)
            task.add_done_callback(self.pending.discard)


# ============================================================================
# WindowTiler
# ============================================================================
class WindowTiler:
    """
    Arranges all windows of the primary work area into a grid.

    Usage:
        tiler = WindowTiler(service, screen, notifier)
        session = await tiler.start()
    """

    def __init__(
        self,
        service: WindowService,
        screen: ScreenProvider,
        notifier: Notifier,
        retry_delay: float = RETRY_DELAY,
        warn_offscreen: bool = True,
        on_finished: FinishedCallback | None = None,
    ) -> None:
        self._service = service
        self._screen = screen
        self._notifier = notifier
        self._retry_delay = retry_delay
        self._warn_offscreen = warn_offscreen
        self._on_finished = on_finished

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    # ------------------------------------------------------------------
    # Full sequence
    # ------------------------------------------------------------------
    async def start(self, context: Any = None) -> TilingSession:
        """
        Run the whole fetch -> tile -> wait -> tile sequence once.

        Args:
            context: Whatever triggered the sequence (hotkey, tray click...).
                     Carried on the session, not otherwise used.

        Returns:
            The finished session.  Retry-pass resizes may still be in
            flight (see ``session.pending``).
        """
        session = TilingSession(context=context)

        session.state = TilerState.FETCHING
        windows = await self._service.list_windows(populate=False)
        session.windows = tuple(windows)
        log.info("Fetched %d windows", len(session.windows))

        self.tile_windows(session, first_pass=True)

        session.state = TilerState.SCHEDULED
        await asyncio.sleep(self._retry_delay)

        self.tile_windows(session, first_pass=False)

        session.state = TilerState.IDLE
        return session

    # ------------------------------------------------------------------
    # One pass
    # ------------------------------------------------------------------
    def tile_windows(self, session: TilingSession, first_pass: bool) -> TilePass:
        """
        Filter the cached snapshot, compute tiles and issue the resizes.

        Must be called from a running event loop: resizes are scheduled
        as tasks on it.
        """
        session.state = TilerState.TILING
        work_area = self._screen.work_area()

        outside = outside_work_area(session.windows, work_area)
        notified = False
        if outside:
            log.warning(
                "%d windows outside the primary work area %s",
                len(outside),
                work_area,
            )
            if first_pass and self._warn_offscreen:
                self._notifier.alert(OFFSCREEN_MESSAGE.format(count=len(outside)))
                notified = True

        filtered = filter_windows(session.windows, default_predicates(work_area))
        tiles = compute_tiles(len(filtered), work_area)
        tasks = apply_tiles(
            filtered, tiles, self._service.update_window, self._on_finished
        )
        session.track(tasks)

        tile_pass = TilePass(
            first_pass=first_pass,
            work_area=work_area,
            windows=filtered,
            tiles=tiles,
            outside_count=len(outside),
            notified=notified,
        )
        session.passes.append(tile_pass)

        log.info(
            "%s pass: %d/%d windows tiled in %s",
            "First" if first_pass else "Retry",
            len(filtered),
            len(session.windows),
            work_area,
        )
        return tile_pass
