"""
bsptile.core.host - Interfaces to the host windowing environment.

The tiler never talks to the OS directly.  It consumes three narrow
collaborators, declared here as protocols so the Win32 implementations
(bsptile.core.desktop) and in-memory test doubles are interchangeable.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol

from bsptile.core.window import WindowInfo, WindowState
from bsptile.tiling.rect import Rect


class WindowService(Protocol):
    """Window list query and geometry update service."""

    def list_windows(self, populate: bool = False) -> Awaitable[list[WindowInfo]]:
        """
        Fetch every top-level window, in host order.

        *populate* asks for window contents (tabs, children); the tiler
        always passes False.
        """
        ...

    def update_window(
        self, window_id: int, geometry: Rect, state: WindowState,
    ) -> Awaitable[None]:
        """Move/resize one window and put it in *state*."""
        ...


class ScreenProvider(Protocol):
    """Source of the primary display's usable work area."""

    def work_area(self) -> Rect:
        ...


class Notifier(Protocol):
    """Blocking user-facing notification."""

    def alert(self, message: str) -> None:
        ...
