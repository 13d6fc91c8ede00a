"""
bsptile.core.window - Window snapshot data structures.

A WindowInfo is an immutable, one-time read of a host window: identity,
geometry and state at the moment the window list was fetched.  The
tiling passes work exclusively on these snapshots; nothing here talks
to the OS.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from bsptile.tiling.rect import Rect


# ============================================================================
# WindowState enum
# ============================================================================
class WindowState(enum.Enum):
    """Observable state of a window."""
    NORMAL = "normal"
    MINIMIZED = "minimized"
    MAXIMIZED = "maximized"
    HIDDEN = "hidden"       # Invisible or cloaked


# ============================================================================
# WindowInfo
# ============================================================================
@dataclass(frozen=True, slots=True)
class WindowInfo:
    """
    Snapshot of a single top-level window.

    ``id`` uniquely identifies the window for the lifetime of the process
    (an HWND on Windows).  Geometry is the outer window rectangle in
    desktop pixel coordinates.
    """

    id: int
    left: int
    top: int
    width: int
    height: int
    state: WindowState = WindowState.NORMAL

    @property
    def rect(self) -> Rect:
        return Rect(self.left, self.top, self.width, self.height)

    @property
    def is_minimized(self) -> bool:
        return self.state is WindowState.MINIMIZED

    def __str__(self) -> str:
        return (
            f"[{self.id:#010x}] {self.state.value} | "
            f"{self.width}x{self.height}+{self.left}+{self.top}"
        )
