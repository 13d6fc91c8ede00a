"""
bsptile.core - Window selection and tiling orchestration.

This package contains:
    - window       : WindowInfo snapshot and WindowState
    - filter       : Inclusion predicates and the filter chain
    - applier      : Pairs windows with tiles and issues the resizes
    - tiler        : WindowTiler - the fetch / tile / retry sequence
    - host         : Protocols for the host window service, screen, notifier
    - desktop      : Win32 implementations of the host protocols
    - win32        : Low-level Win32 API bindings via ctypes
    - keybinds     : Global hotkey registration and dispatch
    - combo_parser : "alt+shift+t" -> (modifiers, vk)
    - manager      : TilerDaemon - message loop + asyncio scheduler

Only the platform-independent modules are re-exported here; the Win32
ones are imported explicitly by the entry point.
"""

from bsptile.core.window import WindowInfo, WindowState
from bsptile.core.filter import filter_windows, is_non_minimized, is_within_work_area
from bsptile.core.tiler import TilerState, TilePass, TilingSession, WindowTiler

__all__ = [
    "WindowInfo", "WindowState",
    "filter_windows", "is_non_minimized", "is_within_work_area",
    "TilerState", "TilePass", "TilingSession", "WindowTiler",
]
