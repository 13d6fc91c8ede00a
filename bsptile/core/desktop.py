"""
bsptile.core.desktop - Win32 implementations of the host interfaces.

    - Win32WindowService : window list + SetWindowPos-based updates
    - Win32Screen        : primary monitor work area
    - MessageBoxNotifier : blocking MessageBoxW

The manageability rules below decide what counts as "an application
window" when listing: the taskbar, desktop, tray, tool windows and other
system artifacts are never part of the snapshot.  Whether a listed window
is actually tiled is decided later by bsptile.core.filter.
"""

from __future__ import annotations

import logging

from bsptile.core import win32
from bsptile.core.filter import has_size
from bsptile.core.window import WindowInfo, WindowState
from bsptile.tiling.monitor import get_work_area
from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)

APP_TITLE = "bsptile"

# ============================================================================
# Known system class names to ALWAYS ignore
# ============================================================================
IGNORED_CLASSES: frozenset[str] = frozenset({
    "Shell_TrayWnd",            # Taskbar
    "Shell_SecondaryTrayWnd",   # Secondary monitor taskbar
    "Progman",                  # Desktop Program Manager
    "WorkerW",                  # Desktop wallpaper worker
    "DV2ControlHost",           # Start menu
    "Windows.UI.Core.CoreWindow",
    "NotifyIconOverflowWindow",
    "TopLevelWindowForOverflowXamlIsland",
    "MultitaskingViewFrame",    # Alt-Tab / Task View
    "ForegroundStaging",
    "tooltips_class32",
    "#32768",                   # Popup menus
    "#32769",                   # Desktop
})

# Process names that are always excluded
IGNORED_PROCESSES: frozenset[str] = frozenset({
    "SearchHost.exe",
    "ShellExperienceHost.exe",
    "StartMenuExperienceHost.exe",
    "TextInputHost.exe",
    "LockApp.exe",
})

IGNORED_TITLES: frozenset[str] = frozenset({
    "",
    "Program Manager",
})


# ============================================================================
# Manageability
# ============================================================================
def is_manageable(hwnd: int) -> bool:
    """
    Return True if *hwnd* is a regular, user-facing application window.

    The rules, in order:
        1. Must be visible and not cloaked.
        2. Must not be a child window.
        3. Class, process and title must not be in the ignore lists.
        4. Must not be a tool window unless also marked WS_EX_APPWINDOW.
        5. Must not have WS_EX_NOACTIVATE.
        6. Must not be the shell or desktop window.
        7. Must have a non-zero size (checked on the snapshot, see
           enumerate_manageable_windows).

    Minimized windows ARE manageable here; excluding them is the tiler's
    decision.
    """
    if not win32.is_window_visible(hwnd) or win32.is_window_cloaked(hwnd):
        return False

    if win32.get_window_style(hwnd) & win32.WS_CHILD:
        return False

    cls = win32.get_class_name(hwnd)
    if cls in IGNORED_CLASSES:
        log.debug("Filtered %#010x: ignored class %r", hwnd, cls)
        return False

    proc = win32.get_process_name(win32.get_window_pid(hwnd))
    if proc in IGNORED_PROCESSES:
        log.debug("Filtered %#010x: ignored process %r", hwnd, proc)
        return False

    if win32.get_window_text(hwnd) in IGNORED_TITLES:
        return False

    ex_style = win32.get_window_ex_style(hwnd)
    if ex_style & win32.WS_EX_TOOLWINDOW and not ex_style & win32.WS_EX_APPWINDOW:
        log.debug("Filtered %#010x: tool window without APPWINDOW", hwnd)
        return False
    if ex_style & win32.WS_EX_NOACTIVATE:
        log.debug("Filtered %#010x: WS_EX_NOACTIVATE", hwnd)
        return False

    return hwnd not in (win32.get_shell_window(), win32.get_desktop_window())


def window_state(hwnd: int) -> WindowState:
    if not win32.is_window_visible(hwnd) or win32.is_window_cloaked(hwnd):
        return WindowState.HIDDEN
    if win32.is_window_iconic(hwnd):
        return WindowState.MINIMIZED
    if win32.is_window_zoomed(hwnd):
        return WindowState.MAXIMIZED
    return WindowState.NORMAL


def snapshot(hwnd: int) -> WindowInfo:
    """One-time read of a window's geometry and state."""
    rect = Rect.from_ltrb(*win32.get_window_rect(hwnd))
    return WindowInfo(
        id=hwnd,
        left=rect.x,
        top=rect.y,
        width=rect.w,
        height=rect.h,
        state=window_state(hwnd),
    )


def enumerate_manageable_windows() -> list[WindowInfo]:
    """
    Snapshot every manageable top-level window, in z-order.

    Windows with a zero-size rectangle on both axes are dropped after the
    snapshot; they would otherwise take a tile and leave a hole in the grid.
    """
    results: list[WindowInfo] = []

    def _callback(hwnd: int, _: int) -> bool:
        try:
            if is_manageable(hwnd):
                info = snapshot(hwnd)
                if has_size(info):
                    results.append(info)
                else:
                    log.debug("Filtered %#010x: zero size", hwnd)
        except Exception:
            log.exception("Error inspecting window %#010x", hwnd)
        return True  # continue enumeration

    win32.enum_windows(_callback)
    return results


# ============================================================================
# Host interface implementations
# ============================================================================
class Win32WindowService:
    """WindowService backed by EnumWindows / ShowWindow / SetWindowPos."""

    async def list_windows(self, populate: bool = False) -> list[WindowInfo]:
        # Win32 top-level windows have no "contents" to populate
        windows = enumerate_manageable_windows()
        log.debug("Listed %d manageable windows", len(windows))
        return windows

    async def update_window(
        self, window_id: int, geometry: Rect, state: WindowState,
    ) -> None:
        if not win32.is_window_valid(window_id):
            log.warning("Window %#010x no longer exists", window_id)
            return

        # Restore if minimized/maximized so the move is visible
        if state is WindowState.NORMAL and (
            win32.is_window_iconic(window_id) or win32.is_window_zoomed(window_id)
        ):
            win32.show_window(window_id, win32.SW_RESTORE)

        if not win32.set_window_pos(
            window_id, geometry.x, geometry.y, geometry.w, geometry.h
        ):
            log.debug("SetWindowPos failed for %#010x -> %s", window_id, geometry)


class Win32Screen:
    """ScreenProvider reading the primary monitor work area on every call."""

    def work_area(self) -> Rect:
        return get_work_area()


class MessageBoxNotifier:
    """Notifier showing a blocking, topmost warning box."""

    def __init__(self, title: str = APP_TITLE) -> None:
        self._title = title

    def alert(self, message: str) -> None:
        log.info("Notifying user: %s", message)
        win32.message_box(
            message,
            self._title,
            win32.MB_OK | win32.MB_ICONWARNING | win32.MB_SETFOREGROUND | win32.MB_TOPMOST,
        )
