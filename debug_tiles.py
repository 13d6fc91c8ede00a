"""
Diagnostic script: list the windows bsptile would see right now, show
why each one is kept or rejected by the tiling filter, and the tile each
kept window would be moved to.  Nothing is moved.

Run with:  python debug_tiles.py
"""

import asyncio

from bsptile.core.desktop import Win32Screen, Win32WindowService
from bsptile.core.filter import default_predicates, filter_windows, is_non_minimized, is_within_work_area
from bsptile.tiling.bsp import compute_tiles
from bsptile.tiling.monitor import get_monitors


def main():
    monitors = get_monitors()
    work_area = Win32Screen().work_area()
    windows = asyncio.run(Win32WindowService().list_windows(populate=False))

    print(f"\n  Monitors: {len(monitors)}")
    for m in monitors:
        marker = "*" if m.is_primary else " "
        print(f"   {marker} {m.name:<16s} full={m.full_rect}  work={m.work_rect}")
    print(f"  Work area: {work_area}")
    print(f"  Listed windows: {len(windows)}\n")

    kept = filter_windows(windows, default_predicates(work_area))
    tiles = dict(zip((w.id for w in kept), compute_tiles(len(kept), work_area)))

    print(f"  {'HWND':<12s} {'State':<10s} {'Geometry':<26s} Result")
    print("  " + "-" * 76)
    for w in windows:
        if w.id in tiles:
            result = f"TILE -> {tiles[w.id]}"
        elif not is_non_minimized(w):
            result = "skip (minimized)"
        elif not is_within_work_area(w, work_area):
            result = "skip (outside primary work area)"
        else:
            result = "skip"
        geometry = f"{w.width}x{w.height}+{w.left}+{w.top}"
        print(f"  {w.id:#010x}   {w.state.value:<10s} {geometry:<26s} {result}")

    print(f"\n  {len(kept)} of {len(windows)} windows would be tiled.")


if __name__ == "__main__":
    main()
