"""
bsptile - Entry point.

Run with:  python -m bsptile
"""

import logging
import sys

from bsptile.config.hotkeys import register_all_hotkeys
from bsptile.config.settings import SettingsError, load_settings
from bsptile.core.combo_parser import ComboParseError
from bsptile.core.desktop import MessageBoxNotifier, Win32Screen, Win32WindowService
from bsptile.core.keybinds import HotkeyManager
from bsptile.core.manager import TilerDaemon
from bsptile.core.tiler import WindowTiler

log = logging.getLogger("bsptile")


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    # Per-step tile computation is very chatty
    if level != "DEBUG":
        logging.getLogger("bsptile.tiling.bsp").setLevel(logging.INFO)


def main() -> int:
    try:
        settings = load_settings()
    except SettingsError as e:
        setup_logging()
        log.error("Configuration error: %s", e)
        return 1

    setup_logging(settings.log_level)

    tiler = WindowTiler(
        Win32WindowService(),
        Win32Screen(),
        MessageBoxNotifier(),
        retry_delay=settings.retry_delay,
        warn_offscreen=settings.warn_offscreen,
    )
    hk_manager = HotkeyManager()
    daemon = TilerDaemon(tiler, hk_manager)

    try:
        registered = register_all_hotkeys(
            hk_manager,
            settings,
            on_tile=daemon.trigger_callback(settings.tile_hotkey),
            on_quit=daemon.stop,
        )
    except ComboParseError as e:
        log.error("Configuration error: %s", e)
        return 1

    if registered.get("tile") is None:
        log.error("Could not register %s, is another program using it?",
                  settings.tile_hotkey)
        hk_manager.unregister_all()
        return 1

    print("=" * 60)
    print("  bsptile running. Press Ctrl+C to stop.")
    print(f"  {settings.tile_hotkey:<20s} Tile windows on the main screen")
    print(f"  {settings.quit_hotkey:<20s} Quit")
    print("=" * 60)

    daemon.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
