"""
bsptile.core.manager - TilerDaemon: the resident process.

Two loops run side by side:

  1. The Win32 message loop, on the main thread.  It owns the global
     hotkeys (WM_HOTKEY is delivered to the registering thread) and
     dispatches them to HotkeyManager.
  2. An asyncio event loop on a background thread.  This is the single
     cooperative scheduler every tiling sequence runs on: fetching the
     window list, the fire-and-forget resizes and the retry timer.

A tile hotkey press submits WindowTiler.start() to the asyncio loop and
returns immediately, so the message loop never blocks on a tiling pass.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Optional

from bsptile.core import win32
from bsptile.core.keybinds import HotkeyManager
from bsptile.core.tiler import TilingSession, WindowTiler

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TriggerContext:
    """Where a tiling sequence came from.  Informational only."""

    source: str
    detail: str = ""


class TilerDaemon:
    """
    Runs the asyncio scheduler and the Win32 message loop.

    Usage:
        daemon = TilerDaemon(tiler, hk_manager)
        hk_manager.register(..., daemon.trigger_callback("alt+shift+t"))
        daemon.run()   # blocks until stop()
    """

    def __init__(self, tiler: WindowTiler, hotkeys: HotkeyManager) -> None:
        self._tiler = tiler
        self._hotkeys = hotkeys
        self._loop = asyncio.new_event_loop()
        self._loop_thread: Optional[threading.Thread] = None
        self._msg_thread_id: int = 0
        self._running: bool = False

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    # ------------------------------------------------------------------
    # Triggering
    # ------------------------------------------------------------------
    def trigger(self, context: TriggerContext) -> Future[TilingSession]:
        """
        Start one tiling sequence on the asyncio loop.

        Safe to call from any thread.  Overlapping triggers are not
        serialized: a second press while a sequence is in flight starts
        another sequence that interleaves with the first.
        """
        log.info("Tiling triggered by %s %s", context.source, context.detail)
        future = asyncio.run_coroutine_threadsafe(
            self._tiler.start(context), self._loop
        )
        future.add_done_callback(self._sequence_done)
        return future

    def trigger_callback(self, combo: str):
        """Zero-argument callback suitable for HotkeyManager.register()."""

        def _on_hotkey() -> None:
            self.trigger(TriggerContext(source="hotkey", detail=combo))

        return _on_hotkey

    @staticmethod
    def _sequence_done(future: Future[TilingSession]) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.error("Tiling sequence failed", exc_info=exc)
            return
        session = future.result()
        log.debug(
            "Tiling sequence done: %d windows, %d passes",
            len(session.windows),
            len(session.passes),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        """
        Start the asyncio thread and enter the message loop.

        Blocks until stop() is called or SIGINT/SIGTERM is received.
        Hotkeys must already be registered from this same thread.
        """
        self._loop_thread = threading.Thread(
            target=self._loop.run_forever, name="bsptile-asyncio", daemon=True
        )
        self._loop_thread.start()

        def _signal_handler(sig: int, frame: object) -> None:
            log.info("Signal %d received, stopping...", sig)
            self.stop()

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        self._running = True
        self._msg_thread_id = win32.get_current_thread_id()
        log.info("Entering message loop (%d hotkeys)", self._hotkeys.count)

        try:
            while self._running:
                got_msg, msg = win32.get_message()
                if not got_msg:
                    break

                if msg.message == win32.WM_HOTKEY:
                    self._hotkeys.dispatch(msg.wParam)
                    continue

                win32.translate_and_dispatch(msg)
        finally:
            self._cleanup()

    def stop(self) -> None:
        """
        Request the message loop to stop.
        Safe to call from any thread or from within a hotkey callback.
        """
        self._running = False
        if self._msg_thread_id:
            win32.post_thread_message(self._msg_thread_id, win32.WM_QUIT, 0, 0)
        else:
            win32.post_quit_message(0)

    def _cleanup(self) -> None:
        self._hotkeys.unregister_all()

        self._loop.call_soon_threadsafe(self._loop.stop)
        if self._loop_thread is not None:
            self._loop_thread.join(timeout=2.0)
            self._loop_thread = None
        if not self._loop.is_running():
            self._loop.close()

        log.info("bsptile stopped")
