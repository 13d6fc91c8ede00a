"""
bsptile.core.keybinds - Hotkeys globales.

Registra combinaciones de teclas via la Win32 API RegisterHotKey. Los
hotkeys llegan como WM_HOTKEY al message loop del hilo que los registro
(ver bsptile.core.manager) y se despachan aqui a su callback.

Uso tipico:
    hk = HotkeyManager()
    hk.register(MOD_ALT | MOD_SHIFT, vk_t, tile_callback, "Tile windows")
    # ... el message loop llama hk.dispatch(wparam) ...
    hk.unregister_all()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from bsptile.core import win32

log = logging.getLogger(__name__)


# Re-export modifier constants for convenience
MOD_ALT = win32.MOD_ALT
MOD_CONTROL = win32.MOD_CONTROL
MOD_SHIFT = win32.MOD_SHIFT
MOD_WIN = win32.MOD_WIN
MOD_NOREPEAT = win32.MOD_NOREPEAT


# Type for hotkey callbacks: called with no arguments
HotkeyCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Hotkey:
    """A registered hotkey binding."""

    id: int
    modifiers: int
    vk: int
    callback: HotkeyCallback
    description: str


class HotkeyManager:
    """
    Gestiona los hotkeys globales del proceso.

    Cada hotkey recibe un ID unico al registrarse. Con MOD_NOREPEAT
    mantener pulsada la combinacion no dispara el callback en rafaga.
    """

    def __init__(self) -> None:
        # hotkey_id -> Hotkey
        self._hotkeys: dict[int, Hotkey] = {}
        self._next_id: int = 1

    @property
    def count(self) -> int:
        return len(self._hotkeys)

    def register(
        self,
        modifiers: int,
        vk: int,
        callback: HotkeyCallback,
        description: str = "",
    ) -> int | None:
        """
        Register a global hotkey.

        Args:
            modifiers:   Combination of MOD_ALT, MOD_CONTROL, MOD_SHIFT, MOD_WIN.
            vk:          Virtual key code.
            callback:    Function to call when the hotkey is pressed.
            description: Human-readable description for logging.

        Returns:
            The hotkey ID if registered successfully, None on failure
            (typically the combo is already taken by another program).
        """
        hotkey_id = self._next_id

        if not win32.register_hotkey(hotkey_id, modifiers | MOD_NOREPEAT, vk):
            log.error(
                "Failed to register hotkey: %s+0x%02X (%s)",
                self._modifiers_to_str(modifiers),
                vk,
                description,
            )
            return None

        self._hotkeys[hotkey_id] = Hotkey(
            id=hotkey_id,
            modifiers=modifiers,
            vk=vk,
            callback=callback,
            description=description,
        )
        self._next_id += 1

        log.info(
            "Hotkey registered: id=%d %s+0x%02X  %s",
            hotkey_id,
            self._modifiers_to_str(modifiers),
            vk,
            description,
        )
        return hotkey_id

    def unregister_all(self) -> None:
        """Unregister all hotkeys. Call this on shutdown."""
        for hotkey_id in list(self._hotkeys):
            win32.unregister_hotkey(hotkey_id)
        log.info("All hotkeys unregistered (%d total)", len(self._hotkeys))
        self._hotkeys.clear()

    def dispatch(self, hotkey_id: int) -> bool:
        """
        Run the callback bound to *hotkey_id* (the wParam of WM_HOTKEY).

        Returns:
            True if a callback was found and executed.
        """
        hotkey = self._hotkeys.get(hotkey_id)
        if hotkey is None:
            log.warning("Unknown hotkey id: %d", hotkey_id)
            return False

        log.debug("Hotkey dispatched: %s", hotkey.description)
        try:
            hotkey.callback()
        except Exception:
            log.exception("Error in hotkey callback: %s", hotkey.description)

        return True

    @staticmethod
    def _modifiers_to_str(modifiers: int) -> str:
        parts: list[str] = []
        if modifiers & MOD_WIN:
            parts.append("Win")
        if modifiers & MOD_CONTROL:
            parts.append("Ctrl")
        if modifiers & MOD_ALT:
            parts.append("Alt")
        if modifiers & MOD_SHIFT:
            parts.append("Shift")
        return "+".join(parts) if parts else "None"
