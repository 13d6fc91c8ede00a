"""
bsptile.config.hotkeys - Definicion de hotkeys del tiler.

    Alt + Shift + T  -> Organizar todas las ventanas del monitor primario
    Alt + Shift + Q  -> Cerrar bsptile

Ambas combinaciones se pueden cambiar en el archivo de configuracion
(ver bsptile.config.settings).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bsptile.config.settings import Settings
from bsptile.core.combo_parser import ComboParseError, parse_combo
from bsptile.core.keybinds import HotkeyManager

log = logging.getLogger(__name__)


def register_all_hotkeys(
    hk_manager: HotkeyManager,
    settings: Settings,
    on_tile: Callable[[], None],
    on_quit: Callable[[], None],
) -> dict[str, int | None]:
    """
    Registra los hotkeys del tiler.

    Args:
        hk_manager: El gestor de hotkeys donde registrar.
        settings:   Configuracion con los combos.
        on_tile:    Callback del hotkey de tiling.
        on_quit:    Callback del hotkey de salida.

    Returns:
        Mapa nombre -> ID del hotkey (None si no se pudo registrar).

    Raises:
        ComboParseError: Si algun combo de la configuracion es invalido.
    """
    bindings = [
        ("tile", settings.tile_hotkey, on_tile, "Tile windows"),
        ("quit", settings.quit_hotkey, on_quit, "Quit bsptile"),
    ]

    registered: dict[str, int | None] = {}
    for name, combo, callback, desc in bindings:
        try:
            modifiers, vk = parse_combo(combo)
        except ComboParseError:
            log.error("Invalid hotkey %r for %s", combo, desc)
            raise
        registered[name] = hk_manager.register(
            modifiers, vk, callback, f"{desc} ({combo})"
        )

    log.info("Hotkeys registered: %d", hk_manager.count)
    return registered
