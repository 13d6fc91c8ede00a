"""
bsptile.config.settings - Configuracion del tiler.

Los valores por defecto viven aqui. Un archivo YAML opcional
(~/.bsptile/config.yaml) puede sobrescribir cualquiera de ellos:

    retry_delay: 0.5
    warn_offscreen: false
    log_level: DEBUG
    hotkeys:
      tile: ctrl+alt+t
      quit: ctrl+alt+q

El archivo solo se lee; si no existe se usan los valores por defecto.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".bsptile" / "config.yaml"

DEFAULTS: dict[str, Any] = {
    "retry_delay": 0.3,
    "warn_offscreen": True,
    "log_level": "INFO",
    "hotkeys": {
        "tile": "alt+shift+t",
        "quit": "alt+shift+q",
    },
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when the configuration file holds an invalid value."""


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Configuracion efectiva del proceso.

    Atributos:
        retry_delay:    Segundos entre la primera pasada y el reintento.
        warn_offscreen: Avisar (una vez por disparo) de ventanas fuera
                        del monitor primario.
        log_level:      Nivel del logger raiz.
        tile_hotkey:    Combo que dispara el tiling.
        quit_hotkey:    Combo que cierra el proceso.
    """

    retry_delay: float = DEFAULTS["retry_delay"]
    warn_offscreen: bool = DEFAULTS["warn_offscreen"]
    log_level: str = DEFAULTS["log_level"]
    tile_hotkey: str = DEFAULTS["hotkeys"]["tile"]
    quit_hotkey: str = DEFAULTS["hotkeys"]["quit"]


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Carga la configuracion desde *path* (o la ruta por defecto).

    Raises:
        SettingsError: Si el archivo no es YAML valido o algun valor
                       tiene un tipo o rango incorrecto.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    user_config: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {config_path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise SettingsError(f"{config_path} must contain a mapping")
        user_config = loaded or {}
        log.info("Configuracion cargada desde %s", config_path)
    else:
        log.debug("Sin archivo de configuracion en %s", config_path)

    merged = _merge_config(DEFAULTS, user_config)
    return _build_settings(merged)


def _merge_config(
    defaults: dict[str, Any], user_config: dict[str, Any]
) -> dict[str, Any]:
    """Recursively merge user config with defaults."""
    result = defaults.copy()

    for key, value in user_config.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value

    return result


def _build_settings(config: dict[str, Any]) -> Settings:
    delay = config["retry_delay"]
    # bool es subclase de int: no aceptarlo como numero
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise SettingsError(f"retry_delay must be a non-negative number, got {delay!r}")

    warn = config["warn_offscreen"]
    if not isinstance(warn, bool):
        raise SettingsError(f"warn_offscreen must be true or false, got {warn!r}")

    level = str(config["log_level"]).upper()
    if level not in _LOG_LEVELS:
        raise SettingsError(f"log_level must be one of {_LOG_LEVELS}, got {level!r}")

    hotkeys = config["hotkeys"]
    if not isinstance(hotkeys, dict):
        raise SettingsError("hotkeys must be a mapping")
    for name in ("tile", "quit"):
        if not isinstance(hotkeys.get(name), str):
            raise SettingsError(f"hotkeys.{name} must be a string")

    return Settings(
        retry_delay=float(delay),
        warn_offscreen=warn,
        log_level=level,
        tile_hotkey=hotkeys["tile"],
        quit_hotkey=hotkeys["quit"],
    )
