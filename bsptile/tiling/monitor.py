"""
bsptile.tiling.monitor - Area de trabajo del monitor primario.

Usa win32api/win32con de pywin32 para obtener el area de trabajo
(work area) del monitor primario, descontando la taskbar y otras
barras del sistema. Solo el monitor primario participa en el tiling;
get_monitors() existe para diagnostico.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import win32api
import win32con

from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Monitor
# ============================================================================
@dataclass(frozen=True, slots=True)
class Monitor:
    """
    Representa un monitor fisico conectado al sistema.

    Atributos:
        name:       Nombre del dispositivo (ej. r'\\\\.\\DISPLAY1').
        full_rect:  Area total del monitor (resolucion completa).
        work_rect:  Area de trabajo (descontando taskbar y barras).
        is_primary: True si es el monitor principal.
    """

    name: str
    full_rect: Rect
    work_rect: Rect
    is_primary: bool = False


def _monitor_from_handle(hmonitor) -> Monitor:
    # info['Monitor'] / info['Work'] = (left, top, right, bottom)
    info = win32api.GetMonitorInfo(hmonitor)
    return Monitor(
        name=info["Device"],
        full_rect=Rect.from_ltrb(*info["Monitor"]),
        work_rect=Rect.from_ltrb(*info["Work"]),
        is_primary=bool(info["Flags"] & win32con.MONITORINFOF_PRIMARY),
    )


# ============================================================================
# Funciones de deteccion
# ============================================================================

def get_monitors() -> list[Monitor]:
    """
    Enumera todos los monitores conectados al sistema.

    Returns:
        Lista de Monitor ordenada: el primario primero, luego por nombre.
    """
    monitors: list[Monitor] = []

    for hmonitor, _hdc, _rect in win32api.EnumDisplayMonitors(None, None):
        try:
            monitors.append(_monitor_from_handle(hmonitor))
        except Exception:
            log.warning("No se pudo obtener info del monitor %s", hmonitor)

    monitors.sort(key=lambda m: (not m.is_primary, m.name))
    return monitors


def get_primary_monitor() -> Monitor:
    """
    Retorna el monitor primario.

    El primario es, por definicion de Win32, el que contiene el
    origen (0, 0) del escritorio virtual.
    """
    hmonitor = win32api.MonitorFromPoint(
        (0, 0), win32con.MONITOR_DEFAULTTOPRIMARY
    )
    return _monitor_from_handle(hmonitor)


def get_work_area() -> Rect:
    """
    Atajo: retorna el area de trabajo del monitor primario.

    Se lee en cada llamada, sin cache: cada pasada de tiling consulta
    el valor actual.
    """
    monitor = get_primary_monitor()
    log.debug("Area de trabajo %s (%s)", monitor.work_rect, monitor.name)
    return monitor.work_rect
