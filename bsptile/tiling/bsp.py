"""
bsptile.tiling.bsp - Particion binaria recursiva del area de trabajo.

Dado un area (zona) y un numero de ventanas, calcula exactamente esa
cantidad de tiles disjuntos. En cada paso la zona se parte por la mitad
a lo largo de su dimension mas larga y las ventanas se reparten entre
las dos mitades; la segunda mitad recibe la ventana sobrante cuando el
numero es impar.

Esquema (3 ventanas, zona mas ancha que alta):
    +----------+----------+
    |          |    1     |
    |    0     +----------+
    |          |    2     |
    +----------+----------+

Entre las dos mitades de cada corte queda un hueco de 1 pixel, tomado
de la segunda mitad: los tiles nunca salen de la zona ni comparten una
coordenada de borde.
"""

from __future__ import annotations

import logging

from bsptile.tiling.rect import Rect

log = logging.getLogger(__name__)

# Separacion entre las dos mitades de cada corte
SPLIT_GAP = 1


def split_count(count: int) -> tuple[int, int]:
    """
    Reparte *count* ventanas entre las dos mitades de un corte.

    Returns:
        (floor(count / 2), resto). La segunda mitad recibe el ceil.
    """
    half = count // 2
    return half, count - half


def split_zone(zone: Rect) -> tuple[Rect, Rect]:
    """
    Parte *zone* en dos a lo largo de su dimension mas larga.

    Si el ancho es estrictamente mayor que el alto, corta en columnas
    (izquierda / derecha). En cualquier otro caso, incluido el empate,
    corta en filas (arriba / abajo).

    Returns:
        Tupla (primera, segunda) en orden de recorrido.
    """
    if zone.w > zone.h:
        half_w = zone.w // 2
        first = Rect(zone.x, zone.y, half_w, zone.h)
        second = Rect(
            zone.x + half_w + SPLIT_GAP, zone.y, zone.w - half_w - SPLIT_GAP, zone.h
        )
    else:
        half_h = zone.h // 2
        first = Rect(zone.x, zone.y, zone.w, half_h)
        second = Rect(
            zone.x, zone.y + half_h + SPLIT_GAP, zone.w, zone.h - half_h - SPLIT_GAP
        )
    return first, second


def compute_tiles(count: int, zone: Rect) -> list[Rect]:
    """
    Calcula *count* tiles dentro de *zone*.

    Funcion pura y determinista: el mismo (count, zone) produce siempre
    la misma lista. La correspondencia con las ventanas es por indice.

    Args:
        count: Numero de ventanas a colocar (>= 0).
        zone:  Area disponible.

    Returns:
        Lista de Rect con exactamente *count* elementos.
    """
    tiles: list[Rect] = []
    _compute_into(tiles, count, zone)
    return tiles


def _compute_into(tiles: list[Rect], count: int, zone: Rect) -> None:
    log.debug("Calculando tiles: %s para %d ventanas", zone, count)

    if count <= 0:
        return

    # Caso base: la unica ventana ocupa toda la zona restante
    if count == 1:
        tiles.append(zone)
        return

    first_count, second_count = split_count(count)
    first_zone, second_zone = split_zone(zone)
    _compute_into(tiles, first_count, first_zone)
    _compute_into(tiles, second_count, second_zone)
