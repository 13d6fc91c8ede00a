"""
bsptile.tiling - Geometria y calculo de tiles.

Este paquete contiene:
    - rect    : Estructura Rect para geometria de areas
    - bsp     : compute_tiles - particion binaria recursiva del area
    - monitor : Deteccion del area de trabajo del monitor primario (Win32)

monitor depende de pywin32 y no se importa aqui; el resto es puro y
funciona en cualquier plataforma.
"""

from bsptile.tiling.rect import Rect
from bsptile.tiling.bsp import compute_tiles, split_count, split_zone

__all__ = [
    "Rect",
    "compute_tiles",
    "split_count",
    "split_zone",
]
