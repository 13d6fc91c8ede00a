"""
bsptile.tiling.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa un area de pantalla.
Se usa para describir el area de trabajo del monitor primario, la
zona que queda por subdividir y la geometria destino (tile) de cada
ventana.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles. El origen (0, 0) es la esquina
    superior-izquierda del monitor primario.

    No se valida que w/h sean positivos: una zona demasiado pequena para
    el numero de ventanas produce rectangulos degenerados y se propagan
    tal cual.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles.
        h: Alto en pixeles.
    """

    x: int
    y: int
    w: int
    h: int

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    # ------------------------------------------------------------------
    # Consultas geometricas
    # ------------------------------------------------------------------
    def contains_point(self, px: int, py: int) -> bool:
        """
        True si el punto (px, py) cae dentro del rectangulo.

        Inclusivo en ambos extremos de cada eje: un punto exactamente
        sobre el borde derecho o inferior tambien cuenta como dentro.
        """
        return (
            self.left <= px <= self.right
            and self.top <= py <= self.bottom
        )

    # ------------------------------------------------------------------
    # Conversion a tupla Win32 (left, top, right, bottom)
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[int, int, int, int]:
        """Retorna (left, top, right, bottom) para compatibilidad Win32."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"
