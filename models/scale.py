"""
Escala de color global (valor → color)

El dominio se fija una vez con todo el dataset; el mismo objeto se reutiliza
al cambiar de modo o de rango, solo cambia el valor que se le pasa.
"""
from typing import List, Optional, Sequence, Tuple

import plotly.colors as pc

from config import COLORSCALE_NAME, LEGEND_STOPS
from utils.helpers import is_nan


def _reversed_palette(name: str) -> List[str]:
    palette = getattr(pc.diverging, name)
    return list(reversed(palette))


class ColorScale:
    """
    Escala secuencial sobre una paleta divergente invertida
    (temperaturas bajas en azul, altas en rojo).
    """

    def __init__(self, domain: Tuple[float, float], palette: Optional[Sequence[str]] = None):
        lo, hi = float(domain[0]), float(domain[1])
        self.domain = (lo, hi)
        self._colorscale = pc.make_colorscale(list(palette or _reversed_palette(COLORSCALE_NAME)))

    def normalize(self, value: float) -> float:
        """Posición 0..1 dentro del dominio (recortada a los extremos)"""
        lo, hi = self.domain
        if hi == lo:
            return 0.5
        t = (float(value) - lo) / (hi - lo)
        return min(1.0, max(0.0, t))

    def color_of(self, value) -> Optional[str]:
        """Color 'rgb(r, g, b)' para un valor; None si el valor es NaN/None"""
        if is_nan(value):
            return None
        return pc.sample_colorscale(self._colorscale, [self.normalize(value)])[0]

    def colorscale(self) -> list:
        """Escala [[pos, color], ...] en formato Plotly"""
        return [list(stop) for stop in self._colorscale]

    def legend_stops(self, n: int = LEGEND_STOPS) -> list:
        """
        Paradas del gradiente de la leyenda, re-muestreadas desde la escala:
        [[offset, color], ...] con offsets 0, 1/(n-1), ..., 1
        """
        n = max(2, int(n))
        lo, hi = self.domain
        stops = []
        for i in range(n):
            t = i / (n - 1)
            stops.append([t, self.color_of(lo + t * (hi - lo))])
        return stops
