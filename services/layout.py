"""
Escalas de layout (bandas ordinales y lineales) y geometría de celdas
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from config import BAND_PADDING_INNER, CELL_RADIUS, SPARK_PAD, TICK_SKIP_MEDIUM, TICK_SKIP_WIDE
from utils.helpers import is_nan


@dataclass(frozen=True)
class BandScale:
    """
    Escala ordinal en bandas: cada elemento del dominio ocupa una banda de
    ancho `bandwidth`, separadas por `padding_inner` (fracción del paso).
    Sin padding exterior: la primera banda empieza en range[0].
    """
    domain: Tuple
    range: Tuple[float, float]
    padding_inner: float = BAND_PADDING_INNER

    @property
    def step(self) -> float:
        r0, r1 = self.range
        return (r1 - r0) / max(1.0, len(self.domain) - self.padding_inner)

    @property
    def bandwidth(self) -> float:
        return self.step * (1.0 - self.padding_inner)

    def __call__(self, value) -> float:
        return self.range[0] + self.step * self.domain.index(value)

    def center(self, value) -> float:
        return self(value) + self.bandwidth / 2.0


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value) -> Optional[float]:
        d0, d1 = self.domain
        r0, r1 = self.range
        if is_nan(value) or is_nan(d0) or is_nan(d1):
            return None
        if d1 == d0:
            t = 0.5
        else:
            t = (float(value) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)


def year_tick_step(n_years: int) -> int:
    """Muestra 1 de cada 4 años si hay más de 20, 1 de cada 2 si hay más de 12"""
    if n_years > TICK_SKIP_WIDE:
        return 4
    if n_years > TICK_SKIP_MEDIUM:
        return 2
    return 1


def tick_years(years: Sequence[int]) -> List[int]:
    step = year_tick_step(len(years))
    return [y for i, y in enumerate(years) if i % step == 0]


def rounded_rect_path(x0: float, y0: float, w: float, h: float, r: float = CELL_RADIUS) -> str:
    """Path SVG de un rectángulo con esquinas redondeadas"""
    r = max(0.0, min(r, w / 2.0, h / 2.0))
    x1, y1 = x0 + w, y0 + h
    return (
        f"M {x0 + r:.2f},{y0:.2f} H {x1 - r:.2f} Q {x1:.2f},{y0:.2f} {x1:.2f},{y0 + r:.2f} "
        f"V {y1 - r:.2f} Q {x1:.2f},{y1:.2f} {x1 - r:.2f},{y1:.2f} "
        f"H {x0 + r:.2f} Q {x0:.2f},{y1:.2f} {x0:.2f},{y1 - r:.2f} "
        f"V {y0 + r:.2f} Q {x0:.2f},{y0:.2f} {x0 + r:.2f},{y0:.2f} Z"
    )


def _finite_extent(values: Sequence[float]) -> Tuple[float, float]:
    valid = [v for v in values if not is_nan(v)]
    if not valid:
        return float("nan"), float("nan")
    return min(valid), max(valid)


def sparkline_coords(daily, x0: float, y0: float, w: float, h: float, pad: float = SPARK_PAD):
    """
    Coordenadas (absolutas) de las dos líneas del sparkline de una celda

    X: día del mes escalado al rango de días presente.
    Y: extensión conjunta de máximas y mínimas (más cálido arriba).

    Returns:
        (xs, ys_max, ys_min) con None donde el valor es NaN
    """
    if not daily:
        return [], [], []
    inner_w = w - 2 * pad
    inner_h = h - 2 * pad
    days = [p.day for p in daily]
    sx = LinearScale((min(days), max(days)), (x0 + pad, x0 + pad + inner_w))
    temps = [v for p in daily for v in (p.min, p.max)]
    sy = LinearScale(_finite_extent(temps), (y0 + pad + inner_h, y0 + pad))

    xs = [sx(p.day) for p in daily]
    ys_max = [sy(p.max) for p in daily]
    ys_min = [sy(p.min) for p in daily]
    return xs, ys_max, ys_min
