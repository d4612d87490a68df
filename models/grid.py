"""
Rejilla año × mes: agregación de extremos diarios en celdas mensuales
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import MONTHS_PER_YEAR
from utils.helpers import is_nan, year_month_label
from .observations import DailyObservation


@dataclass(frozen=True)
class DailyPoint:
    day: int
    max: float
    min: float


@dataclass(frozen=True)
class MonthCell:
    """
    Celda (año, mes). Las celdas sin datos llevan missing=True,
    agregados a None y serie diaria vacía.
    """
    year: int
    month: int
    missing: bool
    month_max: Optional[float]
    month_min: Optional[float]
    daily: Tuple[DailyPoint, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month}"

    @property
    def label(self) -> str:
        return year_month_label(self.year, self.month)

    def value_for(self, mode: str) -> Optional[float]:
        """Agregado que colorea la celda según el modo (max/min)"""
        if self.missing:
            return None
        return self.month_max if mode == "max" else self.month_min


def _nan_max(values: Sequence[float]) -> float:
    # Un NaN en el mes contamina el agregado (no se filtra)
    if any(is_nan(v) for v in values):
        return float("nan")
    return max(values)


def _nan_min(values: Sequence[float]) -> float:
    if any(is_nan(v) for v in values):
        return float("nan")
    return min(values)


def missing_cell(year: int, month: int) -> MonthCell:
    return MonthCell(year=year, month=month, missing=True, month_max=None, month_min=None, daily=())


def build_grid(observations: Iterable[DailyObservation], years: Iterable[int]) -> List[MonthCell]:
    """
    Construye una celda por cada (año, mes) del rango pedido

    Args:
        observations: Observaciones diarias (ya filtradas por fecha o no)
        years: Años a representar, en orden ascendente

    Returns:
        Lista de len(years) * 12 celdas ordenadas por (año, mes)
    """
    by_key: Dict[Tuple[int, int], List[DailyObservation]] = defaultdict(list)
    for obs in observations:
        by_key[(obs.year, obs.month)].append(obs)

    cells: List[MonthCell] = []
    for year in sorted(int(y) for y in years):
        for month in range(MONTHS_PER_YEAR):
            rows = by_key.get((year, month))
            if not rows:
                cells.append(missing_cell(year, month))
                continue

            rows = sorted(rows, key=lambda r: r.day)
            cells.append(
                MonthCell(
                    year=year,
                    month=month,
                    missing=False,
                    month_max=_nan_max([r.max for r in rows]),
                    month_min=_nan_min([r.min for r in rows]),
                    daily=tuple(DailyPoint(day=r.day, max=r.max, min=r.min) for r in rows),
                )
            )
    return cells


def years_between(start_year: int, end_year: int) -> List[int]:
    """Años del rango inclusivo"""
    return list(range(int(start_year), int(end_year) + 1))
