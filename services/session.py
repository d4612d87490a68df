"""
Estado de sesión de la matriz: dataset cacheado, modo y rango de años

Lo posee la app principal (guardado en st.session_state) y se pasa por
referencia a la construcción de la escena; aquí no se importa streamlit.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import DEFAULT_YEAR_SPAN
from models.grid import MonthCell, build_grid, years_between
from models.observations import DailyObservation, filter_years, global_domain, year_extent
from models.scale import ColorScale

logger = logging.getLogger(__name__)

MODES = ("max", "min")


def default_range(extent: Tuple[int, int], span: int = DEFAULT_YEAR_SPAN) -> Tuple[int, int]:
    """Últimos `span` años del dataset (o menos si es más corto)"""
    first, last = extent
    return max(first, last - (span - 1)), last


def normalize_range(start_year: int, end_year: int, extent: Tuple[int, int]) -> Tuple[int, int]:
    """Recorta al extent del dataset e intercambia si viene invertido"""
    first, last = extent
    s, e = int(start_year), int(end_year)
    if s > e:
        s, e = e, s
    s = min(max(s, first), last)
    e = min(max(e, first), last)
    return s, e


def next_mode(mode: str) -> str:
    return "min" if mode == "max" else "max"


@dataclass
class MatrixSession:
    """Estado mutable de una sesión interactiva"""
    observations: List[DailyObservation]
    extent: Tuple[int, int]
    scale: ColorScale
    mode: str = "max"
    start_year: int = 0
    end_year: int = 0
    _cells: Optional[List[MonthCell]] = field(default=None, repr=False)
    _cells_range: Optional[Tuple[int, int]] = field(default=None, repr=False)

    @classmethod
    def from_observations(cls, observations: List[DailyObservation]) -> "MatrixSession":
        extent = year_extent(observations)
        if extent is None:
            raise ValueError("No hay observaciones para construir la sesión")
        session = cls(
            observations=list(observations),
            extent=extent,
            scale=ColorScale(global_domain(observations)),
        )
        session.start_year, session.end_year = default_range(extent)
        logger.info(
            f"Sesión creada: {len(session.observations)} días, años {extent[0]}-{extent[1]}, "
            f"dominio {session.scale.domain[0]:.1f}..{session.scale.domain[1]:.1f} °C"
        )
        return session

    @property
    def year_range(self) -> Tuple[int, int]:
        return self.start_year, self.end_year

    @property
    def all_years(self) -> List[int]:
        return years_between(*self.extent)

    def set_year_range(self, start_year: int, end_year: int) -> Tuple[int, int]:
        """Aplica un rango desde los selectores (recortado y sin invertir)"""
        self.start_year, self.end_year = normalize_range(start_year, end_year, self.extent)
        return self.year_range

    def reset_range(self) -> Tuple[int, int]:
        self.start_year, self.end_year = default_range(self.extent)
        return self.year_range

    def toggle_mode(self) -> str:
        """Alterna max/min; no toca la rejilla ni el dominio de color"""
        self.mode = next_mode(self.mode)
        logger.debug(f"Modo -> {self.mode}")
        return self.mode

    def cells(self) -> List[MonthCell]:
        """
        Celdas del rango actual. Se reconstruyen (lista nueva) solo cuando
        cambia el rango; alternar el modo reutiliza las existentes.
        """
        if self._cells is None or self._cells_range != self.year_range:
            start, end = self.year_range
            data = filter_years(self.observations, start, end)
            self._cells = build_grid(data, years_between(start, end))
            self._cells_range = self.year_range
            logger.debug(f"Rejilla reconstruida {start}-{end}: {len(self._cells)} celdas")
        return self._cells
