"""
Descripción de la escena renderizable de la matriz de temperaturas

build_scene es una función pura (observaciones, rango, modo) → escena; no
depende de Streamlit ni de Plotly, el componente de gráfico la dibuja.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from config import (
    CELL_H, CELL_W, CITY_NAME, EXTRA_RIGHT, MARGIN_BOTTOM, MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP,
    MISSING_FILL, MONTH_NAMES, MONTHS_PER_YEAR,
)
from models.grid import MonthCell, build_grid, years_between
from models.observations import DailyObservation, filter_years
from models.scale import ColorScale
from .layout import BandScale, rounded_rect_path, sparkline_coords, tick_years
from .tooltip import format_tooltip

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneCell:
    year: int
    month: int
    missing: bool
    value: Optional[float]
    fill: str
    x: float
    y: float
    width: float
    height: float
    path: str
    tooltip: str
    spark_x: Tuple[Optional[float], ...] = ()
    spark_max: Tuple[Optional[float], ...] = ()
    spark_min: Tuple[Optional[float], ...] = ()

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2.0, self.y + self.height / 2.0


@dataclass(frozen=True)
class MatrixScene:
    title: str
    mode: str
    mode_label: str
    legend_title: str
    legend_stops: list
    domain: Tuple[float, float]
    years: Tuple[int, ...]
    tick_years: Tuple[int, ...]
    tick_positions: Tuple[float, ...]
    month_positions: Tuple[float, ...]
    month_labels: Tuple[str, ...]
    plot_width: float
    plot_height: float
    width: int
    height: int
    cells: Tuple[SceneCell, ...]

    @property
    def fills(self) -> List[str]:
        return [c.fill for c in self.cells]


def matrix_title(start_year: int, end_year: int, city: str = CITY_NAME) -> str:
    return f"{city} Monthly Temperature ({start_year}–{end_year})"


def legend_title(mode: str) -> str:
    return f"{'Monthly Max' if mode == 'max' else 'Monthly Min'} (°C)"


def cell_fill(cell: MonthCell, mode: str, scale: ColorScale) -> str:
    """Relleno de la celda; las celdas sin datos no pasan por la escala"""
    if cell.missing:
        return MISSING_FILL
    return scale.color_of(cell.value_for(mode)) or MISSING_FILL


def compose_scene(
    cells: Sequence[MonthCell],
    year_range: Tuple[int, int],
    mode: str,
    scale: ColorScale,
    city: str = CITY_NAME,
) -> MatrixScene:
    """
    Coloca celdas ya agregadas en la matriz y les asigna color según el modo.
    Alternar el modo solo requiere volver a llamar a esta función con las
    mismas celdas.
    """
    start_year, end_year = year_range
    years = tuple(years_between(start_year, end_year))
    months = tuple(range(MONTHS_PER_YEAR))
    plot_w = len(years) * CELL_W
    plot_h = len(months) * CELL_H

    x = BandScale(years, (0.0, float(plot_w)))
    y = BandScale(months, (0.0, float(plot_h)))
    bw, bh = x.bandwidth, y.bandwidth

    scene_cells: List[SceneCell] = []
    for cell in cells:
        if cell.year not in years:
            continue
        cx, cy = x(cell.year), y(cell.month)
        xs, ys_max, ys_min = sparkline_coords(cell.daily, cx, cy, bw, bh) if not cell.missing else ([], [], [])
        scene_cells.append(
            SceneCell(
                year=cell.year,
                month=cell.month,
                missing=cell.missing,
                value=cell.value_for(mode),
                fill=cell_fill(cell, mode, scale),
                x=cx,
                y=cy,
                width=bw,
                height=bh,
                path=rounded_rect_path(cx, cy, bw, bh),
                tooltip=format_tooltip(cell, mode),
                spark_x=tuple(xs),
                spark_max=tuple(ys_max),
                spark_min=tuple(ys_min),
            )
        )

    ticks = tuple(tick_years(list(years)))
    return MatrixScene(
        title=matrix_title(start_year, end_year, city),
        mode=mode,
        mode_label=mode.upper(),
        legend_title=legend_title(mode),
        legend_stops=scale.legend_stops(),
        domain=scale.domain,
        years=years,
        tick_years=ticks,
        tick_positions=tuple(x.center(t) for t in ticks),
        month_positions=tuple(y.center(m) for m in months),
        month_labels=tuple(MONTH_NAMES),
        plot_width=float(plot_w),
        plot_height=float(plot_h),
        width=int(MARGIN_LEFT + plot_w + MARGIN_RIGHT + EXTRA_RIGHT),
        height=int(MARGIN_TOP + plot_h + MARGIN_BOTTOM),
        cells=tuple(scene_cells),
    )


def build_scene(
    observations: Iterable[DailyObservation],
    year_range: Tuple[int, int],
    mode: str,
    scale: ColorScale,
    city: str = CITY_NAME,
) -> MatrixScene:
    """(observaciones, rango, modo) → escena completa, reconstruyendo la rejilla"""
    start_year, end_year = year_range
    data = filter_years(observations, start_year, end_year)
    cells = build_grid(data, years_between(start_year, end_year))
    logger.debug(f"Escena {start_year}-{end_year} ({mode}): {len(cells)} celdas")
    return compose_scene(cells, year_range, mode, scale, city)
