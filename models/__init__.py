"""
Módulo de modelos y cálculos
"""
from .observations import (
    DailyObservation, parse_row, parse_records,
    year_extent, filter_years, global_domain
)

from .grid import DailyPoint, MonthCell, build_grid, missing_cell, years_between

from .scale import ColorScale

__all__ = [
    # Observaciones
    'DailyObservation', 'parse_row', 'parse_records',
    'year_extent', 'filter_years', 'global_domain',
    # Rejilla
    'DailyPoint', 'MonthCell', 'build_grid', 'missing_cell', 'years_between',
    # Color
    'ColorScale',
]
