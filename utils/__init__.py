"""
Módulo de utilidades
"""
from .helpers import (
    html_clean,
    is_nan,
    safe_float,
    fmt_temp,
    year_month_label,
)

__all__ = [
    'html_clean',
    'is_nan',
    'safe_float',
    'fmt_temp',
    'year_month_label',
]
