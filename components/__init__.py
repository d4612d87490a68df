"""
Módulo de componentes visuales
"""
from .matrix_chart import build_matrix_figure, render_matrix_chart, clicked_cell, toggle_on_chart_event
from .sidebar import render_sidebar, mode_indicator_html
from .theme import apply_plotly_theme, inject_theme_css, resolve_dark

__all__ = [
    'build_matrix_figure',
    'render_matrix_chart',
    'clicked_cell',
    'toggle_on_chart_event',
    'render_sidebar',
    'mode_indicator_html',
    'apply_plotly_theme',
    'inject_theme_css',
    'resolve_dark',
]
