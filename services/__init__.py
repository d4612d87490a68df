"""
Servicios de la matriz: sesión, escena, tooltip y exportación
"""
from .session import MatrixSession, default_range, normalize_range, next_mode
from .scene import MatrixScene, SceneCell, build_scene, compose_scene
from .tooltip import format_tooltip
from .export import export_png, prepare_export_figure

__all__ = [
    'MatrixSession',
    'default_range',
    'normalize_range',
    'next_mode',
    'MatrixScene',
    'SceneCell',
    'build_scene',
    'compose_scene',
    'format_tooltip',
    'export_png',
    'prepare_export_figure',
]
