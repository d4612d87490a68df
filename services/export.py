"""
Exportación de la matriz a PNG

El lienzo mide lo mismo que la figura más un margen fijo (derecha/abajo) y
se rellena de blanco para que la transparencia no llegue al raster.
"""
import logging
from typing import Optional, Sequence

import plotly.graph_objects as go
import plotly.io as pio

from config import EXPORT_BACKGROUND, EXPORT_PAD_H, EXPORT_PAD_W, EXPORT_TEXT_COLOR

logger = logging.getLogger(__name__)


def resolve_style_layers(names: Sequence[str]) -> Optional[str]:
    """
    Combina las plantillas de estilo disponibles ("a+b").
    Una capa que no se puede resolver se omite sin abortar la exportación.
    """
    resolved = []
    for name in names:
        if not name:
            continue
        try:
            pio.templates[name]
        except (KeyError, ValueError) as e:
            logger.warning(f"Capa de estilo '{name}' no disponible, se omite ({e})")
            continue
        resolved.append(name)
    return "+".join(resolved) if resolved else None


def prepare_export_figure(fig: Optional[go.Figure], style_layers: Sequence[str] = ()) -> Optional[go.Figure]:
    """Copia de la figura lista para rasterizar; None si aún no hay escena"""
    if fig is None:
        return None

    out = go.Figure(fig)
    width = int(out.layout.width or 0)
    height = int(out.layout.height or 0)
    margin = out.layout.margin

    template = resolve_style_layers(style_layers)
    if template:
        out.update_layout(template=template)

    out.update_layout(
        width=width + EXPORT_PAD_W,
        height=height + EXPORT_PAD_H,
        margin=dict(
            l=margin.l,
            t=margin.t,
            r=(margin.r or 0) + EXPORT_PAD_W,
            b=(margin.b or 0) + EXPORT_PAD_H,
        ),
        paper_bgcolor=EXPORT_BACKGROUND,
        plot_bgcolor=EXPORT_BACKGROUND,
        # Las plantillas oscuras ponen el texto en blanco
        font=dict(color=EXPORT_TEXT_COLOR),
        title_font_color=EXPORT_TEXT_COLOR,
    )
    return out


def export_png(fig: Optional[go.Figure], style_layers: Sequence[str] = ()) -> Optional[bytes]:
    """
    Rasteriza la escena actual a PNG

    Returns:
        Bytes PNG, o None si no hay figura que exportar
    """
    out = prepare_export_figure(fig, style_layers)
    if out is None:
        logger.debug("Exportación ignorada: no hay escena renderizada")
        return None

    png = pio.to_image(out, format="png", width=out.layout.width, height=out.layout.height, scale=1)
    logger.info(f"PNG exportado: {out.layout.width}x{out.layout.height} px, {len(png)} bytes")
    return png
