"""
Gráfico Plotly de la matriz año × mes a partir de una MatrixScene
"""
import inspect
import logging
from typing import Any, Callable, List, Optional, Tuple

import plotly.graph_objects as go
import streamlit as st

from config import (
    CELL_STROKE, EXTRA_RIGHT, LEGEND_H, LEGEND_STROKE, LEGEND_TICKS, LEGEND_W,
    MARGIN_BOTTOM, MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP,
    SPARK_MAX_COLOR, SPARK_MIN_COLOR, SPARK_WIDTH,
)
from services.scene import MatrixScene

logger = logging.getLogger(__name__)


def _spark_series(scene: MatrixScene, attr: str) -> Tuple[List, List]:
    # Todas las celdas en una sola traza, separadas por None
    xs: List = []
    ys: List = []
    for cell in scene.cells:
        if cell.missing or not cell.spark_x:
            continue
        xs.extend(cell.spark_x)
        ys.extend(getattr(cell, attr))
        xs.append(None)
        ys.append(None)
    return xs, ys


def _cell_shapes(scene: MatrixScene) -> List[dict]:
    return [
        dict(
            type="path",
            path=cell.path,
            fillcolor=cell.fill,
            line=dict(color=CELL_STROKE, width=1),
            layer="below",
        )
        for cell in scene.cells
    ]


def _legend_trace(scene: MatrixScene) -> go.Scatter:
    # Traza vacía que solo aporta la barra de color (gradiente de la leyenda)
    lo, hi = scene.domain
    return go.Scatter(
        x=[None],
        y=[None],
        mode="markers",
        marker=dict(
            colorscale=scene.legend_stops,
            cmin=lo,
            cmax=hi,
            color=[lo],
            showscale=True,
            colorbar=dict(
                title=dict(text=scene.legend_title, side="top"),
                thickness=LEGEND_W,
                len=LEGEND_H,
                lenmode="pixels",
                nticks=LEGEND_TICKS,
                outlinecolor=LEGEND_STROKE,
                outlinewidth=1,
                x=1.0,
                xanchor="left",
                xpad=30,
                y=1.0,
                yanchor="top",
            ),
        ),
        hoverinfo="skip",
        showlegend=False,
        name="legend",
    )


def build_matrix_figure(scene: MatrixScene) -> go.Figure:
    """
    Dibuja la escena: rectángulos redondeados (shapes), sparklines de
    máximas/mínimas diarias, objetivos de hover por celda y leyenda.
    """
    fig = go.Figure()

    spark_x, spark_max = _spark_series(scene, "spark_max")
    _, spark_min = _spark_series(scene, "spark_min")

    fig.add_trace(go.Scatter(
        x=spark_x,
        y=spark_max,
        mode="lines",
        name="Daily max",
        line=dict(color=SPARK_MAX_COLOR, width=SPARK_WIDTH),
        connectgaps=False,
        hoverinfo="skip",
        showlegend=False,
    ))
    fig.add_trace(go.Scatter(
        x=spark_x,
        y=spark_min,
        mode="lines",
        name="Daily min",
        line=dict(color=SPARK_MIN_COLOR, width=SPARK_WIDTH),
        connectgaps=False,
        hoverinfo="skip",
        showlegend=False,
    ))

    # Marcadores transparentes en el centro de cada celda para tooltip/click
    centers = [cell.center for cell in scene.cells]
    # Cuadrado que cubre la banda entera para que el click en los bordes cuente como celda
    marker_size = max((max(c.width, c.height) for c in scene.cells), default=0)
    fig.add_trace(go.Scatter(
        x=[c[0] for c in centers],
        y=[c[1] for c in centers],
        mode="markers",
        name="cells",
        marker=dict(symbol="square", size=marker_size, color="rgba(0,0,0,0)"),
        customdata=[[cell.tooltip, cell.year, cell.month] for cell in scene.cells],
        hovertemplate="%{customdata[0]}<extra></extra>",
        showlegend=False,
    ))

    fig.add_trace(_legend_trace(scene))

    fig.update_layout(
        width=scene.width,
        height=scene.height,
        margin=dict(l=MARGIN_LEFT, r=MARGIN_RIGHT + EXTRA_RIGHT, t=MARGIN_TOP, b=MARGIN_BOTTOM),
        shapes=_cell_shapes(scene),
        xaxis=dict(
            range=[0, scene.plot_width],
            side="top",
            tickmode="array",
            tickvals=list(scene.tick_positions),
            ticktext=[str(y) for y in scene.tick_years],
            ticks="",
            showgrid=False,
            zeroline=False,
            showline=False,
            fixedrange=True,
        ),
        yaxis=dict(
            range=[scene.plot_height, 0],
            tickmode="array",
            tickvals=list(scene.month_positions),
            ticktext=list(scene.month_labels),
            ticks="",
            showgrid=False,
            zeroline=False,
            showline=False,
            fixedrange=True,
        ),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        hovermode="closest",
        clickmode="event+select",
        dragmode=False,
        showlegend=False,
    )
    return fig


def clicked_cell(state: Any) -> Optional[Tuple[int, int]]:
    """(año, mes) del punto seleccionado en el estado del gráfico, si lo hay"""
    if not state:
        return None
    try:
        points = (state.get("selection") or {}).get("points") or []
    except AttributeError:
        return None
    for point in points:
        customdata = point.get("customdata") if isinstance(point, dict) else None
        if customdata and len(customdata) >= 3:
            return int(customdata[1]), int(customdata[2])
    return None


def toggle_on_chart_event(session, state: Any) -> str:
    """
    Un evento de selección del gráfico = un cambio de modo, tanto si cae en
    una celda como en el fondo (que limpia la selección).
    """
    cell = clicked_cell(state)
    mode = session.toggle_mode()
    logger.debug(f"Click en matriz ({cell or 'fondo'}) -> modo {mode}")
    return mode


def render_matrix_chart(fig: go.Figure, key: str, on_click: Optional[Callable[[], None]] = None,
                        config: Optional[dict] = None):
    """
    Renderiza Plotly con compatibilidad entre APIs antiguas/nuevas de Streamlit.

    `on_click` se invoca una vez por cada evento de selección del navegador
    (click en una celda o en el fondo que limpia la selección), nunca en
    los reruns sin interacción.
    """
    cfg = config if isinstance(config, dict) else {"displayModeBar": False}
    params = inspect.signature(st.plotly_chart).parameters
    kwargs = {"key": key, "config": cfg}
    if on_click is not None and "on_select" in params:
        kwargs["on_select"] = on_click
        if "selection_mode" in params:
            kwargs["selection_mode"] = "points"
    if "width" in params:
        kwargs["width"] = "content"
    elif "use_container_width" in params:
        kwargs["use_container_width"] = False
    return st.plotly_chart(fig, **kwargs)
