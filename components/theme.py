"""
Tema claro/oscuro: plantillas Plotly y CSS de la página
"""
from datetime import datetime
from typing import Optional

import plotly.io as pio
import streamlit as st

from utils import html_clean

THEME_OPTIONS = ["Auto", "Light", "Dark"]
TEMPLATE_LIGHT = "tempmatrix_light"
TEMPLATE_DARK = "tempmatrix_dark"

TEXT_LIGHT = "rgba(15, 18, 25, 0.92)"
TEXT_DARK = "rgba(255, 255, 255, 0.92)"


def resolve_dark(theme_mode: str, now: Optional[datetime] = None) -> bool:
    """Auto = oscuro entre las 20:00 y las 07:59"""
    if theme_mode == "Dark":
        return True
    if theme_mode == "Light":
        return False
    now = now or datetime.now()
    return (now.hour >= 20) or (now.hour <= 7)


def apply_plotly_theme(dark: bool) -> str:
    """Registra la plantilla del tema y la deja por defecto; devuelve su nombre"""
    if dark:
        pio.templates[TEMPLATE_DARK] = pio.templates["plotly_dark"]
        pio.templates[TEMPLATE_DARK].layout.font.color = TEXT_DARK
        pio.templates[TEMPLATE_DARK].layout.title.font.color = TEXT_DARK
        pio.templates.default = TEMPLATE_DARK
        return TEMPLATE_DARK

    pio.templates[TEMPLATE_LIGHT] = pio.templates["plotly_white"]
    pio.templates[TEMPLATE_LIGHT].layout.font.color = TEXT_LIGHT
    pio.templates[TEMPLATE_LIGHT].layout.title.font.color = TEXT_LIGHT
    pio.templates.default = TEMPLATE_LIGHT
    return TEMPLATE_LIGHT


def inject_theme_css(dark: bool) -> None:
    page_bg = "#0e1117" if dark else "#ffffff"
    page_text = "rgb(250, 250, 250)" if dark else "rgb(15, 18, 25)"
    sidebar_bg = "#262730" if dark else "#f4f6fb"
    indicator_bg = "rgba(255,255,255,0.08)" if dark else "rgba(15,18,25,0.06)"

    st.markdown(html_clean(f"""
    <style>
    [data-testid="stAppViewContainer"] {{
        background-color: {page_bg} !important;
        color: {page_text} !important;
    }}
    [data-testid="stSidebar"] {{
        background-color: {sidebar_bg} !important;
    }}
    .tm-mode {{
        display: inline-block;
        padding: 0.15rem 0.6rem;
        border-radius: 999px;
        font-weight: 700;
        letter-spacing: 0.05em;
        background: {indicator_bg};
    }}
    </style>
    """), unsafe_allow_html=True)
