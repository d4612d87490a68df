"""
TempMatrix - Matriz mensual de temperaturas extremas
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="TempMatrix",
    page_icon="🌡️",
    layout="wide",
    initial_sidebar_state="expanded"
)
import logging

# Imports locales
from config import DATA_SOURCE, EXPORT_FILENAME, LOG_LEVEL
from api import DataSourceError, load_daily_observations
from services import MatrixSession, compose_scene, export_png
from components import (
    build_matrix_figure, render_matrix_chart, toggle_on_chart_event,
    render_sidebar, apply_plotly_theme, inject_theme_css
)

# Configurar logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

SESSION_KEY = "tm_session"
CHART_KEY = "tm_matrix_chart"
EXPORT_KEY = "tm_export_png"

ERROR_MESSAGES = {
    "notfound": "Data file not found",
    "timeout": "Timed out downloading the data file",
    "network": "Network error downloading the data file",
    "http": "The data server returned an error",
    "badcsv": "The data file is not a valid CSV",
    "nocolumns": "The CSV must have date, max_temperature and min_temperature columns",
}


@st.cache_data(show_spinner=False)
def _load_observations_cached(source: str):
    return load_daily_observations(source)


def _get_session() -> MatrixSession:
    """Sesión de la matriz; la carga de datos solo ocurre la primera vez"""
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        with st.spinner("Loading daily temperatures..."):
            observations = _load_observations_cached(DATA_SOURCE)
        session = MatrixSession.from_observations(observations)
        st.session_state[SESSION_KEY] = session
    return session


def _on_chart_click() -> None:
    # Un evento de selección = un cambio de modo
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        return
    toggle_on_chart_event(session, st.session_state.get(CHART_KEY))


# ============================================================
# DATOS
# ============================================================

try:
    session = _get_session()
except DataSourceError as e:
    detail = f" (HTTP {e.status_code})" if e.status_code else ""
    st.error(f"{ERROR_MESSAGES.get(e.kind, 'Could not load data')}{detail}: {DATA_SOURCE}")
    st.stop()
except ValueError:
    st.error(f"No valid rows in {DATA_SOURCE}")
    st.stop()

# ============================================================
# SIDEBAR Y TEMA
# ============================================================

theme_mode, dark = render_sidebar(session)
template_name = apply_plotly_theme(dark)
inject_theme_css(dark)

# ============================================================
# MATRIZ
# ============================================================

scene = compose_scene(session.cells(), session.year_range, session.mode, session.scale)
st.markdown(f"## {scene.title}")
st.caption("Color: monthly " + ("maximum" if session.mode == "max" else "minimum")
           + " · hover a cell for details · click to switch MAX / MIN")

fig = build_matrix_figure(scene)
render_matrix_chart(fig, key=CHART_KEY, on_click=_on_chart_click)

# ============================================================
# EXPORTACIÓN
# ============================================================

st.sidebar.markdown("---")
st.sidebar.markdown("### 🖼️ Export")

export_signature = (session.year_range, session.mode, template_name)
cached_export = st.session_state.get(EXPORT_KEY)

if st.sidebar.button("Prepare PNG", use_container_width=True):
    try:
        png = export_png(fig, style_layers=[template_name])
    except (ValueError, RuntimeError) as e:
        logger.warning(f"Error exportando PNG: {e}")
        st.sidebar.warning("PNG export is not available (image backend missing).")
        png = None
    if png:
        cached_export = {"signature": export_signature, "png": png}
        st.session_state[EXPORT_KEY] = cached_export

if cached_export and cached_export.get("signature") == export_signature:
    st.sidebar.download_button(
        "⬇️ Download PNG",
        data=cached_export["png"],
        file_name=EXPORT_FILENAME,
        mime="image/png",
        use_container_width=True,
    )
