"""
Componentes de sidebar: tema, selectores de año, reset y modo
"""
import streamlit as st

from services.session import MatrixSession
from .theme import THEME_OPTIONS, resolve_dark

KEY_START = "tm_start_year"
KEY_END = "tm_end_year"


def _sync_range_widgets(session: MatrixSession) -> None:
    st.session_state[KEY_START] = session.start_year
    st.session_state[KEY_END] = session.end_year


def _on_year_change(session: MatrixSession) -> None:
    # Callback: se ejecuta antes del rerun, puede reescribir los widgets
    session.set_year_range(st.session_state[KEY_START], st.session_state[KEY_END])
    _sync_range_widgets(session)


def _on_reset(session: MatrixSession) -> None:
    session.reset_range()
    _sync_range_widgets(session)


def _on_toggle(session: MatrixSession) -> None:
    session.toggle_mode()


def mode_indicator_html(mode: str) -> str:
    return f'Mode: <span class="tm-mode">{mode.upper()}</span>'


def render_sidebar(session: MatrixSession):
    """
    Renderiza la barra lateral con configuración

    Args:
        session: Estado de la matriz (rango y modo)

    Returns:
        Tupla (theme_mode, dark)
    """
    # Tema
    st.sidebar.title("⚙️ Settings")
    theme_mode = st.sidebar.radio("Theme", THEME_OPTIONS, index=0)

    # Rango de años
    st.sidebar.markdown("---")
    st.sidebar.markdown("### 📅 Years")

    if KEY_START not in st.session_state or KEY_END not in st.session_state:
        _sync_range_widgets(session)

    years = session.all_years
    st.sidebar.selectbox("Start year", years, key=KEY_START, on_change=_on_year_change, args=(session,))
    st.sidebar.selectbox("End year", years, key=KEY_END, on_change=_on_year_change, args=(session,))
    st.sidebar.button("Reset", use_container_width=True, on_click=_on_reset, args=(session,))
    st.sidebar.caption(f"Data available {session.extent[0]}–{session.extent[1]}")

    # Modo
    st.sidebar.markdown("---")
    st.sidebar.markdown(mode_indicator_html(session.mode), unsafe_allow_html=True)
    st.sidebar.button("Toggle MAX / MIN", use_container_width=True, on_click=_on_toggle, args=(session,))
    st.sidebar.caption("Click any cell of the matrix to toggle as well.")

    return theme_mode, resolve_dark(theme_mode)
