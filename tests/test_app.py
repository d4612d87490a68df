"""
Tests de la app Streamlit completa (selectores, Reset y cambio de modo).
"""
import pytest
from streamlit.testing.v1 import AppTest

from components.sidebar import KEY_END, KEY_START

APP_TIMEOUT = 60


@pytest.fixture
def app(project_root_dir, monkeypatch):
    # La ruta de datos por defecto es relativa a la raíz del proyecto
    monkeypatch.chdir(project_root_dir)
    at = AppTest.from_file(str(project_root_dir / "tempmatrix.py"), default_timeout=APP_TIMEOUT)
    at.run()
    assert not at.exception
    return at


def _sidebar_button(at, label):
    return next(b for b in at.button if b.label == label)


def _mode_indicator(at):
    return next(m.value for m in at.sidebar.markdown if "tm-mode" in m.value)


class TestAppShell:
    def test_initial_state(self, app):
        assert app.selectbox(key=KEY_START).value == 2015
        assert app.selectbox(key=KEY_END).value == 2024
        assert ">MAX<" in _mode_indicator(app)
        assert any("(2015–2024)" in m.value for m in app.markdown)

    def test_inverted_range_is_swapped_in_widgets(self, app):
        app.selectbox(key=KEY_START).set_value(2020).run()
        assert app.selectbox(key=KEY_START).value == 2020

        # Fin anterior al inicio: se intercambian los dos selectores
        app.selectbox(key=KEY_END).set_value(2017).run()

        assert not app.exception
        assert app.selectbox(key=KEY_START).value == 2017
        assert app.selectbox(key=KEY_END).value == 2020
        assert app.session_state["tm_session"].year_range == (2017, 2020)
        assert any("(2017–2020)" in m.value for m in app.markdown)

    def test_reset_restores_default_range(self, app):
        app.selectbox(key=KEY_START).set_value(2019).run()
        app.selectbox(key=KEY_END).set_value(2021).run()
        assert app.session_state["tm_session"].year_range == (2019, 2021)

        _sidebar_button(app, "Reset").click().run()

        assert app.selectbox(key=KEY_START).value == 2015
        assert app.selectbox(key=KEY_END).value == 2024
        assert app.session_state["tm_session"].year_range == (2015, 2024)

    def test_one_toggle_switches_to_min(self, app):
        _sidebar_button(app, "Toggle MAX / MIN").click().run()

        assert not app.exception
        assert ">MIN<" in _mode_indicator(app)
        assert app.session_state["tm_session"].mode == "min"

    def test_toggle_twice_returns_to_max(self, app):
        _sidebar_button(app, "Toggle MAX / MIN").click().run()
        _sidebar_button(app, "Toggle MAX / MIN").click().run()

        assert ">MAX<" in _mode_indicator(app)
