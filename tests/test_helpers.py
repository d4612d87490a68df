"""
Tests de las funciones auxiliares.
"""
import math

import pytest

from utils import fmt_temp, html_clean, is_nan, safe_float, year_month_label


class TestHelpers:
    @pytest.mark.parametrize("raw,expected", [("21.5", 21.5), (" 7 ", 7.0), (3, 3.0)])
    def test_safe_float_numbers(self, raw, expected):
        assert safe_float(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "   ", None])
    def test_safe_float_non_numeric_is_nan(self, raw):
        assert math.isnan(safe_float(raw))

    def test_is_nan(self):
        assert is_nan(float("nan"))
        assert is_nan(None)
        assert not is_nan(0.0)

    def test_fmt_temp(self):
        assert fmt_temp(33.26) == "33.3 °C"
        assert fmt_temp(float("nan")) == "—"

    def test_year_month_label(self):
        assert year_month_label(2023, 0) == "2023-01"
        assert year_month_label(2023, 11) == "2023-12"

    def test_html_clean(self):
        assert html_clean("\n    <b>x</b>\n    ") == "<b>x</b>"
