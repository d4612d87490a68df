"""
Funciones auxiliares generales
"""
import textwrap


def html_clean(s: str) -> str:
    """Limpia y dedenta HTML"""
    return textwrap.dedent(s).strip()


def is_nan(x):
    """Verifica si un valor es NaN"""
    if x is None:
        return True
    return x != x


def safe_float(val, default=float("nan")):
    """Convierte a float; si no es numérico devuelve `default` (NaN)"""
    if val is None:
        return default
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


def fmt_temp(x, decimals=1):
    """Formatea temperatura en °C"""
    if is_nan(x):
        return "—"
    return f"{x:.{decimals}f} °C"


def year_month_label(year: int, month: int) -> str:
    """Etiqueta YYYY-MM (mes 0..11)"""
    return f"{int(year)}-{int(month) + 1:02d}"
