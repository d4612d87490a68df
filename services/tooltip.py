"""
Texto del tooltip de cada celda (marcado compatible con hoverlabel de Plotly)
"""
from models.grid import MonthCell
from utils.helpers import fmt_temp

SPARK_NOTE = "(Sparkline shows daily max & min)"


def _line(label: str, value, emphasized: bool) -> str:
    if emphasized:
        return f"<b>{label}:</b> <b>{fmt_temp(value)}</b>"
    return f"<b>{label}:</b> {fmt_temp(value)}"


def format_tooltip(cell: MonthCell, mode: str) -> str:
    """
    YYYY-MM, máxima y mínima mensual (la del modo activo en negrita).
    Las celdas sin datos muestran 'No data'.
    """
    header = f"<b>{cell.label}</b>"
    if cell.missing:
        return f"{header}<br>No data"

    lines = [
        header,
        _line("Monthly Max", cell.month_max, mode == "max"),
        _line("Monthly Min", cell.month_min, mode == "min"),
        f"<i>{SPARK_NOTE}</i>",
    ]
    return "<br>".join(lines)
