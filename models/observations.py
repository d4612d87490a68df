"""
Observaciones diarias: tipo de dominio y parser de filas
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from config import COL_DATE, COL_MAX, COL_MIN, DATE_FORMAT
from utils.helpers import is_nan, safe_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyObservation:
    """Un día del CSV. `month` va de 0 a 11, `day` de 1 a 31."""
    date: date
    year: int
    month: int
    day: int
    max: float
    min: float


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    return datetime.strptime(text[:10], DATE_FORMAT).date()


def parse_row(record: Mapping[str, Any]) -> DailyObservation:
    """
    Convierte un registro crudo del CSV en una DailyObservation

    Las temperaturas no numéricas se convierten en NaN en lugar de lanzar
    excepción; el NaN se propaga a los agregados mensuales.

    Args:
        record: Diccionario (o fila) con date, max_temperature, min_temperature

    Returns:
        DailyObservation

    Raises:
        ValueError: si la fecha no tiene formato YYYY-MM-DD
    """
    dt = _parse_date(record.get(COL_DATE))
    return DailyObservation(
        date=dt,
        year=dt.year,
        month=dt.month - 1,
        day=dt.day,
        max=safe_float(record.get(COL_MAX)),
        min=safe_float(record.get(COL_MIN)),
    )


def parse_records(records: Iterable[Mapping[str, Any]]) -> List[DailyObservation]:
    """Parsea todas las filas; descarta (y cuenta) las que no tienen fecha válida"""
    observations: List[DailyObservation] = []
    dropped = 0
    for record in records:
        try:
            observations.append(parse_row(record))
        except (TypeError, ValueError):
            dropped += 1
    if dropped:
        logger.warning(f"Descartadas {dropped} filas con fecha inválida")
    return observations


def year_extent(observations: Iterable[DailyObservation]) -> Optional[Tuple[int, int]]:
    """Primer y último año presentes; None si no hay datos"""
    years = [obs.year for obs in observations]
    if not years:
        return None
    return min(years), max(years)


def filter_years(observations: Iterable[DailyObservation], start_year: int, end_year: int) -> List[DailyObservation]:
    """Observaciones con start_year <= año <= end_year"""
    return [obs for obs in observations if start_year <= obs.year <= end_year]


def global_domain(observations: Iterable[DailyObservation]) -> Tuple[float, float]:
    """
    Dominio [mín, máx] sobre todas las máximas y mínimas del dataset completo.
    Se calcula una sola vez por sesión para que los colores no cambien al filtrar.
    """
    values = []
    for obs in observations:
        values.append(obs.max)
        values.append(obs.min)
    values = [v for v in values if not is_nan(v)]
    if not values:
        return 0.0, 0.0
    return min(values), max(values)
