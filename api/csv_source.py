"""
Cliente de la fuente de datos diaria (CSV local o remoto)
Devuelve las observaciones ya parseadas para la matriz
"""
import io
import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd
import requests

from config import COL_DATE, COL_MAX, COL_MIN, DATA_TIMEOUT_SECONDS
from models.observations import DailyObservation, parse_records

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (COL_DATE, COL_MAX, COL_MIN)


class DataSourceError(Exception):
    def __init__(self, kind: str, status_code: Optional[int] = None):
        self.kind = kind
        self.status_code = status_code
        super().__init__(kind)


def is_remote(source: Union[str, Path]) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def fetch_csv_text(url: str) -> str:
    """Descarga el CSV remoto"""
    logger.info(f"Descargando CSV diario: {url}")

    try:
        r = requests.get(url, timeout=DATA_TIMEOUT_SECONDS)
    except requests.Timeout:
        raise DataSourceError("timeout")
    except requests.RequestException:
        raise DataSourceError("network")

    if r.status_code == 404:
        raise DataSourceError("notfound", 404)
    if r.status_code >= 400:
        raise DataSourceError("http", r.status_code)

    return r.text


def read_daily_frame(source: Union[str, Path]) -> pd.DataFrame:
    """
    Lee el CSV crudo como texto (sin convertir tipos): la conversión
    numérica la hace el parser de filas, que tolera valores no numéricos.
    """
    try:
        if is_remote(source):
            frame = pd.read_csv(io.StringIO(fetch_csv_text(str(source))), dtype=str)
        else:
            frame = pd.read_csv(Path(source), dtype=str)
    except FileNotFoundError:
        raise DataSourceError("notfound")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError):
        raise DataSourceError("badcsv")

    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        logger.warning(f"Faltan columnas en el CSV: {missing}")
        raise DataSourceError("nocolumns")
    return frame


def load_daily_observations(source: Union[str, Path]) -> List[DailyObservation]:
    """Carga y parsea todas las filas de la fuente"""
    frame = read_daily_frame(source)
    records = frame[list(REQUIRED_COLUMNS)].to_dict("records")
    observations = parse_records(records)
    logger.info(f"Observaciones cargadas: {len(observations)} de {len(frame)} filas")
    return observations
