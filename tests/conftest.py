"""Configuración de pytest y fixtures para los tests de TempMatrix."""
import sys
from datetime import date, timedelta
from pathlib import Path

# Añadir la raíz del proyecto al path para los imports planos (config, models...)
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from models.observations import DailyObservation


def make_obs(year, month, day, tmax, tmin):
    """Observación con mes 0..11 como en el modelo."""
    return DailyObservation(
        date=date(year, month + 1, day),
        year=year,
        month=month,
        day=day,
        max=float(tmax),
        min=float(tmin),
    )


@pytest.fixture
def obs_factory():
    return make_obs


@pytest.fixture
def two_year_observations():
    """Todos los días de 2020-2021 con un ciclo estacional sencillo."""
    observations = []
    current = date(2020, 1, 1)
    while current <= date(2021, 12, 31):
        base = 15.0 + current.month  # más cálido a final de año
        observations.append(
            DailyObservation(
                date=current,
                year=current.year,
                month=current.month - 1,
                day=current.day,
                max=base + 5.0 + (current.day % 3),
                min=base - 5.0 - (current.day % 2),
            )
        )
        current += timedelta(days=1)
    return observations


@pytest.fixture
def long_observations():
    """Un día por mes de 1990 a 2024 (35 años)."""
    observations = []
    for year in range(1990, 2025):
        for month in range(12):
            observations.append(make_obs(year, month, 15, 20.0 + month, 10.0 + month))
    return observations


@pytest.fixture
def sample_csv(tmp_path):
    """CSV diario pequeño con una fila no numérica."""
    path = tmp_path / "temperature_daily.csv"
    path.write_text(
        "date,max_temperature,min_temperature\n"
        "2023-01-01,18.5,12.0\n"
        "2023-01-02,19.0,11.5\n"
        "2023-02-10,abc,13.0\n"
        "2024-07-04,32.1,27.3\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def project_root_dir():
    """Directorio raíz del proyecto."""
    return project_root
