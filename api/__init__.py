"""
Módulo API
"""
from .csv_source import (
    DataSourceError,
    fetch_csv_text,
    read_daily_frame,
    load_daily_observations,
)

__all__ = [
    'DataSourceError',
    'fetch_csv_text',
    'read_daily_frame',
    'load_daily_observations',
]
