"""
Tests de la fuente de datos CSV (local y remota).
"""
import math

import pytest
import requests

from api import csv_source
from api.csv_source import DataSourceError, is_remote, load_daily_observations, read_daily_frame


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


CSV_TEXT = (
    "date,max_temperature,min_temperature\n"
    "2022-06-01,31.2,25.9\n"
    "2022-06-02,32.0,26.1\n"
)


class TestLocalSource:
    """Tests con ficheros locales."""

    def test_load_sample(self, sample_csv):
        observations = load_daily_observations(sample_csv)

        assert len(observations) == 4
        first = observations[0]
        assert (first.year, first.month, first.day) == (2023, 0, 1)
        assert first.max == 18.5
        assert first.min == 12.0

    def test_non_numeric_becomes_nan(self, sample_csv):
        observations = load_daily_observations(sample_csv)

        feb = [o for o in observations if o.month == 1][0]
        assert math.isnan(feb.max)
        assert feb.min == 13.0

    def test_bad_dates_are_dropped(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text(
            "date,max_temperature,min_temperature\n"
            "not-a-date,20,10\n"
            "2021-03-05,21,11\n",
            encoding="utf-8",
        )

        observations = load_daily_observations(path)

        assert len(observations) == 1
        assert observations[0].day == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceError) as exc:
            load_daily_observations(tmp_path / "nope.csv")

        assert exc.value.kind == "notfound"

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "cols.csv"
        path.write_text("date,tmax\n2021-01-01,20\n", encoding="utf-8")

        with pytest.raises(DataSourceError) as exc:
            read_daily_frame(path)

        assert exc.value.kind == "nocolumns"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(DataSourceError) as exc:
            read_daily_frame(path)

        assert exc.value.kind == "badcsv"

    def test_bundled_dataset_loads(self, project_root_dir):
        observations = load_daily_observations(project_root_dir / "data" / "temperature_daily.csv")

        assert len(observations) > 3000
        assert observations[0].year == 2015


class TestRemoteSource:
    """Tests con requests.get sustituido."""

    def test_is_remote(self):
        assert is_remote("https://example.org/data.csv")
        assert is_remote("HTTP://example.org/data.csv")
        assert not is_remote("data/temperature_daily.csv")

    def test_remote_load(self, monkeypatch):
        calls = []

        def fake_get(url, timeout=None):
            calls.append((url, timeout))
            return FakeResponse(200, CSV_TEXT)

        monkeypatch.setattr(csv_source.requests, "get", fake_get)

        observations = load_daily_observations("https://example.org/daily.csv")

        assert len(observations) == 2
        assert observations[1].max == 32.0
        assert calls[0][0] == "https://example.org/daily.csv"
        assert calls[0][1] is not None

    def test_remote_404(self, monkeypatch):
        monkeypatch.setattr(csv_source.requests, "get", lambda url, timeout=None: FakeResponse(404))

        with pytest.raises(DataSourceError) as exc:
            load_daily_observations("https://example.org/missing.csv")

        assert exc.value.kind == "notfound"
        assert exc.value.status_code == 404

    def test_remote_server_error(self, monkeypatch):
        monkeypatch.setattr(csv_source.requests, "get", lambda url, timeout=None: FakeResponse(503))

        with pytest.raises(DataSourceError) as exc:
            load_daily_observations("https://example.org/daily.csv")

        assert exc.value.kind == "http"
        assert exc.value.status_code == 503

    def test_remote_timeout(self, monkeypatch):
        def fake_get(url, timeout=None):
            raise requests.Timeout("slow")

        monkeypatch.setattr(csv_source.requests, "get", fake_get)

        with pytest.raises(DataSourceError) as exc:
            load_daily_observations("https://example.org/daily.csv")

        assert exc.value.kind == "timeout"

    def test_remote_network_error(self, monkeypatch):
        def fake_get(url, timeout=None):
            raise requests.ConnectionError("down")

        monkeypatch.setattr(csv_source.requests, "get", fake_get)

        with pytest.raises(DataSourceError) as exc:
            load_daily_observations("https://example.org/daily.csv")

        assert exc.value.kind == "network"
