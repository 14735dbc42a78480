"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path

import pytest
import yaml

from raijin.forecast.normalizer import normalize_forecast
from raijin.forecast.weather_codes import WeatherCodeTable
from raijin.models.forecast import Forecast, MoonPhaseEntry


def _build_payload(days: int = 14, start: date = date(2024, 1, 1)) -> dict:
    """Open-Meteo shaped payload. Hourly temps run 10.0 .. 21.5 each day."""
    dates = [(start + timedelta(days=i)).isoformat() for i in range(days)]
    times = [f"{d}T{h:02d}:00" for d in dates for h in range(24)]
    return {
        "latitude": 35.96,
        "longitude": -83.92,
        "daily": {
            "time": dates,
            "weather_code": [(0, 3, 61)[i % 3] for i in range(days)],
            "temperature_2m_max": [20.0 + i for i in range(days)],
            "temperature_2m_min": [5.0 + i for i in range(days)],
            "apparent_temperature_max": [18.5 + i for i in range(days)],
            "apparent_temperature_min": [2.5 + i for i in range(days)],
            "precipitation_probability_mean": [10 * (i % 10) for i in range(days)],
        },
        "hourly": {
            "time": times,
            "weather_code": [0 for _ in times],
            "temperature_2m": [10.0 + (i % 24) / 2 for i in range(len(times))],
        },
        "current": {
            "temperature_2m": 12.3,
            "apparent_temperature": 10.1,
            "weather_code": 3,
        },
    }


@pytest.fixture
def codes() -> WeatherCodeTable:
    return WeatherCodeTable({"0": "Clear Sky", "3": "Overcast", "61": "Slight Rain"})


@pytest.fixture
def payload_factory() -> Callable[..., dict]:
    """Return the payload builder so tests can vary the day count."""
    return _build_payload


@pytest.fixture
def raw_forecast() -> dict:
    return _build_payload()


@pytest.fixture
def forecast(raw_forecast: dict, codes: WeatherCodeTable) -> Forecast:
    """A normalized 14-day forecast with 336 hourly samples."""
    return normalize_forecast(raw_forecast, codes)


@pytest.fixture
def moon_phases(fixtures_dir: Path) -> list[MoonPhaseEntry]:
    with open(fixtures_dir / "moon_phases.json") as f:
        return [MoonPhaseEntry(**item) for item in json.load(f)]


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"latitude": 47.6, "longitude": -122.3, "timezone": "America/Los_Angeles"},
        "display": {"temperature_unit": "fahrenheit"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
