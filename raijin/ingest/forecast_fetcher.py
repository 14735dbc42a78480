"""Forecast fetcher: retrieves and normalizes the forecast and moon phases."""

import logging

from raijin.config.schema import AppConfig
from raijin.forecast.moon import parse_moon_phases
from raijin.forecast.normalizer import normalize_forecast
from raijin.forecast.weather_codes import WeatherCodeTable
from raijin.ingest.moon_phase_client import MoonPhaseClient
from raijin.ingest.open_meteo_client import OpenMeteoClient
from raijin.models.forecast import Forecast, MoonPhaseEntry

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(
        self,
        open_meteo: OpenMeteoClient,
        moon: MoonPhaseClient,
        codes: WeatherCodeTable,
    ):
        self.open_meteo = open_meteo
        self.moon = moon
        self.codes = codes

    def fetch_forecast(self, config: AppConfig) -> Forecast:
        """Fetch and normalize the forecast. Any failure propagates."""
        raw = self.open_meteo.get_forecast(config.location, config.display)
        return normalize_forecast(raw, self.codes)

    def fetch_moon_phases(self, start_date: str) -> list[MoonPhaseEntry]:
        """Fetch moon phases starting at ``start_date``.

        Only the moon pane depends on these, so failures are logged and an
        empty series is returned; the pane renders its placeholder.
        """
        try:
            return parse_moon_phases(self.moon.get_phases(start_date))
        except Exception:
            logger.exception("Failed to fetch moon phases from %s", start_date)
            return []

    def fetch(self, config: AppConfig) -> tuple[Forecast, list[MoonPhaseEntry]]:
        forecast = self.fetch_forecast(config)
        phases: list[MoonPhaseEntry] = []
        if forecast.periods:
            phases = self.fetch_moon_phases(forecast.periods[0].date)
        return forecast, phases
