"""Open-Meteo forecast API client."""

import logging

from raijin.config.schema import DisplayConfig, HttpConfig, LocationConfig
from raijin.ingest.http_client import get_json

logger = logging.getLogger(__name__)

DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "weather_code",
    "precipitation_probability_mean",
)
HOURLY_FIELDS = ("temperature_2m", "weather_code")
CURRENT_FIELDS = ("temperature_2m", "apparent_temperature", "weather_code")


class OpenMeteoClient:
    def __init__(self, http: HttpConfig | None = None):
        self.http = http or HttpConfig()

    def get_forecast(self, location: LocationConfig, display: DisplayConfig) -> dict:
        """Fetch daily, hourly and current conditions in one request."""
        url = f"{self.http.open_meteo_url}/v1/forecast"
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "daily": ",".join(DAILY_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "current": ",".join(CURRENT_FIELDS),
            "timezone": location.timezone,
            "forecast_days": display.forecast_days,
            "temperature_unit": str(display.temperature_unit),
        }
        logger.info(
            "Fetching %d-day forecast for %.4f,%.4f",
            display.forecast_days, location.latitude, location.longitude,
        )
        return get_json(
            url,
            params=params,
            user_agent=self.http.user_agent,
            timeout=self.http.timeout_seconds,
            max_retries=self.http.max_retries,
            retry_base_delay=self.http.retry_base_delay,
        )
