"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    latitude: float = Field(default=35.9626444, ge=-90.0, le=90.0)
    longitude: float = Field(default=-83.9167239, ge=-180.0, le=180.0)
    timezone: str = "America/New_York"


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=20.0, gt=0.0)
    user_agent: str = "raijin/0.1.0"
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)
    open_meteo_url: str = "https://api.open-meteo.com"
    moon_phase_url: str = "https://api.viewbits.com"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    # The fortnight chart needs at least 14 days of hourly data
    forecast_days: int = Field(default=14, ge=14, le=16)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"
    file: str = "~/.config/raijin/raijin.log"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig = LocationConfig()
    http: HttpConfig = HttpConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
