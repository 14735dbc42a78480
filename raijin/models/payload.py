"""Upstream payload shapes (Open-Meteo forecast, ViewBits moon phases).

These models only check types; cross-field alignment is checked by the
normalizer so it can report which field is out of step.
"""

from pydantic import BaseModel, field_validator


class DailyPayload(BaseModel):
    model_config = {"extra": "ignore"}

    time: list[str]
    weather_code: list[int]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    apparent_temperature_max: list[float]
    apparent_temperature_min: list[float]
    precipitation_probability_mean: list[float | None]


class HourlyPayload(BaseModel):
    model_config = {"extra": "ignore"}

    time: list[str]
    weather_code: list[int]
    temperature_2m: list[float]


class CurrentPayload(BaseModel):
    model_config = {"extra": "ignore"}

    temperature_2m: float
    apparent_temperature: float
    weather_code: int


class MoonPhasePayload(BaseModel):
    model_config = {"extra": "ignore"}

    date: str
    phase: str
    illumination: str

    @field_validator("illumination", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        if isinstance(value, (int, float)):
            return str(value)
        return value
