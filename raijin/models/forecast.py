"""Forecast view models built from Open-Meteo payloads.

NOTE: temperature strings already carry the degree suffix and
precipitation strings the percent suffix.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyPeriod:
    date: str  # YYYY-MM-DD
    weekday: str  # "" when the date fails calendar validation
    weather: str
    temperature_max: str
    temperature_min: str
    apparent_temperature_max: str
    apparent_temperature_min: str
    precipitation_probability: str


@dataclass(frozen=True)
class HourlySample:
    timestamp: str  # YYYY-MM-DDTHH:MM
    temperature: str
    weather: str

    @property
    def date(self) -> str:
        return self.timestamp.split("T", 1)[0]

    @property
    def hour(self) -> int:
        return int(self.timestamp.split("T", 1)[1].split(":", 1)[0])


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    apparent_temperature: float
    weather_code: int


@dataclass(frozen=True)
class Forecast:
    periods: tuple[DailyPeriod, ...]
    hourly: tuple[HourlySample, ...]
    current: CurrentConditions

    def hours_on(self, date: str) -> list[HourlySample]:
        return [h for h in self.hourly if h.date == date]


@dataclass(frozen=True)
class MoonPhaseEntry:
    date: str
    phase: str
    illumination: str
