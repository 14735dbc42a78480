"""Forecast normalizer: merges Open-Meteo daily, hourly and current payloads
into a single Forecast view model."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from raijin.forecast.units import format_percentage, format_temperature
from raijin.forecast.weather_codes import WeatherCodeTable
from raijin.models.forecast import (
    CurrentConditions,
    DailyPeriod,
    Forecast,
    HourlySample,
)
from raijin.models.payload import CurrentPayload, DailyPayload, HourlyPayload

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class NormalizationError(ValueError):
    """Raised when upstream payloads cannot form a consistent Forecast."""


# Sakamoto month offsets; the weekday sum below is 0 for Sunday
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _is_calendar_date(year: int, month: int, day: int) -> bool:
    if year < 0 or not 1 <= month <= 12:
        return False
    last = 29 if month == 2 and _is_leap(year) else _DAYS_IN_MONTH[month - 1]
    return 1 <= day <= last


def _weekday(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian weekday, Monday=0. Not bounded to years 1-9999."""
    if month < 3:
        year -= 1
    from_sunday = (
        year + year // 4 - year // 100 + year // 400
        + _MONTH_OFFSETS[month - 1] + day
    ) % 7
    return (from_sunday - 1) % 7


def get_day_from_date(date_str: str) -> str:
    """Return the weekday name for a YYYY-MM-DD date.

    A string that doesn't split into three integer tokens raises
    NormalizationError. A well-formed date that isn't on the calendar
    (e.g. 2024-02-30) only loses its label: "" is returned.
    """
    pieces = date_str.split("-")
    if len(pieces) != 3:
        raise NormalizationError(
            f"Malformed date {date_str!r}: expected YYYY-MM-DD"
        )
    try:
        year, month, day = (int(p) for p in pieces)
    except ValueError as e:
        raise NormalizationError(
            f"Malformed date {date_str!r}: non-numeric component"
        ) from e

    if not _is_calendar_date(year, month, day):
        logger.warning("Invalid calendar date %s, weekday left blank", date_str)
        return ""
    return WEEKDAY_NAMES[_weekday(year, month, day)]


def normalize_forecast(raw: Mapping[str, Any], codes: WeatherCodeTable) -> Forecast:
    """Build a Forecast from a combined Open-Meteo response."""
    try:
        return build_forecast(raw["daily"], raw["hourly"], raw["current"], codes)
    except KeyError as e:
        raise NormalizationError(f"Forecast payload missing section {e}") from e


def build_forecast(
    daily: Mapping[str, Any],
    hourly: Mapping[str, Any],
    current: Mapping[str, Any],
    codes: WeatherCodeTable,
) -> Forecast:
    """Assemble a Forecast from the three independently shaped payloads.

    Periods are indexed by date; every hourly sample must join to one of
    them. Any structural problem aborts with NormalizationError, no partial
    Forecast is produced.
    """
    daily_payload = _validate(DailyPayload, daily, "daily")
    hourly_payload = _validate(HourlyPayload, hourly, "hourly")
    current_payload = _validate(CurrentPayload, current, "current")

    _check_aligned("daily", daily_payload)
    _check_aligned("hourly", hourly_payload)

    by_date = _build_periods(daily_payload, codes)
    samples = _build_hourly(hourly_payload, codes, by_date)

    periods = tuple(by_date.values())
    if periods and samples and samples[0].date != periods[0].date:
        raise NormalizationError(
            f"Hourly series starts on {samples[0].date}, "
            f"daily series on {periods[0].date}"
        )

    forecast = Forecast(
        periods=periods,
        hourly=tuple(samples),
        current=CurrentConditions(
            temperature=current_payload.temperature_2m,
            apparent_temperature=current_payload.apparent_temperature,
            weather_code=current_payload.weather_code,
        ),
    )
    logger.info(
        "Normalized forecast: %d days, %d hourly samples",
        len(forecast.periods), len(forecast.hourly),
    )
    return forecast


def _validate(model: type[BaseModel], data: Any, section: str) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise NormalizationError(f"Invalid {section} payload: {e}") from e


def _check_aligned(section: str, payload: BaseModel) -> None:
    """Every parallel array must be as long as the section's time axis."""
    expected = len(payload.time)  # type: ignore[attr-defined]
    for name in type(payload).model_fields:
        actual = len(getattr(payload, name))
        if actual != expected:
            raise NormalizationError(
                f"{section}.{name} has {actual} entries, "
                f"{section}.time has {expected}"
            )


def _build_periods(
    payload: DailyPayload, codes: WeatherCodeTable
) -> dict[str, DailyPeriod]:
    by_date: dict[str, DailyPeriod] = {}
    for i, day in enumerate(payload.time):
        if day in by_date:
            raise NormalizationError(f"Duplicate daily date {day}")
        by_date[day] = DailyPeriod(
            date=day,
            weekday=get_day_from_date(day),
            weather=codes.resolve(payload.weather_code[i]),
            temperature_max=format_temperature(payload.temperature_2m_max[i]),
            temperature_min=format_temperature(payload.temperature_2m_min[i]),
            apparent_temperature_max=format_temperature(
                payload.apparent_temperature_max[i]
            ),
            apparent_temperature_min=format_temperature(
                payload.apparent_temperature_min[i]
            ),
            precipitation_probability=format_percentage(
                payload.precipitation_probability_mean[i]
            ),
        )
    return by_date


def _build_hourly(
    payload: HourlyPayload,
    codes: WeatherCodeTable,
    by_date: Mapping[str, DailyPeriod],
) -> list[HourlySample]:
    samples: list[HourlySample] = []
    for i, timestamp in enumerate(payload.time):
        day = _check_timestamp(timestamp)
        if day not in by_date:
            raise NormalizationError(
                f"Hourly sample {timestamp} has no matching daily period"
            )
        samples.append(
            HourlySample(
                timestamp=timestamp,
                temperature=format_temperature(payload.temperature_2m[i]),
                weather=codes.resolve(payload.weather_code[i]),
            )
        )
    return samples


def _check_timestamp(timestamp: str) -> str:
    """Validate YYYY-MM-DDTHH:MM and return the date part."""
    parts = timestamp.split("T")
    if len(parts) != 2:
        raise NormalizationError(f"Malformed hourly timestamp {timestamp!r}")
    day, clock = parts
    try:
        hour = int(clock.split(":")[0])
    except ValueError as e:
        raise NormalizationError(
            f"Malformed hourly timestamp {timestamp!r}"
        ) from e
    if not 0 <= hour <= 23:
        raise NormalizationError(f"Hour out of range in {timestamp!r}")
    return day
