"""Tests for the text and JSON forecast formatters."""

import json

from raijin.models.forecast import Forecast, MoonPhaseEntry
from raijin.reporting.formatters import format_forecast_json, format_forecast_text


class TestFormatForecastText:
    def test_header_and_current(self, forecast: Forecast):
        lines = format_forecast_text(forecast).splitlines()
        assert lines[0] == "=== Right Now | 2024-01-01 ==="
        assert lines[1] == "Current: 12.3° (feels like 10.1°)"

    def test_today_line(self, forecast: Forecast):
        text = format_forecast_text(forecast)
        assert "Today: Clear Sky, high 20°, low 5°, rain 0%" in text

    def test_one_line_per_day(self, forecast: Forecast):
        text = format_forecast_text(forecast)
        day_lines = [line for line in text.splitlines() if "2024-01-" in line[:15]]
        assert len(day_lines) == 14
        assert day_lines[1].startswith("Tue 2024-01-02")
        assert day_lines[1].endswith("Overcast")

    def test_moon_line(self, forecast: Forecast):
        tonight = MoonPhaseEntry("2024-01-04", "Waning Crescent", "42%")
        assert "Moon tonight: Waning Crescent (42%)" in format_forecast_text(
            forecast, tonight
        )

    def test_no_moon_line_without_phase(self, forecast: Forecast):
        assert "Moon tonight" not in format_forecast_text(forecast)


class TestFormatForecastJson:
    def test_structure(self, forecast: Forecast):
        data = json.loads(format_forecast_json(forecast))
        assert data["current"] == {
            "temperature": 12.3,
            "apparent_temperature": 10.1,
            "weather_code": 3,
        }
        assert data["moon_tonight"] is None
        assert data["periods"][2]["weather"] == "Slight Rain"
        assert data["hourly"][0]["timestamp"] == "2024-01-01T00:00"

    def test_degree_sign_not_escaped(self, forecast: Forecast):
        assert "20°" in format_forecast_json(forecast)

    def test_moon_tonight(self, forecast: Forecast):
        tonight = MoonPhaseEntry("2024-01-04", "Waning Crescent", "42%")
        data = json.loads(format_forecast_json(forecast, tonight))
        assert data["moon_tonight"]["illumination"] == "42%"
