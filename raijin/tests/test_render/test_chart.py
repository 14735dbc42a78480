"""Tests for chart projection and point binning."""

import pytest

from raijin.forecast.normalizer import normalize_forecast
from raijin.models.forecast import Forecast, HourlySample
from raijin.models.screen import ChartSeries, ChartWindow
from raijin.render.chart import (
    DAILY_X_LABELS,
    ChartDataError,
    bin_points,
    project,
)


def _samples(temps: list[float]) -> list[HourlySample]:
    return [
        HourlySample(f"2024-01-01T{h:02d}:00", f"{t}°", "Clear Sky")
        for h, t in enumerate(temps)
    ]


class TestDailyProjection:
    def test_24_points_on_hour_axis(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.DAILY)
        assert len(series.points) == 24
        assert [x for x, _ in series.points] == [float(h) for h in range(24)]
        assert series.points[3] == (3.0, 11.5)
        assert series.x_bounds == (0.0, 23.0)
        assert series.x_labels == DAILY_X_LABELS

    def test_axis_bounds_padded(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.DAILY)
        temps = [y for _, y in series.points]
        assert series.y_min <= min(temps) - 5 <= series.y_min + 1
        assert series.y_max >= max(temps) + 5
        assert (series.y_min, series.y_max) == (5.0, 27.0)

    def test_five_tick_labels(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.DAILY)
        assert len(series.y_labels) == 5
        assert series.y_labels[0] == "5"
        assert series.y_labels[2] == "16"
        assert series.y_labels[-1] == "27"

    def test_fractional_bounds(self):
        series = project(_samples([-2.3] + [0.0] * 22 + [7.6]), ChartWindow.DAILY)
        assert series.y_min == -8.0
        assert series.y_max == 13.0

    def test_only_first_window_used(self):
        series = project(_samples([1.0] * 24) + _samples([99.0]), ChartWindow.DAILY)
        assert max(y for _, y in series.points) == 1.0


class TestFortnightProjection:
    def test_336_points_on_index_axis(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods)
        assert len(series.points) == 336
        assert series.points[25] == (25.0, 10.5)
        assert series.x_bounds == (0.0, 336.0)

    def test_day_labels(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods)
        assert len(series.x_labels) == 14
        assert series.x_labels[0] == "01-01"
        assert series.x_labels[-1] == "01-14"


class TestProjectionErrors:
    def test_short_window(self, payload_factory, codes):
        forecast = normalize_forecast(payload_factory(days=1), codes)
        with pytest.raises(ChartDataError):
            project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods)

    def test_malformed_temperature(self):
        samples = _samples([1.0] * 24)
        samples[5] = HourlySample("2024-01-01T05:00", "n/a", "Clear Sky")
        with pytest.raises(ChartDataError):
            project(samples, ChartWindow.DAILY)

    def test_fortnight_without_periods(self, forecast: Forecast):
        with pytest.raises(ChartDataError, match="daily periods"):
            project(forecast.hourly, ChartWindow.FORTNIGHT)

    def test_fortnight_short_periods(self, forecast: Forecast):
        with pytest.raises(ChartDataError, match="got 13"):
            project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods[:13])

    def test_is_value_error(self):
        assert issubclass(ChartDataError, ValueError)


class TestBinPoints:
    def _series(self, points) -> ChartSeries:
        return ChartSeries(
            window=ChartWindow.DAILY,
            points=tuple(points),
            x_bounds=(0.0, 23.0),
            y_min=0.0,
            y_max=10.0,
            y_labels=("0", "2", "5", "8", "10"),
            x_labels=DAILY_X_LABELS,
        )

    def test_corners(self):
        series = self._series([(0.0, 0.0), (23.0, 10.0)])
        assert bin_points(series, 24, 11) == {(0, 10), (23, 0)}

    def test_shared_cell_collapses(self):
        series = self._series([(0.0, 5.0), (0.2, 5.1), (0.3, 4.9)])
        assert len(bin_points(series, 10, 5)) == 1

    def test_within_grid(self, forecast: Forecast):
        series = project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods)
        cells = bin_points(series, 40, 12)
        assert cells
        assert all(0 <= c < 40 and 0 <= r < 12 for c, r in cells)

    def test_empty_grid(self):
        assert bin_points(self._series([(1.0, 1.0)]), 0, 5) == set()
