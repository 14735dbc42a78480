"""Chart projection: hourly samples -> scatter points, axis bounds, tick labels."""

import math
from collections.abc import Sequence

from raijin.forecast.units import parse_temperature
from raijin.models.forecast import DailyPeriod, HourlySample
from raijin.models.screen import ChartSeries, ChartWindow

AXIS_PADDING = 5.0
Y_TICK_COUNT = 5
HOURS_PER_DAY = 24

DAILY_X_LABELS = ("00:00", "06:00", "12:00", "18:00", "23:00")
DAILY_X_BOUNDS = (0.0, 23.0)


class ChartDataError(ValueError):
    """Raised when samples can't be projected; an upstream contract violation."""


def project(
    samples: Sequence[HourlySample],
    window: ChartWindow,
    periods: Sequence[DailyPeriod] = (),
) -> ChartSeries:
    """Project the first ``window`` samples into chart coordinates.

    The daily window plots against hour of day (0-23). The fortnight window
    plots against position in the window, since 14 days share no single
    hour axis; its x labels are one MM-DD per day taken from ``periods``.
    """
    size = int(window)
    if len(samples) < size:
        raise ChartDataError(
            f"{window.name.lower()} chart needs {size} samples, got {len(samples)}"
        )

    points: list[tuple[float, float]] = []
    for index, sample in enumerate(samples[:size]):
        try:
            y = parse_temperature(sample.temperature)
            x = float(sample.hour) if window == ChartWindow.DAILY else float(index)
        except (ValueError, IndexError) as e:
            raise ChartDataError(
                f"Unplottable sample {sample.timestamp} {sample.temperature!r}"
            ) from e
        points.append((x, y))

    temps = [y for _, y in points]
    y_min = math.floor(min(temps) - AXIS_PADDING)
    y_max = math.ceil(max(temps) + AXIS_PADDING)
    step = (y_max - y_min) / (Y_TICK_COUNT - 1)
    y_labels = tuple(f"{y_min + i * step:.0f}" for i in range(Y_TICK_COUNT))

    if window == ChartWindow.DAILY:
        x_bounds = DAILY_X_BOUNDS
        x_labels = DAILY_X_LABELS
    else:
        x_bounds = (0.0, float(size))
        days = size // HOURS_PER_DAY
        if len(periods) < days:
            raise ChartDataError(
                f"{window.name.lower()} chart needs {days} daily periods "
                f"for its labels, got {len(periods)}"
            )
        x_labels = tuple(_month_day(p.date) for p in periods[:days])

    return ChartSeries(
        window=window,
        points=tuple(points),
        x_bounds=x_bounds,
        y_min=float(y_min),
        y_max=float(y_max),
        y_labels=y_labels,
        x_labels=x_labels,
    )


def bin_points(series: ChartSeries, width: int, height: int) -> set[tuple[int, int]]:
    """Map points onto a width x height character grid, row 0 at the top.

    Points landing in the same cell collapse into one mark.
    """
    if width <= 0 or height <= 0:
        return set()
    x_lo, x_hi = series.x_bounds
    cells: set[tuple[int, int]] = set()
    for x, y in series.points:
        col = _scale(x, x_lo, x_hi, width)
        row = height - 1 - _scale(y, series.y_min, series.y_max, height)
        cells.add((col, row))
    return cells


def _scale(value: float, lo: float, hi: float, cells: int) -> int:
    if hi <= lo:
        return 0
    position = (value - lo) / (hi - lo) * (cells - 1)
    return min(cells - 1, max(0, math.floor(position + 0.5)))


def _month_day(date_str: str) -> str:
    parts = date_str.split("-")
    if len(parts) == 3:
        return f"{parts[1]}-{parts[2]}"
    return date_str
