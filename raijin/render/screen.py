"""Render pass: Forecast + viewport -> paint instructions for one frame."""

import logging
from collections.abc import Sequence

from raijin.assets import MoonArtLibrary
from raijin.forecast.moon import InsufficientMoonDataError, select_tonight
from raijin.forecast.units import format_temperature
from raijin.models.forecast import DailyPeriod, Forecast, MoonPhaseEntry
from raijin.models.screen import ChartWindow, Color, PaintOp, Rect
from raijin.render.chart import project
from raijin.render.layout import DAY_CARD_SLOTS, inset, partition
from raijin.render.paint import Canvas
from raijin.render.widgets import (
    draw_box,
    draw_chart,
    draw_paragraph,
    draw_table,
)

logger = logging.getLogger(__name__)

MOON_PLACEHOLDER = "Moon phase unavailable"


def render(
    forecast: Forecast,
    viewport: Rect,
    moon_phases: Sequence[MoonPhaseEntry] = (),
    moon_art: MoonArtLibrary | None = None,
    logo: str = "",
    unit_symbol: str = "°C",
) -> list[PaintOp]:
    """Paint the whole dashboard.

    Chart errors propagate; a short moon phase series only blanks the moon
    pane.
    """
    regions = partition(viewport)
    canvas = Canvas()

    _render_right_now(canvas, regions["quick_stats"], forecast)
    _render_moon(canvas, regions["moon_phase"], moon_phases, moon_art)
    draw_paragraph(canvas, regions["logo"], logo, Color.RED)

    today = forecast.hours_on(forecast.periods[0].date) if forecast.periods else []
    draw_chart(
        canvas,
        regions["daily_chart"],
        project(today, ChartWindow.DAILY),
        " Today's Temps ",
        "Time (HH:MM)",
        f"Temp ({unit_symbol})",
    )
    draw_chart(
        canvas,
        regions["fortnight_chart"],
        project(forecast.hourly, ChartWindow.FORTNIGHT, forecast.periods),
        " Fortnight's Temps ",
        "Days",
        f"Temp ({unit_symbol})",
    )

    draw_box(canvas, regions["forecast"], " 4-cast ", Color.LIGHT_MAGENTA)
    draw_box(canvas, regions["forecast_inner"])
    for slot, period in zip(DAY_CARD_SLOTS, forecast.periods[1:5]):
        _render_day_card(canvas, regions[slot], period)

    return canvas.ops


def _render_right_now(canvas: Canvas, area: Rect, forecast: Forecast) -> None:
    inner = draw_box(canvas, area, " Right Now ", Color.LIGHT_BLUE)
    if not forecast.periods:
        return
    today = forecast.periods[0]
    rows = [
        ("Current Temp:", format_temperature(forecast.current.temperature)),
        ("Feels Like:", format_temperature(forecast.current.apparent_temperature)),
        ("High:", today.temperature_max),
        ("Low:", today.temperature_min),
        ("Weather Summary:", today.weather),
        ("Chance of Rain:", today.precipitation_probability),
    ]
    # One column of padding each side, two rows on top
    draw_table(canvas, inset(inner, 1, 2, 1, 1), rows)


def _render_moon(
    canvas: Canvas,
    area: Rect,
    phases: Sequence[MoonPhaseEntry],
    moon_art: MoonArtLibrary | None,
) -> None:
    inner = draw_box(canvas, area, " Tonight's Moon Phase ", Color.LIGHT_YELLOW)
    try:
        tonight = select_tonight(phases)
    except InsufficientMoonDataError as e:
        logger.warning("Moon pane left blank: %s", e)
        draw_paragraph(canvas, inner, MOON_PLACEHOLDER, Color.GRAY)
        return

    art = moon_art.lookup(tonight.phase) if moon_art is not None else None
    caption = f"{tonight.phase} ({tonight.illumination})"
    if art is None:
        logger.warning("No art for moon phase %r", tonight.phase)
        draw_paragraph(canvas, inner, caption)
        return
    draw_paragraph(canvas, inner, f"{art.rstrip()}\n\n{caption}")


def _render_day_card(canvas: Canvas, area: Rect, period: DailyPeriod) -> None:
    inner = draw_box(canvas, area, f" ({period.weekday}) {period.date} ")
    rows = [
        ("High:", period.temperature_max),
        ("Apparent High:", period.apparent_temperature_max),
        ("Low:", period.temperature_min),
        ("Apparent Low:", period.apparent_temperature_min),
        ("Weather:", period.weather),
        ("Chance of Rain:", period.precipitation_probability),
    ]
    draw_table(canvas, inset(inner, 0, 1, 0, 0), rows)
