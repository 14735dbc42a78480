"""Output formatters for the non-interactive forecast command."""

import json
from dataclasses import asdict

from raijin.forecast.units import format_temperature
from raijin.models.forecast import Forecast, MoonPhaseEntry


def format_forecast_text(f: Forecast, tonight: MoonPhaseEntry | None = None) -> str:
    """Plain text summary: right now, tonight's moon, then one line per day."""
    lines = [
        f"=== Right Now | {f.periods[0].date if f.periods else '--'} ===",
        f"Current: {format_temperature(f.current.temperature)} "
        f"(feels like {format_temperature(f.current.apparent_temperature)})",
    ]
    if f.periods:
        today = f.periods[0]
        lines.append(
            f"Today: {today.weather}, high {today.temperature_max}, "
            f"low {today.temperature_min}, rain {today.precipitation_probability}"
        )
    if tonight is not None:
        lines.append(f"Moon tonight: {tonight.phase} ({tonight.illumination})")
    lines.append("")
    for p in f.periods:
        weekday = p.weekday[:3] or "   "
        lines.append(
            f"{weekday} {p.date}  {p.temperature_max:>7} / {p.temperature_min:<7} "
            f"{p.precipitation_probability:>4}  {p.weather}"
        )
    return "\n".join(lines)


def format_forecast_json(f: Forecast, tonight: MoonPhaseEntry | None = None) -> str:
    """JSON document for programmatic consumption."""
    data = {
        "current": asdict(f.current),
        "periods": [asdict(p) for p in f.periods],
        "hourly": [asdict(h) for h in f.hourly],
        "moon_tonight": asdict(tonight) if tonight is not None else None,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
