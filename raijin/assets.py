"""Packaged static assets: weather code table, logo, moon phase art."""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from raijin.forecast.weather_codes import WeatherCodeTable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
WEATHER_CODES_PATH = DATA_DIR / "weather_codes.json"
LOGO_PATH = DATA_DIR / "logo.txt"
MOON_ART_DIR = DATA_DIR / "moon_art"


def phase_slug(phase: str) -> str:
    """'Waxing Gibbous' -> 'waxing_gibbous'."""
    return "_".join(phase.lower().split())


class MoonArtLibrary:
    """ASCII art keyed by moon phase name."""

    def __init__(self, art: Mapping[str, str]):
        self._art = MappingProxyType({phase_slug(k): v for k, v in art.items()})

    @classmethod
    def from_directory(cls, path: str | Path = MOON_ART_DIR) -> "MoonArtLibrary":
        art = {p.stem: p.read_text() for p in sorted(Path(path).glob("*.txt"))}
        logger.debug("Loaded %d moon phase art files from %s", len(art), path)
        return cls(art)

    def lookup(self, phase: str) -> str | None:
        return self._art.get(phase_slug(phase))


def load_weather_codes(path: str | Path = WEATHER_CODES_PATH) -> WeatherCodeTable:
    return WeatherCodeTable.from_file(path)


def load_logo(path: str | Path = LOGO_PATH) -> str:
    return Path(path).read_text()
