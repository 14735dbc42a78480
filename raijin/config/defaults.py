"""Default config location and the environment variables that override it."""

from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "raijin"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"

# Environment variable -> location field
LOCATION_ENV_OVERRIDES: dict[str, str] = {
    "LATITUDE": "latitude",
    "LONGITUDE": "longitude",
    "TIMEZONE": "timezone",
}
