"""CLI entry point for the Raijin weather dashboard."""

import argparse
import logging
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError

from raijin.app import Dashboard, run_dashboard
from raijin.assets import MoonArtLibrary, load_logo, load_weather_codes
from raijin.config.defaults import DEFAULT_CONFIG_PATH
from raijin.config.loader import (
    ensure_config_file,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from raijin.config.schema import AppConfig, TemperatureUnit
from raijin.forecast.moon import InsufficientMoonDataError, select_tonight
from raijin.ingest.forecast_fetcher import ForecastFetcher
from raijin.ingest.moon_phase_client import MoonPhaseClient
from raijin.ingest.open_meteo_client import OpenMeteoClient
from raijin.reporting.formatters import format_forecast_json, format_forecast_text

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="raijin",
        description="Terminal weather and moon phase dashboard",
    )
    parser.add_argument(
        "--config", default=str(DEFAULT_CONFIG_PATH), help="Config YAML path"
    )
    parser.add_argument("--log-level", default=None, help="Override log level")

    sub = parser.add_subparsers(dest="command")

    # show
    sub.add_parser("show", help="Open the dashboard (default)")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Print the forecast and exit")
    forecast_p.add_argument("--json", action="store_true", help="JSON output")

    # config show / config set / config path
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    config_sub.add_parser("path", help="Print the config file path")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)
    command = args.command or "show"

    try:
        config_path = ensure_config_file(args.config)
        config = load_config(config_path)
    except (OSError, ValidationError) as e:
        print(f"Error: could not load config {args.config}: {e}", file=sys.stderr)
        return 1

    _setup_logging(config, args.log_level, to_file=command == "show")

    if command == "show":
        return _cmd_show(config)
    elif command == "forecast":
        return _cmd_forecast(config, args)
    elif command == "config":
        return _cmd_config(config, config_path, args)
    else:
        parser.print_help()
        return 1


def _setup_logging(config: AppConfig, level: str | None, to_file: bool) -> None:
    """The dashboard owns the terminal, so it logs to a file instead."""
    kwargs: dict = {
        "level": (level or config.logging.level).upper(),
        "format": LOG_FORMAT,
        "force": True,
    }
    if to_file:
        log_file = Path(config.logging.file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(log_file)
    logging.basicConfig(**kwargs)


def _fetcher(config: AppConfig) -> ForecastFetcher:
    return ForecastFetcher(
        OpenMeteoClient(config.http),
        MoonPhaseClient(config.http),
        load_weather_codes(),
    )


def _unit_symbol(config: AppConfig) -> str:
    if config.display.temperature_unit == TemperatureUnit.FAHRENHEIT:
        return "°F"
    return "°C"


def _cmd_show(config: AppConfig) -> int:
    try:
        forecast, phases = _fetcher(config).fetch(config)
        dashboard = Dashboard(
            forecast,
            moon_phases=phases,
            moon_art=MoonArtLibrary.from_directory(),
            logo=load_logo(),
            unit_symbol=_unit_symbol(config),
        )
        run_dashboard(dashboard)
    except KeyboardInterrupt:
        logger.info("Dashboard interrupted by keyboard")
    except Exception as e:
        logger.exception("Dashboard aborted")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_forecast(config: AppConfig, args) -> int:
    try:
        forecast, phases = _fetcher(config).fetch(config)
    except (httpx.HTTPError, ValueError) as e:
        logger.exception("Forecast fetch failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        tonight = select_tonight(phases)
    except InsufficientMoonDataError as e:
        logger.warning("%s", e)
        tonight = None

    if args.json:
        print(format_forecast_json(forecast, tonight))
    else:
        print(format_forecast_text(forecast, tonight))
    return 0


def _cmd_config(config: AppConfig, config_path: Path, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "path":
        print(config_path)
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, config_path)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config path | config set key=value")
        return 1
