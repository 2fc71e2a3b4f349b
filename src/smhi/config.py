"""Configuration loading: defaults → YAML overlay → argparse overlay."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from smhi.api import BASE_URL
from smhi.models import LOCALES, SWEDISH


@dataclass
class LocationConfig:
    """Coordinate to fetch the point forecast for.

    Attributes:
        longitude: Longitude in decimal degrees (WGS84).
        latitude: Latitude in decimal degrees (WGS84).
    """

    # Stockholm city centre
    longitude: float = 18.0686
    latitude: float = 59.3293


@dataclass
class ApiConfig:
    """HTTP settings for the SMHI client.

    Attributes:
        base_url: pmp3g API root, up to and including the version segment.
        timeout_seconds: Connect/read timeout for the forecast request.
        check_status: Raise HTTPError on non-2xx responses instead of
            attempting to decode the body.
    """

    base_url: str = BASE_URL
    timeout_seconds: float = 10.0
    check_status: bool = True


@dataclass
class OutputConfig:
    """How the command line prints forecasts.

    Attributes:
        locale: Description language, "sv-SE" or "en-US".
        timezone: IANA zone timestamps are converted to before printing.
        limit: Print at most this many forecast steps; 0 prints all.
    """

    locale: str = SWEDISH
    timezone: str = "Europe/Stockholm"
    limit: int = 0


@dataclass
class Config:
    """Top-level configuration.

    Assembled from three layers with increasing priority:
      1. Hardcoded defaults (dataclass field values)
      2. YAML file overlay (config.yaml or --config path)
      3. CLI argument overlay (--lon, --lat, --locale, ...)
    """

    location: LocationConfig = field(default_factory=LocationConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    # CLI-only
    debug: bool = False


def _apply_yaml(config: Config, yaml_path: str) -> None:
    """Overlay YAML config values onto the Config object."""
    if not os.path.exists(yaml_path):
        return

    with open(yaml_path, "r") as f:
        data = yaml.safe_load(f)

    if not data:
        return

    sections = (
        ("location", config.location, ("longitude", "latitude")),
        ("api", config.api, ("base_url", "timeout_seconds", "check_status")),
        ("output", config.output, ("locale", "timezone", "limit")),
    )
    for name, target, keys in sections:
        section = data.get(name) or {}
        for key in keys:
            if key in section:
                setattr(target, key, section[key])


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser. Every option overlays the YAML config."""
    parser = argparse.ArgumentParser(
        prog="smhi",
        description="Print the SMHI point forecast for a coordinate",
    )
    parser.add_argument("--config", type=str, help="Path to YAML config file")
    parser.add_argument("--lon", type=float, help="Longitude in decimal degrees")
    parser.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("--locale", choices=LOCALES, help="Description language")
    parser.add_argument("--timezone", type=str, help="IANA timezone for printed timestamps")
    parser.add_argument("--limit", type=int, help="Number of forecast steps to print (0 = all)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser


def _apply_args(config: Config, args: argparse.Namespace) -> None:
    """Overlay CLI arguments onto the Config object."""
    if args.lon is not None:
        config.location.longitude = args.lon
    if args.lat is not None:
        config.location.latitude = args.lat
    if args.locale:
        config.output.locale = args.locale
    if args.timezone:
        config.output.timezone = args.timezone
    if args.limit is not None:
        config.output.limit = args.limit
    if args.timeout is not None:
        config.api.timeout_seconds = args.timeout
    config.debug = args.debug


def load_config(
    yaml_path: str | None = None,
    cli_args: list[str] | None = None,
) -> Config:
    """Load config: defaults → YAML overlay → argparse overlay.

    Args:
        yaml_path: Path to YAML config file. Defaults to config.yaml in project root.
        cli_args: CLI arguments list. None means use sys.argv.

    Raises:
        ValueError: The configured locale is not one of LOCALES, or the
            timezone is not a known IANA zone.
    """
    config = Config()

    parser = _build_parser()
    args = parser.parse_args(cli_args)

    # Default YAML path: config.yaml in project root (three levels up from
    # this file). CLI --config overrides.
    if yaml_path is None:
        if args.config:
            yaml_path = args.config
        else:
            yaml_path = os.path.join(
                Path(__file__).resolve().parent.parent.parent, "config.yaml"
            )

    _apply_yaml(config, yaml_path)
    _apply_args(config, args)

    if config.output.locale not in LOCALES:
        raise ValueError(
            f"Unsupported locale {config.output.locale!r}, expected one of {', '.join(LOCALES)}"
        )
    try:
        ZoneInfo(config.output.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone {config.output.timezone!r}") from e
    return config
