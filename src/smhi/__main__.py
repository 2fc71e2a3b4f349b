"""Entry point for smhi."""

import logging
import sys
from zoneinfo import ZoneInfo

from smhi.api import SMHIClient
from smhi.config import load_config
from smhi.errors import SMHIError


def format_forecast(forecast, locale, tz):
    """One output line: local timestamp, symbol description, temperature."""
    ts = forecast.timestamp.astimezone(tz).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{ts} {forecast.describe(locale)} {forecast.air_temperature} C"


def run_forecast(config):
    """Fetch the configured point forecast and print one line per step."""
    client = SMHIClient(
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
        check_status=config.api.check_status,
    )
    try:
        forecast = client.get_point_forecast(config.location.longitude, config.location.latitude)
    finally:
        client.close()

    tz = ZoneInfo(config.output.timezone)
    steps = forecast.time_series
    if config.output.limit > 0:
        steps = steps[: config.output.limit]
    for step in steps:
        print(format_forecast(step, config.output.locale, tz))


def main():
    """CLI entry point.

    Loads configuration (defaults -> YAML -> CLI args), sets up logging
    to stderr and prints the forecast to stdout. Exits with status 1 when
    the forecast cannot be fetched or understood.
    """
    try:
        config = load_config()
    except ValueError as e:
        print(f"smhi: {e}", file=sys.stderr)
        sys.exit(1)

    # Log to stderr so stdout only carries forecast lines.
    level = logging.DEBUG if config.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    logger = logging.getLogger(__name__)
    logger.debug(
        "Config loaded: lon=%s lat=%s locale=%s",
        config.location.longitude, config.location.latitude, config.output.locale,
    )

    try:
        run_forecast(config)
    except KeyboardInterrupt:
        sys.exit(0)
    except SMHIError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
