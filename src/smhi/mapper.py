"""Map the raw SMHI wire structure onto the PointForecast domain model."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable

from smhi.descriptions import precipitation_category_description, weather_symbol_description
from smhi.errors import TimestampParseError
from smhi.models import Forecast, Geometry, PointForecast, PrecipitationCategory, WeatherSymbol
from smhi.wire import RawForecastResponse, RawTimeSeriesEntry

logger = logging.getLogger(__name__)

# RFC 3339 date-time; the UTC offset is mandatory. SMHI sends "2024-05-01T12:00:00Z".
_TIMESTAMP_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:([0-5]\d))",
    re.ASCII,
)


def parse_timestamp(value: str, field: str = "timestamp") -> datetime:
    """Parse an RFC 3339 timestamp into a timezone-aware datetime.

    Fractional seconds beyond microseconds are truncated.
    """
    match = _TIMESTAMP_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise TimestampParseError(value, field)
    base, fraction, offset, _ = match.groups()
    if offset == "Z":
        offset = "+00:00"
    micros = (fraction or "0")[:6].ljust(6, "0")
    try:
        return datetime.fromisoformat(f"{base}.{micros}{offset}")
    except ValueError as e:
        raise TimestampParseError(value, field) from e


def to_uint8(value: float) -> int:
    """Truncate toward zero and wrap into 0..255.

    Out-of-range values wrap around like a C narrowing cast
    (256 -> 0, -1 -> 255, 300.7 -> 44); nothing is raised.
    """
    return int(value) & 0xFF


def to_int8(value: float) -> int:
    """Truncate toward zero and wrap into -128..127."""
    return ((int(value) + 0x80) & 0xFF) - 0x80


def _enum_or_code(enum_cls, value: float):
    """Enum member for a known code, otherwise the raw truncated int."""
    code = int(value)
    try:
        return enum_cls(code)
    except ValueError:
        return code


def _set_precipitation_category(f: Forecast, value: float) -> None:
    f.precipitation_category = _enum_or_code(PrecipitationCategory, value)
    f.precipitation_category_description = precipitation_category_description(
        f.precipitation_category
    )


def _set_weather_symbol(f: Forecast, value: float) -> None:
    f.weather_symbol = _enum_or_code(WeatherSymbol, value)
    f.weather_symbol_description = weather_symbol_description(f.weather_symbol)


def _float_setter(attr: str) -> Callable[[Forecast, float], None]:
    def setter(f: Forecast, value: float) -> None:
        setattr(f, attr, float(value))
    return setter


def _uint8_setter(attr: str) -> Callable[[Forecast, float], None]:
    def setter(f: Forecast, value: float) -> None:
        setattr(f, attr, to_uint8(value))
    return setter


def _int8_setter(attr: str) -> Callable[[Forecast, float], None]:
    def setter(f: Forecast, value: float) -> None:
        setattr(f, attr, to_int8(value))
    return setter


# Parameter code -> field assignment. Codes not listed here are ignored.
PARAMETER_SETTERS: dict[str, Callable[[Forecast, float], None]] = {
    "msl": _float_setter("air_pressure"),
    "t": _float_setter("air_temperature"),
    "vis": _float_setter("horizontal_visibility"),
    "wd": _uint8_setter("wind_direction"),
    "ws": _float_setter("wind_speed"),
    "r": _uint8_setter("relative_humidity"),
    "tstm": _uint8_setter("thunder_probability"),
    "tcc_mean": _uint8_setter("mean_total_cloud_cover"),
    "lcc_mean": _uint8_setter("mean_low_level_cloud_cover"),
    "mcc_mean": _uint8_setter("mean_medium_level_cloud_cover"),
    "hcc_mean": _uint8_setter("mean_high_level_cloud_cover"),
    "gust": _float_setter("wind_gust_speed"),
    "pmin": _float_setter("minimum_precipitation_intensity"),
    "pmax": _float_setter("maximum_precipitation_intensity"),
    "pmean": _float_setter("mean_precipitation_intensity"),
    "pmedian": _float_setter("median_precipitation_intensity"),
    "spp": _int8_setter("percent_of_precipitation_in_frozen_form"),
    "pcat": _set_precipitation_category,
    "Wsymb2": _set_weather_symbol,
}


def to_forecast(entry: RawTimeSeriesEntry) -> Forecast:
    """Fold one time series entry's parameter list into a Forecast."""
    forecast = Forecast(timestamp=parse_timestamp(entry.valid_time, "validTime"))
    for param in entry.parameters:
        setter = PARAMETER_SETTERS.get(param.name)
        if setter is None:
            logger.debug("Ignoring unknown parameter %r", param.name)
            continue
        if not param.values:
            continue
        # Point forecasts carry a single value per parameter
        setter(forecast, param.values[0])
    return forecast


def to_point_forecast(raw: RawForecastResponse) -> PointForecast:
    """Convert a decoded API response into a PointForecast.

    Any invalid timestamp aborts the whole conversion with
    TimestampParseError; no partial result is returned. Entries keep the
    order in which the API sent them.
    """
    approved = parse_timestamp(raw.approved_time, "approvedTime")
    reference = parse_timestamp(raw.reference_time, "referenceTime")
    geometry = Geometry(
        type=raw.geometry.type,
        coordinates=[list(pair) for pair in raw.geometry.coordinates],
    )
    series = [to_forecast(entry) for entry in raw.time_series]
    logger.debug("Mapped %d forecast step(s) approved at %s", len(series), approved.isoformat())
    return PointForecast(
        approved_time=approved,
        reference_time=reference,
        geometry=geometry,
        time_series=series,
    )
