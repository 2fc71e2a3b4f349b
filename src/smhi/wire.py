"""Raw SMHI pmp3g JSON schema and its decoder.

The dataclasses here mirror the API payload one-to-one; the only change is
snake_case attribute names. Nothing is interpreted yet, timestamps stay
strings and parameters stay a list of name/unit/values tuples.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field

from smhi.errors import DecodeError


@dataclass
class RawParameter:
    """One {name, unit, values} entry of a time series step."""

    name: str
    unit: str
    values: list[float]


@dataclass
class RawTimeSeriesEntry:
    valid_time: str
    parameters: list[RawParameter] = field(default_factory=list)


@dataclass
class RawGeometry:
    type: str
    coordinates: list[list[float]] = field(default_factory=list)


@dataclass
class RawForecastResponse:
    """Top level object of a point forecast response."""

    approved_time: str
    reference_time: str
    geometry: RawGeometry
    time_series: list[RawTimeSeriesEntry] = field(default_factory=list)


def _require(obj: dict, key: str, kind: type, ctx: str):
    """Return obj[key], raising DecodeError if it is missing or mistyped."""
    if key not in obj:
        raise DecodeError(f"{ctx}: missing required field '{key}'")
    value = obj[key]
    if not isinstance(value, kind):
        raise DecodeError(
            f"{ctx}.{key}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _number(value: object, ctx: str) -> float:
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{ctx}: expected number, got {type(value).__name__}")
    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        finite = False
    if not finite:
        raise DecodeError(f"{ctx}: number out of range")
    return value


def _parse_parameter(raw: object, ctx: str) -> RawParameter:
    if not isinstance(raw, dict):
        raise DecodeError(f"{ctx}: expected object, got {type(raw).__name__}")
    name = _require(raw, "name", str, ctx)
    unit = raw.get("unit", "")
    if not isinstance(unit, str):
        raise DecodeError(f"{ctx}.unit: expected str, got {type(unit).__name__}")
    values = _require(raw, "values", list, ctx)
    return RawParameter(
        name=name,
        unit=unit,
        values=[_number(v, f"{ctx}.values[{i}]") for i, v in enumerate(values)],
    )


def _parse_entry(raw: object, ctx: str) -> RawTimeSeriesEntry:
    if not isinstance(raw, dict):
        raise DecodeError(f"{ctx}: expected object, got {type(raw).__name__}")
    params = _require(raw, "parameters", list, ctx)
    return RawTimeSeriesEntry(
        valid_time=_require(raw, "validTime", str, ctx),
        parameters=[
            _parse_parameter(p, f"{ctx}.parameters[{i}]") for i, p in enumerate(params)
        ],
    )


def _parse_geometry(raw: dict) -> RawGeometry:
    ctx = "geometry"
    coordinates = _require(raw, "coordinates", list, ctx)
    pairs: list[list[float]] = []
    for i, pair in enumerate(coordinates):
        if not isinstance(pair, list):
            raise DecodeError(
                f"{ctx}.coordinates[{i}]: expected list, got {type(pair).__name__}"
            )
        pairs.append([_number(v, f"{ctx}.coordinates[{i}]") for v in pair])
    return RawGeometry(type=_require(raw, "type", str, ctx), coordinates=pairs)


def parse_response(data: dict) -> RawForecastResponse:
    """Build a RawForecastResponse from an already JSON-decoded object."""
    if not isinstance(data, dict):
        raise DecodeError(f"response: expected object, got {type(data).__name__}")
    ctx = "response"
    series = _require(data, "timeSeries", list, ctx)
    return RawForecastResponse(
        approved_time=_require(data, "approvedTime", str, ctx),
        reference_time=_require(data, "referenceTime", str, ctx),
        geometry=_parse_geometry(_require(data, "geometry", dict, ctx)),
        time_series=[_parse_entry(e, f"timeSeries[{i}]") for i, e in enumerate(series)],
    )


def decode_response(data: bytes | str) -> RawForecastResponse:
    """Decode a raw response body into the wire structure.

    Decoding is all-or-nothing: either every field has the expected type
    and a RawForecastResponse is returned, or DecodeError is raised.
    """
    try:
        payload = json.loads(data)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors, as is the
        # int digit limit; RecursionError comes from deeply nested bodies.
        raise DecodeError(f"response is not valid JSON: {e}") from e
    return parse_response(payload)
