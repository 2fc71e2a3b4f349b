"""Shared fixtures with sample SMHI pmp3g API JSON responses."""

import json

import pytest


def _param(name, unit, value):
    return {"name": name, "levelType": "hl", "level": 2, "unit": unit, "values": [value]}


@pytest.fixture
def sample_entry_raw():
    """A complete time series step as SMHI sends it, every known parameter present."""
    return {
        "validTime": "2024-05-01T13:00:00Z",
        "parameters": [
            _param("spp", "percent", -9),
            _param("pcat", "category", 0),
            _param("pmin", "kg/m2/h", 0.0),
            _param("pmean", "kg/m2/h", 0.0),
            _param("pmax", "kg/m2/h", 0.1),
            _param("pmedian", "kg/m2/h", 0.0),
            _param("tcc_mean", "octas", 3),
            _param("lcc_mean", "octas", 1),
            _param("mcc_mean", "octas", 2),
            _param("hcc_mean", "octas", 0),
            _param("t", "Cel", 21.5),
            _param("msl", "hPa", 1013.2),
            _param("vis", "km", 48.7),
            _param("wd", "degree", 224),
            _param("ws", "m/s", 3.4),
            _param("r", "percent", 56),
            _param("tstm", "percent", 1),
            _param("gust", "m/s", 7.9),
            _param("Wsymb2", "category", 3),
        ],
    }


@pytest.fixture
def sample_response_raw(sample_entry_raw):
    """Full point forecast response with three steps."""
    second = {
        "validTime": "2024-05-01T14:00:00Z",
        "parameters": [
            _param("t", "Cel", 22.1),
            _param("pcat", "category", 3),
            _param("Wsymb2", "category", 18),
        ],
    }
    third = {
        "validTime": "2024-05-01T15:00:00Z",
        "parameters": [
            _param("t", "Cel", -4.0),
            _param("Wsymb2", "category", 27),
        ],
    }
    return {
        "approvedTime": "2024-05-01T12:05:31Z",
        "referenceTime": "2024-05-01T12:00:00Z",
        "geometry": {"type": "Point", "coordinates": [[18.068581, 59.329323]]},
        "timeSeries": [sample_entry_raw, second, third],
    }


@pytest.fixture
def sample_response_bytes(sample_response_raw):
    return json.dumps(sample_response_raw).encode("utf-8")


@pytest.fixture
def sample_config_yaml(tmp_path):
    """Create a temporary YAML config file."""
    yaml_content = """location:
  longitude: 11.9746
  latitude: 57.7089

api:
  base_url: "https://smhi.example.com/api/category/pmp3g/version/2"
  timeout_seconds: 3.5
  check_status: false

output:
  locale: "en-US"
  timezone: "UTC"
  limit: 6
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml_content)
    return str(config_file)
