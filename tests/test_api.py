"""Tests for smhi.api."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from smhi.api import BASE_URL, SMHIClient, get_point_forecast
from smhi.errors import DecodeError, HTTPError, NetworkError, TimestampParseError
from smhi.models import PointForecast, WeatherSymbol


@pytest.fixture
def client():
    return SMHIClient(timeout=5)


def _response(content, status_code=200):
    mock_resp = MagicMock()
    mock_resp.content = content
    mock_resp.status_code = status_code
    return mock_resp


class TestForecastUrl:
    def test_default_url(self, client):
        url = client.forecast_url(18.0686, 59.3293)
        assert url == (
            "https://opendata-download-metfcst.smhi.se/api/category/pmp3g/version/2"
            "/geotype/point/lon/18.068600/lat/59.329300/data.json"
        )

    def test_integer_coordinates_formatted_as_float(self, client):
        assert "/lon/16.000000/lat/58.000000/" in client.forecast_url(16, 58)

    def test_custom_base_url_trailing_slash(self):
        client = SMHIClient(base_url="https://smhi.example.com/v2/")
        assert client.forecast_url(1.5, 2.5).startswith(
            "https://smhi.example.com/v2/geotype/point/lon/1.500000/lat/2.500000/"
        )


class TestFetchRaw:
    @patch("smhi.api.requests.Session.get")
    def test_calls_correct_url(self, mock_get, client):
        mock_get.return_value = _response(b"{}")
        client.fetch_raw(18.0686, 59.3293)

        mock_get.assert_called_once()
        url = mock_get.call_args[0][0]
        assert url.startswith(BASE_URL)
        assert url.endswith("/lon/18.068600/lat/59.329300/data.json")

    @patch("smhi.api.requests.Session.get")
    def test_passes_timeout(self, mock_get, client):
        mock_get.return_value = _response(b"{}")
        client.fetch_raw(18.0, 59.0)
        assert mock_get.call_args[1]["timeout"] == 5

    def test_session_headers(self, client):
        assert client.session.headers["Accept"] == "application/json"
        assert "smhi" in client.session.headers["User-Agent"]

    @patch("smhi.api.requests.Session.get")
    def test_timeout(self, mock_get, client):
        mock_get.side_effect = requests.exceptions.Timeout("Connection timed out")
        with pytest.raises(NetworkError) as exc_info:
            client.fetch_raw(18.0, 59.0)
        assert isinstance(exc_info.value.__cause__, requests.exceptions.Timeout)

    @patch("smhi.api.requests.Session.get")
    def test_connection_error(self, mock_get, client):
        mock_get.side_effect = requests.exceptions.ConnectionError("No connection")
        with pytest.raises(NetworkError):
            client.fetch_raw(18.0, 59.0)

    @patch("smhi.api.requests.Session.get")
    def test_http_error_status(self, mock_get, client):
        mock_get.return_value = _response(b"Not Found", status_code=404)
        with pytest.raises(HTTPError) as exc_info:
            client.fetch_raw(18.0, 59.0)
        assert exc_info.value.status_code == 404
        assert "/data.json" in exc_info.value.url

    @pytest.mark.parametrize("status_code", [204, 299])
    @patch("smhi.api.requests.Session.get")
    def test_other_2xx_accepted(self, mock_get, client, status_code):
        mock_get.return_value = _response(b"{}", status_code=status_code)
        assert client.fetch_raw(18.0, 59.0) == b"{}"

    @pytest.mark.parametrize("status_code", [301, 304])
    @patch("smhi.api.requests.Session.get")
    def test_redirect_status_is_error(self, mock_get, client, status_code):
        mock_get.return_value = _response(b"", status_code=status_code)
        with pytest.raises(HTTPError) as exc_info:
            client.fetch_raw(18.0, 59.0)
        assert exc_info.value.status_code == status_code

    @patch("smhi.api.requests.Session.get")
    def test_status_not_checked(self, mock_get):
        mock_get.return_value = _response(b"Not Found", status_code=404)
        client = SMHIClient(check_status=False)
        assert client.fetch_raw(18.0, 59.0) == b"Not Found"


class TestGetPointForecast:
    @patch("smhi.api.requests.Session.get")
    def test_returns_point_forecast(self, mock_get, client, sample_response_bytes):
        mock_get.return_value = _response(sample_response_bytes)

        result = client.get_point_forecast(18.0686, 59.3293)
        assert isinstance(result, PointForecast)
        assert len(result.time_series) == 3
        assert result.time_series[0].air_temperature == 21.5
        assert result.time_series[2].weather_symbol == WeatherSymbol.HEAVY_SNOWFALL

    @patch("smhi.api.requests.Session.get")
    def test_unchecked_error_body_is_decode_error(self, mock_get):
        mock_get.return_value = _response(b"<html>Bad Gateway</html>", status_code=502)
        client = SMHIClient(check_status=False)
        with pytest.raises(DecodeError):
            client.get_point_forecast(18.0, 59.0)

    @patch("smhi.api.requests.Session.get")
    def test_bad_timestamp(self, mock_get, client, sample_response_raw):
        sample_response_raw["referenceTime"] = "2024-05-01T12:00:00"
        mock_get.return_value = _response(json.dumps(sample_response_raw).encode())
        with pytest.raises(TimestampParseError):
            client.get_point_forecast(18.0, 59.0)

    @patch("smhi.api.requests.Session.get")
    def test_module_level_function(self, mock_get, sample_response_bytes):
        mock_get.return_value = _response(sample_response_bytes)

        result = get_point_forecast(18.0686, 59.3293, timeout=2.0)
        assert len(result.time_series) == 3
        assert mock_get.call_args[1]["timeout"] == 2.0
        assert "/lon/18.068600/lat/59.329300/" in mock_get.call_args[0][0]
