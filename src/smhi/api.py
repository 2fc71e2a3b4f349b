"""SMHI open data point forecast client."""

from __future__ import annotations

import logging

import requests

from smhi.errors import HTTPError, NetworkError
from smhi.mapper import to_point_forecast
from smhi.models import PointForecast
from smhi.wire import decode_response

logger = logging.getLogger(__name__)

# SMHI Open Data Meteorological Forecasts, pmp3g version 2. Public, no
# authentication. Docs: https://opendata.smhi.se/apidocs/metfcst/
BASE_URL = "https://opendata-download-metfcst.smhi.se/api/category/pmp3g/version/2"
USER_AGENT = "smhi-forecast (+https://opendata.smhi.se)"


class SMHIClient:
    """Client for the SMHI point forecast endpoint."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
        check_status: bool = True,
    ) -> None:
        """Initialize the SMHI API client.

        Creates a requests.Session so repeated lookups reuse the connection.
        The session sends Accept: application/json and a User-Agent header.

        Args:
            base_url: API root up to and including the version segment.
            timeout: Seconds to wait for connect and read on every request.
            check_status: Raise HTTPError on non-2xx responses. When False the
                body is decoded anyway and a non-forecast body surfaces as
                DecodeError.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.check_status = check_status
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})

    def forecast_url(self, longitude: float, latitude: float) -> str:
        """URL of the point forecast for a coordinate.

        Coordinates are written as fixed-point with six decimals, the
        format the API's own examples use.
        """
        return f"{self.base_url}/geotype/point/lon/{longitude:f}/lat/{latitude:f}/data.json"

    def fetch_raw(self, longitude: float, latitude: float) -> bytes:
        """GET the point forecast and return the undecoded response body."""
        url = self.forecast_url(longitude, latitude)
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"request to {url} failed: {e}") from e
        if self.check_status and not 200 <= resp.status_code < 300:
            raise HTTPError(resp.status_code, url)
        return resp.content

    def get_point_forecast(self, longitude: float, latitude: float) -> PointForecast:
        """Fetch, decode and map the point forecast for a coordinate."""
        raw = decode_response(self.fetch_raw(longitude, latitude))
        return to_point_forecast(raw)

    def close(self) -> None:
        self.session.close()


def get_point_forecast(longitude: float, latitude: float, timeout: float = 10.0) -> PointForecast:
    """Fetch the SMHI point forecast for a longitude/latitude pair.

    Raises NetworkError, HTTPError, DecodeError or TimestampParseError;
    nothing is retried.
    """
    client = SMHIClient(timeout=timeout)
    try:
        return client.get_point_forecast(longitude, latitude)
    finally:
        client.close()
