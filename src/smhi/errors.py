"""Exceptions raised by the SMHI forecast client."""

from __future__ import annotations


class SMHIError(Exception):
    """Base class for every error raised by this package."""


class NetworkError(SMHIError):
    """Transport failure: DNS, connection refused, timeout, broken read."""


class HTTPError(SMHIError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"SMHI API returned HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class DecodeError(SMHIError, ValueError):
    """Response body is not JSON or does not have the point forecast shape."""


class TimestampParseError(SMHIError, ValueError):
    """A timestamp is not an ISO 8601 date-time with an explicit UTC offset."""

    def __init__(self, value: object, field: str) -> None:
        super().__init__(f"invalid {field} timestamp: {value!r}")
        self.value = value
        self.field = field
