"""Error kinds raised while loading or rendering the forecast."""
from __future__ import annotations


class WeatherError(Exception):
    """Base class for every failure the application turns into the error panel."""


class NetworkError(WeatherError):
    """The request never completed (connection, DNS, timeout)."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Network failure requesting {url}")
        self.url = url


class FetchError(WeatherError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int | None, url: str) -> None:
        super().__init__(f"Weather API error: HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ParseError(WeatherError):
    """The response body could not be decoded as JSON."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not decode weather response from {url}")
        self.url = url


class RenderError(WeatherError):
    """The payload lacks a field the weather card needs."""
