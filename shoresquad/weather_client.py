"""Fetch the 24-hour forecast, serving repeat requests from a TimedCache."""
from __future__ import annotations

import asyncio
from typing import Any, Optional

import requests

from shoresquad.cache import TimedCache
from shoresquad.config import WidgetConfig
from shoresquad.errors import FetchError, NetworkError, ParseError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_client")

CACHE_KEY = "weather"


class WeatherClient:
    """Async facade over a blocking requests session with a short-lived cache."""

    def __init__(
        self,
        config: WidgetConfig,
        cache: Optional[TimedCache] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else TimedCache(config.cache_duration_ms)
        self.session = session if session is not None else requests.Session()

    async def get_weather(self) -> Any:
        """
        Return the forecast payload, from cache when fresh, otherwise from the endpoint.

        Raises NetworkError, FetchError or ParseError; nothing is cached on failure.
        Concurrent callers that miss the cache each issue their own request.
        """
        cached = self.cache.get(CACHE_KEY)
        if cached is not None:
            logger.debug("Serving forecast from cache")
            return cached

        url = self.config.endpoint_url
        logger.info("Fetching forecast", extra={"url": url})
        try:
            data = await asyncio.to_thread(self._fetch, url)
        except Exception as exc:
            logger.error("Weather fetch error: %s", exc, extra={"url": url})
            raise

        self.cache.set(CACHE_KEY, data)
        logger.info("Fetched forecast", extra={"url": url})
        return data

    def _fetch(self, url: str) -> Any:
        """Blocking GET + decode, run in a worker thread."""
        try:
            resp = self.session.get(url, timeout=self.config.request_timeout_seconds)
        except requests.RequestException as exc:
            raise NetworkError(url) from exc

        # only 2xx counts; an unfollowed 3xx (e.g. 304) has no forecast body
        if not 200 <= resp.status_code < 300:
            raise FetchError(resp.status_code, url)

        try:
            return resp.json()
        except ValueError as exc:
            # requests.JSONDecodeError subclasses ValueError
            raise ParseError(url) from exc
