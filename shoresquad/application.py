"""Wire the view and weather client together and drive the startup sequence."""
from __future__ import annotations

import asyncio
from typing import Optional

import requests

from shoresquad.config import WidgetConfig
from shoresquad.document import Document
from shoresquad.view import ViewController
from shoresquad.weather_client import WeatherClient
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="application")

ERROR_MESSAGE = "Could not load weather data. Please try again later."


class Application:
    """Orchestration only: loading overlay, clock task, one forecast load."""

    def __init__(self, config: WidgetConfig, view: ViewController, client: WeatherClient) -> None:
        self.config = config
        self.view = view
        self.client = client
        self._clock_task: Optional[asyncio.Task] = None

    @classmethod
    def create(
        cls,
        config: WidgetConfig,
        document: Document,
        session: Optional[requests.Session] = None,
    ) -> "Application":
        """Build a view over `document` and a client with its own fresh cache."""
        view = ViewController(document, fade_delay_ms=config.loading_fade_ms)
        client = WeatherClient(config, session=session)
        return cls(config, view, client)

    async def init(self) -> None:
        """Show loading, start the clock, load and render the forecast, hide loading."""
        self.view.show_loading()
        try:
            self.start_time_updates()
            weather_data = await self.client.get_weather()
            self.view.update_weather(weather_data)
        except Exception:
            logger.exception("Failed to load weather data")
            self.view.show_error(ERROR_MESSAGE)
        finally:
            self.view.hide_loading()

    def start_time_updates(self) -> None:
        """Render the time now and every `clock_interval_ms` until shutdown."""
        if self._clock_task is not None:
            self._clock_task.cancel()
        self.view.update_time()
        self._clock_task = asyncio.create_task(self._tick(), name="shoresquad-clock")

    async def _tick(self) -> None:
        interval = self.config.clock_interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            self.view.update_time()

    @property
    def running(self) -> bool:
        return self._clock_task is not None and not self._clock_task.done()

    async def shutdown(self) -> None:
        """Stop the clock and drop any pending overlay transition."""
        task, self._clock_task = self._clock_task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.view.dispose()
        logger.debug("Application shut down")
