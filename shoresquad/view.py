"""Render forecast, error panel, loading overlay and clock into the document."""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from pydantic import ValidationError

from shoresquad.document import Document
from shoresquad.errors import RenderError
from shoresquad.models import ForecastPayload
from shoresquad.templating import render as render_template
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="view")


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def format_clock(instant: datetime) -> str:
    """Format an aware datetime as "YYYY-MM-DD HH:MM:SS UTC" (fractions dropped)."""
    return instant.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S") + " UTC"


class ViewController:
    """
    Pure rendering against three anchors resolved once at construction.

    Anchors missing from the document are not guarded against; the first
    operation touching one fails.
    """

    def __init__(
        self,
        document: Document,
        *,
        fade_delay_ms: int = 300,
        now: Callable[[], datetime] = utc_now,
        reload_action: str = "/reload",
    ) -> None:
        self.weather_widget = document.query_selector(".weather-widget")
        self.loading_overlay = document.get_element_by_id("loading-overlay")
        self.time_display = document.query_selector(".current-time")
        self.fade_delay_ms = fade_delay_ms
        self.reload_action = reload_action
        self._now = now
        self._pending_hide: Optional[asyncio.TimerHandle] = None

    def show_loading(self) -> None:
        # a hide scheduled before this show must not collapse the overlay later
        self._cancel_pending_hide()
        self.loading_overlay.style["display"] = "flex"
        self.loading_overlay.style["opacity"] = "1"

    def hide_loading(self) -> None:
        """Start the fade now; drop the overlay from layout after `fade_delay_ms`.

        Returns immediately. Must be called from a running event loop.
        """
        self._cancel_pending_hide()
        self.loading_overlay.style["opacity"] = "0"
        loop = asyncio.get_running_loop()
        self._pending_hide = loop.call_later(self.fade_delay_ms / 1000, self._collapse_overlay)

    def _collapse_overlay(self) -> None:
        self._pending_hide = None
        self.loading_overlay.style["display"] = "none"

    def _cancel_pending_hide(self) -> None:
        if self._pending_hide is not None:
            self._pending_hide.cancel()
            self._pending_hide = None

    @property
    def hide_pending(self) -> bool:
        return self._pending_hide is not None

    def update_weather(self, data: Any) -> None:
        """Replace the widget contents with a card for `items[0].general`.

        Raises RenderError if the payload lacks any of the rendered fields.
        """
        try:
            payload = data if isinstance(data, ForecastPayload) else ForecastPayload.model_validate(data)
        except ValidationError as exc:
            raise RenderError(f"Forecast payload is missing fields: {exc.error_count()} error(s)") from exc

        forecast = payload.general
        self.weather_widget.inner_html = str(render_template("weather_card.html.j2", forecast=forecast))
        logger.debug("Rendered forecast", extra={"forecast": forecast.forecast})

    def show_error(self, message: str) -> None:
        """Replace the widget contents with `message` and a Retry control that restarts the widget."""
        self.weather_widget.inner_html = str(
            render_template("error_panel.html.j2", message=message, reload_action=self.reload_action)
        )

    def update_time(self) -> None:
        self.time_display.text_content = format_clock(self._now())

    def dispose(self) -> None:
        """Cancel any scheduled overlay collapse."""
        self._cancel_pending_hide()
