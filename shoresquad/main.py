"""FastAPI host that serves the widget document and restarts it on Retry."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

import requests
from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from .application import Application
from .config import WidgetConfig, load_config
from .document import Document
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="host")


class WidgetHost:
    """Owns the current document and application; `reload` rebuilds both."""

    def __init__(self, config: WidgetConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session
        # empty layout until the first start(); served as-is before the lifespan runs
        self.document: Document = Document.default()
        self.application: Optional[Application] = None
        self._init_task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        """Stop whatever is running, build a fresh document and application, begin startup."""
        async with self._lock:
            await self._stop()
            self.document = Document.default()
            self.application = Application.create(self.config, self.document, session=self.session)
            self._init_task = asyncio.create_task(self.application.init(), name="shoresquad-init")
        logger.info("Widget started", extra={"endpoint_url": self.config.endpoint_url})

    async def reload(self) -> None:
        """Throw away all widget state (cache included) and start over."""
        logger.info("Reloading widget")
        await self.start()

    async def wait_until_loaded(self) -> None:
        if self._init_task is not None:
            await self._init_task

    async def shutdown(self) -> None:
        async with self._lock:
            await self._stop()

    async def _stop(self) -> None:
        """Cancel an in-flight load and stop the current application; caller holds the lock."""
        task, self._init_task = self._init_task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        if self.application is not None:
            await self.application.shutdown()


def create_app(config: Optional[WidgetConfig] = None, session: Optional[requests.Session] = None) -> FastAPI:
    """Build the FastAPI app; the widget starts with the app's lifespan."""
    config = config or load_config()
    host = WidgetHost(config, session=session)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await host.start()
        try:
            yield
        finally:
            await host.shutdown()

    app = FastAPI(title=config.page_title, lifespan=lifespan)
    app.state.host = host

    @app.get("/", response_class=HTMLResponse)
    async def serve_widget(request: Request):
        """Serve the document in its current state."""
        widget_host: WidgetHost = request.app.state.host
        return HTMLResponse(widget_host.document.render(title=config.page_title))

    @app.post("/reload")
    async def reload_widget(request: Request):
        """Target of the Retry control."""
        await request.app.state.host.reload()
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    return app


app = create_app()
