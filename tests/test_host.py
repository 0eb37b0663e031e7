import asyncio
import threading
import unittest

from shoresquad.config import WidgetConfig
from shoresquad.main import WidgetHost


def _make_payload():
    return {
        "items": [
            {
                "general": {
                    "forecast": "Fair (Day)",
                    "temperature": {"low": 26, "high": 34},
                    "relative_humidity": {"low": 55, "high": 85},
                    "wind": {"speed": {"low": 10, "high": 20}},
                }
            }
        ]
    }


class DummyResp:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload


class DummySession:
    def __init__(self):
        self.calls = 0

    def get(self, url, **kwargs):
        self.calls += 1
        return DummyResp(_make_payload())


class BlockingSession:
    """Holds the request open until `release` is set."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()

    def get(self, url, **kwargs):
        self.started.set()
        self.release.wait(5)
        return DummyResp(_make_payload())


def _pending_clock_tasks():
    return [t for t in asyncio.all_tasks() if t.get_name() == "shoresquad-clock" and not t.done()]


class TestWidgetHost(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.config = WidgetConfig(loading_fade_ms=20, clock_interval_ms=10)

    async def test_document_exists_before_start(self):
        host = WidgetHost(self.config, session=DummySession())
        self.assertIsNotNone(host.document.query_selector(".weather-widget"))
        self.assertIsNone(host.application)

    async def test_overlapping_reloads_leave_no_clock_running(self):
        host = WidgetHost(self.config, session=DummySession())
        await host.start()

        await asyncio.gather(host.reload(), host.reload())
        await host.wait_until_loaded()
        self.assertEqual(len(_pending_clock_tasks()), 1)

        await host.shutdown()
        await asyncio.sleep(0.05)
        self.assertEqual(_pending_clock_tasks(), [])

    async def test_start_replaces_running_application(self):
        host = WidgetHost(self.config, session=DummySession())
        await host.start()
        await host.wait_until_loaded()
        first = host.application

        await host.start()
        await host.wait_until_loaded()

        self.assertFalse(first.running)
        self.assertTrue(host.application.running)
        await host.shutdown()

    async def test_shutdown_during_fetch_stops_clock_and_fade(self):
        session = BlockingSession()
        self.addCleanup(session.release.set)
        host = WidgetHost(self.config, session=session)
        await host.start()

        started = await asyncio.to_thread(session.started.wait, 2)
        self.assertTrue(started)
        app = host.application
        overlay = host.document.get_element_by_id("loading-overlay")
        self.assertTrue(app.running)
        self.assertEqual(overlay.style["display"], "flex")

        await host.shutdown()
        session.release.set()

        self.assertFalse(app.running)
        self.assertFalse(app.view.hide_pending)
        await asyncio.sleep(0.1)
        # the cancelled load's fade was dropped, not fired later
        self.assertEqual(overlay.style["display"], "flex")
        self.assertEqual(_pending_clock_tasks(), [])


if __name__ == "__main__":
    unittest.main()
