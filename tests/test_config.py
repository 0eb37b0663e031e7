import os
import unittest

from pydantic import ValidationError

from shoresquad.config import NEA_WEATHER_URL, WidgetConfig, load_config


class TestConfig(unittest.TestCase):
    def test_settings_defaults(self):
        previous = os.environ.pop("SHORESQUAD_CACHE_DURATION_MS", None)
        try:
            c = WidgetConfig()
            self.assertEqual(c.endpoint_url, NEA_WEATHER_URL)
            self.assertEqual(c.cache_duration_ms, 300000)
            self.assertEqual(c.clock_interval_ms, 1000)
            self.assertEqual(c.loading_fade_ms, 300)
        finally:
            if previous is not None:
                os.environ["SHORESQUAD_CACHE_DURATION_MS"] = previous

    def test_settings_env_override(self):
        previous = os.environ.get("SHORESQUAD_ENDPOINT_URL")
        try:
            os.environ["SHORESQUAD_ENDPOINT_URL"] = "http://example.com/forecast/"
            c = WidgetConfig()
            self.assertEqual(c.endpoint_url, "http://example.com/forecast")
        finally:
            if previous is None:
                os.environ.pop("SHORESQUAD_ENDPOINT_URL", None)
            else:
                os.environ["SHORESQUAD_ENDPOINT_URL"] = previous

    def test_load_config_overrides(self):
        c = load_config(cache_duration_ms=60000)
        self.assertEqual(c.cache_duration_ms, 60000)

    def test_config_is_immutable(self):
        c = WidgetConfig()
        with self.assertRaises(ValidationError):
            c.cache_duration_ms = 1

    def test_rejects_non_positive_clock_interval(self):
        with self.assertRaises(ValidationError):
            WidgetConfig(clock_interval_ms=0)


if __name__ == "__main__":
    unittest.main()
