"""ShoreSquad weather widget."""

from .application import ERROR_MESSAGE, Application
from .cache import CacheEntry, TimedCache
from .config import WidgetConfig, load_config
from .document import Document, Element
from .errors import FetchError, NetworkError, ParseError, RenderError, WeatherError
from .view import ViewController
from .weather_client import WeatherClient

__all__ = [
    "ERROR_MESSAGE",
    "Application",
    "CacheEntry",
    "TimedCache",
    "WidgetConfig",
    "load_config",
    "Document",
    "Element",
    "WeatherError",
    "NetworkError",
    "FetchError",
    "ParseError",
    "RenderError",
    "ViewController",
    "WeatherClient",
]
