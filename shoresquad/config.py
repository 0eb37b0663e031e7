"""Widget configuration, built from defaults and optional SHORESQUAD_* env vars."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

NEA_WEATHER_URL = "https://api.data.gov.sg/v1/environment/24-hour-weather-forecast"


class WidgetConfig(BaseSettings):
    """Immutable configuration handed to the client, view and application."""
    model_config = SettingsConfigDict(env_prefix="SHORESQUAD_", extra="ignore", frozen=True)

    endpoint_url: str = NEA_WEATHER_URL
    cache_duration_ms: int = Field(default=300_000, ge=0)  # 5 minutes
    clock_interval_ms: int = Field(default=1000, gt=0)
    loading_fade_ms: int = Field(default=300, ge=0)
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    page_title: str = "ShoreSquad"

    @field_validator("endpoint_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the endpoint so cached/logged URLs compare equal."""
        return str(v).rstrip("/")


def load_config(**overrides) -> WidgetConfig:
    """Build a WidgetConfig; keyword overrides win over the environment."""
    config = WidgetConfig(**overrides)
    logger.debug("Loaded widget config", extra={"config": config.model_dump()})
    return config


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded config: {load_config().model_dump_json(indent=4)}")
