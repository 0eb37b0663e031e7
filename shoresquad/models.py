"""Pydantic schema for the parts of the 24-hour forecast payload the widget reads."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class Range(BaseModel):
    """Low/high pair; ints stay ints so 24 renders as "24", not "24.0"."""
    model_config = ConfigDict(extra="ignore")

    low: Number
    high: Number


class Wind(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: Range


class GeneralForecast(BaseModel):
    """The `general` record of a forecast item."""
    model_config = ConfigDict(extra="ignore")

    forecast: str
    temperature: Range
    relative_humidity: Range
    wind: Wind


class ForecastItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    general: GeneralForecast


class ForecastPayload(BaseModel):
    """Validated view of the endpoint response; only `items[0].general` is rendered."""
    model_config = ConfigDict(extra="ignore")

    items: List[ForecastItem] = Field(min_length=1)

    @property
    def general(self) -> GeneralForecast:
        return self.items[0].general
