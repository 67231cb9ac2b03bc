"""Typed NWS payload models.

Only the fields the pipeline reads are declared. Unknown fields are ignored
because the live API returns a large GeoJSON document, but every declared
field is required and strictly typed: a missing ``isDaytime`` or a string
``temperature`` fails validation instead of collapsing to a zero value.
"""

from pydantic import AwareDatetime, BaseModel, Field, StrictBool, StrictInt, StrictStr


class PointProperties(BaseModel):
    model_config = {"extra": "ignore"}

    forecast: StrictStr


class PointsResponse(BaseModel):
    model_config = {"extra": "ignore"}

    properties: PointProperties


class NwsPeriod(BaseModel):
    model_config = {"extra": "ignore"}

    name: StrictStr
    start_time: AwareDatetime = Field(alias="startTime")
    is_daytime: StrictBool = Field(alias="isDaytime")
    temperature: StrictInt
    temperature_unit: StrictStr = Field(alias="temperatureUnit")
    short_forecast: StrictStr = Field(alias="shortForecast")


class ForecastProperties(BaseModel):
    model_config = {"extra": "ignore"}

    periods: list[NwsPeriod]


class ForecastResponse(BaseModel):
    model_config = {"extra": "ignore"}

    properties: ForecastProperties
