"""Assemble the outward-facing weather summary."""

from datetime import datetime

from wxservice.models.common import rfc3339
from wxservice.models.forecast import (
    Coordinate,
    ForecastPeriod,
    TemperatureCategory,
    WeatherSummary,
)

DEFAULT_SOURCE = "api.weather.gov"


def build_summary(
    coord: Coordinate,
    period: ForecastPeriod,
    category: TemperatureCategory,
    fetched_at: datetime,
    source: str = DEFAULT_SOURCE,
) -> WeatherSummary:
    return WeatherSummary(
        coordinate=coord,
        period_name=period.name,
        short_forecast=period.short_forecast,
        temperature=period.temperature,
        temperature_unit=period.temperature_unit,
        category=category,
        fetched_at=rfc3339(fetched_at),
        source=source,
    )
