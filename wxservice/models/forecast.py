"""Forecast domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TemperatureCategory(StrEnum):
    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"


@dataclass(frozen=True)
class Coordinate:
    lat: float  # [-90, 90], 4 decimals
    lon: float  # [-180, 180], 4 decimals

    def path_segment(self) -> str:
        """Render as the ``{lat},{lon}`` segment NWS expects."""
        return f"{self.lat:.4f},{self.lon:.4f}"


@dataclass(frozen=True)
class ForecastPeriod:
    name: str
    start_time: datetime
    is_daytime: bool
    temperature: int
    temperature_unit: str
    short_forecast: str


@dataclass(frozen=True)
class WeatherSummary:
    coordinate: Coordinate
    period_name: str
    short_forecast: str
    temperature: int
    temperature_unit: str
    category: TemperatureCategory
    fetched_at: str  # RFC 3339
    source: str

    def to_dict(self) -> dict:
        return {
            "lat": self.coordinate.lat,
            "lon": self.coordinate.lon,
            "periodName": self.period_name,
            "shortForecast": self.short_forecast,
            "temperature": self.temperature,
            "temperatureUnit": self.temperature_unit,
            "temperatureType": self.category.value,
            "fetchedAt": self.fetched_at,
            "source": self.source,
        }
