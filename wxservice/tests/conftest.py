"""Shared test fixtures."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from wxservice.config.schema import ServiceConfig, UpstreamConfig
from wxservice.models.forecast import ForecastPeriod

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-nws.example.com"
POINTS_URL = f"{TEST_BASE_URL}/points/40.0000,-75.0000"
FORECAST_URL = f"{TEST_BASE_URL}/gridpoints/PHI/49,75/forecast"
EST = timezone(timedelta(hours=-5))


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_period(
    start: datetime,
    is_daytime: bool = True,
    name: str = "Today",
    temperature: int = 60,
    unit: str = "F",
) -> ForecastPeriod:
    return ForecastPeriod(
        name=name,
        start_time=start,
        is_daytime=is_daytime,
        temperature=temperature,
        temperature_unit=unit,
        short_forecast="Sunny",
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def points_payload() -> dict:
    return load_fixture("nws_points_philly.json")


@pytest.fixture
def forecast_payload() -> dict:
    return load_fixture("nws_forecast_philly.json")


@pytest.fixture
def afternoon_now() -> datetime:
    """4pm on the fixture's first day, after "This Afternoon" started."""
    return datetime(2026, 2, 11, 16, 0, tzinfo=EST)


@pytest.fixture
def test_config() -> ServiceConfig:
    return ServiceConfig(
        upstream=UpstreamConfig(
            base_url=TEST_BASE_URL,
            user_agent="wxservice-tests (tests@example.com)",
        )
    )
