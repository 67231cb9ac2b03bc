"""Tests for the weather pipeline with a mocked NWS client."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from wxservice.errors import SelectionError, UpstreamError, ValidationError
from wxservice.ingest.nws_client import NwsClient
from wxservice.models.forecast import Coordinate, TemperatureCategory
from wxservice.pipeline.weather_pipeline import WeatherPipeline
from wxservice.tests.conftest import (
    EST,
    FORECAST_URL,
    POINTS_URL,
    TEST_BASE_URL,
    make_period,
)

pytestmark = pytest.mark.anyio

NOW = datetime(2026, 7, 4, 9, 0, tzinfo=EST)


def _mock_nws(periods=None) -> MagicMock:
    nws = MagicMock(spec=NwsClient)
    nws.lookup_point = AsyncMock(return_value=FORECAST_URL)
    nws.lookup_forecast = AsyncMock(return_value=periods or [])
    return nws


class TestWeatherPipeline:
    async def test_success(self):
        periods = [
            make_period(NOW - timedelta(hours=3), name="This Morning", temperature=70),
            make_period(NOW + timedelta(hours=9), is_daytime=False, name="Tonight"),
            make_period(NOW + timedelta(hours=21), name="Saturday", temperature=91),
        ]
        nws = _mock_nws(periods)

        summary = await WeatherPipeline(nws).run("40.00004", "-75.0", now=NOW)

        nws.lookup_point.assert_awaited_once_with(Coordinate(40.0, -75.0))
        nws.lookup_forecast.assert_awaited_once_with(FORECAST_URL)
        assert summary.period_name == "Saturday"
        assert summary.temperature == 91
        assert summary.category == TemperatureCategory.HOT
        assert summary.fetched_at == "2026-07-04T09:00:00-05:00"
        assert summary.source == "api.weather.gov"

    async def test_custom_source_label(self):
        nws = _mock_nws([make_period(NOW + timedelta(hours=1))])

        summary = await WeatherPipeline(nws, source="nws-mirror").run("40", "-75", now=NOW)
        assert summary.source == "nws-mirror"

    async def test_defaults_now_to_current_time(self):
        far_future = datetime(2100, 1, 1, 12, 0, tzinfo=EST)
        nws = _mock_nws([make_period(far_future)])

        summary = await WeatherPipeline(nws).run("40", "-75")
        assert summary.fetched_at != ""
        assert datetime.fromisoformat(summary.fetched_at).tzinfo is not None

    async def test_validation_error_skips_upstream(self):
        nws = _mock_nws()

        with pytest.raises(ValidationError):
            await WeatherPipeline(nws).run("91", "0", now=NOW)
        nws.lookup_point.assert_not_awaited()

    async def test_point_failure_skips_forecast(self):
        nws = _mock_nws()
        nws.lookup_point.side_effect = UpstreamError("missing forecast URL in points response")

        with pytest.raises(UpstreamError):
            await WeatherPipeline(nws).run("40", "-75", now=NOW)
        nws.lookup_forecast.assert_not_awaited()

    async def test_only_night_periods(self):
        nws = _mock_nws([make_period(NOW + timedelta(hours=1), is_daytime=False)])

        with pytest.raises(SelectionError):
            await WeatherPipeline(nws).run("40", "-75", now=NOW)


class TestWeatherPipelineWithFixtures:
    @respx.mock
    async def test_skips_elapsed_afternoon(
        self, points_payload: dict, forecast_payload: dict, afternoon_now: datetime
    ):
        respx.get(POINTS_URL).mock(return_value=httpx.Response(200, json=points_payload))
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        async with httpx.AsyncClient() as http:
            nws = NwsClient(http, base_url=TEST_BASE_URL)
            summary = await WeatherPipeline(nws).run("40", "-75", now=afternoon_now)

        assert summary.period_name == "Thursday"
        assert summary.temperature == 55
        assert summary.category == TemperatureCategory.MODERATE
        assert summary.short_forecast == "Sunny"

    @respx.mock
    async def test_morning_picks_this_afternoon(
        self, points_payload: dict, forecast_payload: dict
    ):
        respx.get(POINTS_URL).mock(return_value=httpx.Response(200, json=points_payload))
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))
        morning = datetime(2026, 2, 11, 11, 0, tzinfo=EST)

        async with httpx.AsyncClient() as http:
            nws = NwsClient(http, base_url=TEST_BASE_URL)
            summary = await WeatherPipeline(nws).run("40", "-75", now=morning)

        assert summary.period_name == "This Afternoon"
        assert summary.category == TemperatureCategory.COLD
