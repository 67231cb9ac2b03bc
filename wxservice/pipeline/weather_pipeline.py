"""Weather pipeline: validate → point lookup → forecast lookup → select → classify."""

import logging
from datetime import datetime

from wxservice.errors import WeatherServiceError
from wxservice.forecast.classifier import classify_temperature
from wxservice.forecast.period_selector import select_daytime_period
from wxservice.forecast.summary import DEFAULT_SOURCE, build_summary
from wxservice.ingest.coordinates import parse_coordinate
from wxservice.ingest.nws_client import NwsClient
from wxservice.models.common import utc_now
from wxservice.models.forecast import WeatherSummary

logger = logging.getLogger(__name__)


class WeatherPipeline:
    def __init__(self, nws: NwsClient, source: str = DEFAULT_SOURCE):
        self.nws = nws
        self.source = source

    async def run(
        self,
        raw_lat: str | None,
        raw_lon: str | None,
        now: datetime | None = None,
    ) -> WeatherSummary:
        """Produce a summary for one request. Any stage failure is terminal."""
        if now is None:
            now = utc_now()

        try:
            coord = parse_coordinate(raw_lat, raw_lon)
            forecast_url = await self.nws.lookup_point(coord)
            logger.debug("Resolved %s to %s", coord.path_segment(), forecast_url)

            periods = await self.nws.lookup_forecast(forecast_url)
            period = select_daytime_period(periods, now)
            logger.debug(
                "Selected %r starting %s from %d periods",
                period.name, period.start_time.isoformat(), len(periods),
            )
        except WeatherServiceError as e:
            logger.warning("Weather lookup failed for lat=%r lon=%r: %s", raw_lat, raw_lon, e)
            raise

        category = classify_temperature(period.temperature_unit, period.temperature)
        return build_summary(coord, period, category, now, self.source)
