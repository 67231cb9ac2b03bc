"""NOAA/NWS API client for the point → forecast lookup chain."""

import asyncio
import logging

import httpx
import pydantic

from wxservice.errors import UpstreamError
from wxservice.models.forecast import Coordinate, ForecastPeriod
from wxservice.models.nws import ForecastResponse, PointsResponse

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "wxservice/0.1.0 (ops@example.com)"
DEFAULT_TIMEOUT = 8.0
GEO_JSON = "application/geo+json"


def build_http_client(
    user_agent: str = DEFAULT_USER_AGENT, timeout: float = DEFAULT_TIMEOUT
) -> httpx.AsyncClient:
    """Create the shared connection pool used for every upstream call."""
    return httpx.AsyncClient(
        headers={"User-Agent": user_agent, "Accept": GEO_JSON},
        timeout=timeout,
    )


class NwsClient:
    """Stateless wrapper around the two NWS lookups.

    The ``httpx.AsyncClient`` is injected so one pool serves every request
    and tests can swap the transport. When none is given the client builds
    and owns its own, and ``aclose`` releases it.
    """

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_http = http is None
        self.http = http or build_http_client(user_agent, timeout)
        self.base_url = base_url.rstrip("/")
        # httpx timeouts apply per phase; this bounds the whole call.
        self.timeout = timeout

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def lookup_point(self, coord: Coordinate) -> str:
        """Resolve a coordinate to its gridpoint forecast URL."""
        url = f"{self.base_url}/points/{coord.path_segment()}"
        try:
            payload = await self._get_json(url)
            points = PointsResponse.model_validate(payload)
        except pydantic.ValidationError as e:
            raise UpstreamError(
                f"failed to fetch points: unexpected response shape: {_describe(e)}"
            ) from e
        except UpstreamError as e:
            raise UpstreamError(
                f"failed to fetch points: {e}", status_code=e.status_code
            ) from e

        forecast_url = points.properties.forecast.strip()
        if not forecast_url:
            raise UpstreamError("missing forecast URL in points response")
        return forecast_url

    async def lookup_forecast(self, forecast_url: str) -> list[ForecastPeriod]:
        """Fetch a gridpoint forecast and decode its periods in upstream order."""
        try:
            payload = await self._get_json(forecast_url)
            forecast = ForecastResponse.model_validate(payload)
        except pydantic.ValidationError as e:
            raise UpstreamError(
                f"failed to fetch forecast: unexpected response shape: {_describe(e)}"
            ) from e
        except UpstreamError as e:
            raise UpstreamError(
                f"failed to fetch forecast: {e}", status_code=e.status_code
            ) from e

        periods = [
            ForecastPeriod(
                name=p.name,
                start_time=p.start_time,
                is_daytime=p.is_daytime,
                temperature=p.temperature,
                temperature_unit=p.temperature_unit,
                short_forecast=p.short_forecast,
            )
            for p in forecast.properties.periods
        ]
        if not periods:
            raise UpstreamError("no forecast periods available")
        return periods

    async def _get_json(self, url: str) -> object:
        """GET a URL and decode its JSON body. The body is only read on 2xx."""
        try:
            async with asyncio.timeout(self.timeout):
                resp = await self.http.get(url)
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.warning("NWS request timed out: %s", url)
            raise UpstreamError(f"request to {url} timed out") from e
        except httpx.InvalidURL as e:
            logger.warning("NWS returned an invalid URL: %r", url)
            raise UpstreamError(f"invalid upstream URL {url!r}: {e}") from e
        except httpx.RequestError as e:
            logger.warning("NWS request failed: %s -> %s", url, e)
            raise UpstreamError(f"request to {url} failed: {e}") from e

        if not resp.is_success:
            logger.warning("NWS %s returned %d", url, resp.status_code)
            raise UpstreamError(
                f"HTTP {resp.status_code} from {url}", status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("NWS %s returned invalid JSON: %s", url, e)
            raise UpstreamError(f"invalid JSON from {url}: {e}") from e


def _describe(error: pydantic.ValidationError) -> str:
    """Summarize a pydantic error as ``field.path: message`` pairs."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
