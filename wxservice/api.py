"""FastAPI surface: /weather and /healthz."""

import asyncio
import logging
import time
from collections.abc import Awaitable
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from wxservice import __version__
from wxservice.config.schema import ServiceConfig
from wxservice.errors import WeatherServiceError
from wxservice.ingest.nws_client import NwsClient, build_http_client
from wxservice.models.forecast import WeatherSummary
from wxservice.pipeline.weather_pipeline import WeatherPipeline

logger = logging.getLogger(__name__)

DISCONNECT_POLL_SECONDS = 0.25
CLIENT_CLOSED_REQUEST = 499


def create_app(
    config: ServiceConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the app. The upstream pool lives for the app's lifespan.

    Pass ``http_client`` to reuse an existing pool (its owner closes it).
    """
    config = config or ServiceConfig()
    upstream = config.upstream

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http = http_client or build_http_client(
            upstream.user_agent, upstream.timeout_seconds
        )
        nws = NwsClient(
            http, base_url=upstream.base_url, timeout=upstream.timeout_seconds
        )
        app.state.pipeline = WeatherPipeline(nws, source=upstream.source_label)
        try:
            yield
        finally:
            if http_client is None:
                await http.aclose()

    app = FastAPI(title="Weather Summary Service", version=__version__, lifespan=lifespan)

    @app.exception_handler(WeatherServiceError)
    async def _weather_error(request: Request, exc: WeatherServiceError) -> JSONResponse:
        return JSONResponse({"error": exc.message}, status_code=exc.http_status)

    @app.get("/healthz", response_class=PlainTextResponse)
    async def healthz() -> str:
        return "ok"

    @app.get("/weather")
    async def weather(request: Request, lat: str | None = None, lon: str | None = None):
        """Today's daytime forecast summary for a coordinate."""
        started = time.monotonic()
        pipeline: WeatherPipeline = request.app.state.pipeline
        status = 200
        try:
            summary = await _run_until_disconnect(request, pipeline.run(lat, lon))
            if summary is None:
                status = CLIENT_CLOSED_REQUEST
                return JSONResponse({"error": "client disconnected"}, status_code=status)
            return JSONResponse(summary.to_dict())
        except WeatherServiceError as e:
            status = e.http_status
            raise
        except Exception:
            status = 500
            raise
        finally:
            logger.info(
                "GET /weather lat=%r lon=%r -> %d (%.0fms)",
                lat, lon, status, (time.monotonic() - started) * 1000,
            )

    return app


async def _run_until_disconnect(
    request: Request, work: Awaitable[WeatherSummary]
) -> WeatherSummary | None:
    """Await ``work``, cancelling it if the client goes away first.

    Returns None when the request was abandoned.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_SECONDS)
            if task in done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling upstream lookup")
                task.cancel()
                return None
    finally:
        if not task.done():
            task.cancel()
