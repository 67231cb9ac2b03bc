"""CLI entry point for the weather summary service."""

import argparse
import asyncio
import json
import logging

from wxservice.config.loader import dump_config, load_config
from wxservice.config.schema import ServiceConfig
from wxservice.errors import WeatherServiceError
from wxservice.ingest.nws_client import NwsClient
from wxservice.pipeline.weather_pipeline import WeatherPipeline

DEFAULT_CONFIG = "ops/configs/default.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wxservice",
        description="NWS daytime forecast summary service",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", help="Bind address (overrides config)")
    serve_p.add_argument("--port", type=int, help="Bind port (overrides config)")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Fetch one summary and print it")
    lookup_p.add_argument("--lat", required=True)
    lookup_p.add_argument("--lon", required=True)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "lookup":
        return asyncio.run(_cmd_lookup(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: ServiceConfig, args) -> int:
    import uvicorn

    from wxservice.api import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("listening on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port, log_level="warning")
    return 0


async def _cmd_lookup(config: ServiceConfig, args) -> int:
    upstream = config.upstream
    nws = NwsClient(
        base_url=upstream.base_url,
        user_agent=upstream.user_agent,
        timeout=upstream.timeout_seconds,
    )
    try:
        summary = await WeatherPipeline(nws, source=upstream.source_label).run(
            args.lat, args.lon
        )
    except WeatherServiceError as e:
        print(json.dumps({"error": e.message}))
        return 1
    finally:
        await nws.aclose()

    print(json.dumps(summary.to_dict(), indent=2))
    return 0


def _cmd_config(config: ServiceConfig, args) -> int:
    if args.config_command == "show":
        print(dump_config(config), end="")
        return 0
    print("Usage: wxservice config show")
    return 1
