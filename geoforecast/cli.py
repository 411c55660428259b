"""CLI entry point for the address forecast service."""

import argparse
import asyncio
import json
import logging

from geoforecast.config.loader import get_config_value, load_config
from geoforecast.pipeline.forecast_pipeline import ProviderSet
from geoforecast.reporting.health_checker import HealthChecker

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="geoforecast",
        description="Address geocoding and weather forecast service",
    )
    parser.add_argument(
        "--config", default=None, help=f"Config YAML path (e.g. {DEFAULT_CONFIG})"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Look up one address and print JSON")
    forecast_p.add_argument("address", help="Free-form postal address")

    # health
    sub.add_parser("health", help="Check provider reachability")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print a config value")
    get_p.add_argument("key", help="Dotted key, e.g. geocoder.benchmark")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "forecast":
        return asyncio.run(_cmd_forecast(config, args))
    elif args.command == "health":
        return asyncio.run(_cmd_health(config))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from geoforecast.api import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


async def _cmd_forecast(config, args) -> int:
    async with ProviderSet(config) as providers:
        outcome = await providers.pipeline.run(args.address)

    if not outcome.ok:
        print(f"Error: {outcome.status} ({outcome.reason})")
        return 1
    print(json.dumps([f.to_dict() for f in outcome.forecasts], indent=2))
    return 0


async def _cmd_health(config) -> int:
    status = await HealthChecker(config).check()
    print(f"Geocoder: {'OK' if status.geocoder_reachable else 'FAIL'}")
    print(f"Weather: {'OK' if status.weather_reachable else 'FAIL'}")
    return 0 if status.status == "ok" else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(value.model_dump_json(indent=2) if hasattr(value, "model_dump_json") else value)
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
