"""CLI entry point for the fishing conditions checker."""

import argparse
import json
import logging
import os

from canifish.config.loader import (
    ConfigError,
    get_config_value,
    load_config,
    set_config_value,
)
from canifish.config.schema import CanIFishConfig
from canifish.ingest.forecast_fetcher import ForecastFetcher, extract_bundle
from canifish.ingest.willyweather_client import WillyWeatherClient
from canifish.models.reporting import CheckResult
from canifish.pipeline.check_pipeline import CheckPipeline
from canifish.reporting.formatters import format_windows_json

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="canifish",
        description="Shore fishing window checker",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # check
    check_p = sub.add_parser("check", help="Fetch the forecast and evaluate it")
    check_p.add_argument(
        "--json", action="store_true", help="Print windows as JSON"
    )

    # evaluate
    eval_p = sub.add_parser(
        "evaluate", help="Evaluate a saved provider weather response"
    )
    eval_p.add_argument("--input", required=True, help="Weather response JSON path")
    eval_p.add_argument(
        "--json", action="store_true", help="Print windows as JSON"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "evaluate":
        return _cmd_evaluate(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_check(config: CanIFishConfig, args) -> int:
    try:
        api_key = _api_key(config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    client = WillyWeatherClient(
        api_key,
        base_url=config.provider.base_url,
        timeout=config.provider.timeout_seconds,
    )
    pipeline = CheckPipeline(config, fetcher=ForecastFetcher(client))
    result = pipeline.run()
    _print_result(result, args.json)
    return 0 if not result.summary.errors else 1


def _cmd_evaluate(config: CanIFishConfig, args) -> int:
    try:
        with open(args.input) as f:
            raw = json.load(f)
        bundle = extract_bundle(raw)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    pipeline = CheckPipeline(config)
    result = pipeline.run_bundle(bundle)
    _print_result(result, args.json)
    return 0


def _cmd_config(config: CanIFishConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _api_key(config: CanIFishConfig) -> str:
    api_key = os.environ.get(config.provider.api_key_env, "")
    if not api_key:
        raise ConfigError(
            f"Missing {config.provider.api_key_env} environment variable"
        )
    return api_key


def _print_result(result: CheckResult, as_json: bool) -> None:
    if as_json:
        print(format_windows_json(result.windows))
        return
    print(result.subject)
    print()
    print(result.report)
    print()
    print(f"Delivery: {'send' if result.delivery.send else 'skip'} ({result.delivery.reason})")
