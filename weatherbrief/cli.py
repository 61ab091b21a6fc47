"""CLI entry point for the weather and air-quality briefing."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from weatherbrief.config.defaults import DEFAULT_CONFIG, DEFAULT_ENV_FILE
from weatherbrief.config.loader import (
    ConfigError,
    get_config_value,
    load_config,
    load_env_file,
    redacted_config_json,
    require_telegram_credentials,
)
from weatherbrief.dates import FormatError, parse_civil_date
from weatherbrief.pipeline.report_pipeline import ReportPipeline


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherbrief",
        description="Daily weather and air-quality briefing for Telegram",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Config YAML path (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument(
        "--env-file", default=DEFAULT_ENV_FILE, help="dotenv file with credentials"
    )

    sub = parser.add_subparsers(dest="command")

    # send
    sub.add_parser("send", help="Build the briefing and send it to Telegram")

    # preview
    preview_p = sub.add_parser("preview", help="Print the briefing without sending")
    preview_p.add_argument("--date", help="Report date YYYY-MM-DD (default: today)")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="dotted key, e.g. location.timezone")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG

    try:
        load_env_file(args.env_file)
        config = load_config(config_path)
        if args.command == "send":
            require_telegram_credentials(config)
    except (ConfigError, ValidationError) as e:
        print(f"[설정 오류] {e}", file=sys.stderr)
        return 1

    if args.command == "send":
        return _cmd_send(config)
    elif args.command == "preview":
        return _cmd_preview(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_send(config) -> int:
    result = ReportPipeline(config).run()
    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1
    print(result.message)
    return 0


def _cmd_preview(config, args) -> int:
    today = None
    if args.date:
        try:
            today = parse_civil_date(args.date).isoformat()
        except FormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    try:
        result = ReportPipeline(config).build_report(today=today)
    except Exception as e:
        logging.getLogger(__name__).exception("Preview failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(result.message)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_config_json(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, ConfigError) as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, dict):
            print(json.dumps(value, indent=2, ensure_ascii=False))
        else:
            print(value)
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
