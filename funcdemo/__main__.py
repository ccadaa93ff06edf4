"""Command-line entry point: python -m funcdemo"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config.loader import ConfigLoader
from .errors import ConfigurationError, UnknownDemoError
from .logging.config import configure_logging, get_logger
from .runner import ExampleRunner

EXIT_OK = 0
EXIT_DEMO_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funcdemo",
        description="Run functional feature demonstrations and print their results.",
    )
    parser.add_argument(
        "--demo", action="append", dest="demos", metavar="NAME",
        help="Demo to run (repeatable). Defaults to all enabled demos.",
    )
    parser.add_argument("--format", choices=["text", "json"], help="Output format")
    parser.add_argument("--no-headers", action="store_true", help="Omit '== name ==' lines")
    parser.add_argument("--config-dir", type=Path, help="Directory containing demos.yaml")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    parser.add_argument("--list", action="store_true", help="List demo names and exit")
    return parser


def cli_overrides(args: argparse.Namespace) -> dict:
    """Translate command-line flags into configuration overrides."""
    overrides: dict = {}
    if args.format:
        overrides.setdefault("output", {})["format"] = args.format
    if args.no_headers:
        overrides.setdefault("output", {})["show_headers"] = False
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.log_json:
        overrides.setdefault("logging", {})["format_json"] = True
    return overrides


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for name in ExampleRunner.available_demos():
            print(name)
        return EXIT_OK

    try:
        config = ConfigLoader.create(args.config_dir).load(cli_overrides(args))
    except ConfigurationError as e:
        configure_logging(level="ERROR")
        get_logger(__name__).error("Invalid configuration", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)
    logger = get_logger(__name__)

    runner = ExampleRunner(config=config)
    try:
        results = runner.run_all(args.demos)
    except UnknownDemoError as e:
        logger.error("Unknown demo requested", demo_name=e.demo_name)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK if all(r.succeeded for r in results) else EXIT_DEMO_FAILED


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
