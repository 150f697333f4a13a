"""
CLI entry point.

Reads a bot-model document and runs it through the store use case with a
dry-run store and console reporting.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from botcatalog import __version__
from botcatalog.application.bot_models import simple_store_bot_model, store_bot_model
from botcatalog.application.ports import (
    bot_model_stored_out_port,
    bot_model_validation_failed_out_port,
    store_bot_model_port,
)
from botcatalog.config import load_config
from botcatalog.core.di import set_port_adapter, use_registry
from botcatalog.core.errors import ConfigError
from botcatalog.infrastructure.adapters import ConsoleReporter, DryRunBotModelStore
from botcatalog.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="botcatalog",
        description="botcatalog - validate and store bot model definitions",
    )
    parser.add_argument("--version", "-v", action="store_true", help="show version")

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    store_parser = subparsers.add_parser("store", help="validate and (dry-run) store a bot model")
    store_parser.add_argument("file", help="bot model document (.json, .yaml or .yml)")
    store_parser.add_argument("--config", "-c", help="config file path")
    store_parser.add_argument("--simple", action="store_true", help="use the reduced schema")

    return parser


def read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


async def run_store(document: Any, *, simple: bool, reporter: ConsoleReporter) -> bool:
    """Run the use case in an isolated registry. True when the model was stored."""
    use_case = simple_store_bot_model if simple else store_bot_model
    with use_registry():
        set_port_adapter(store_bot_model_port, DryRunBotModelStore())
        set_port_adapter(bot_model_stored_out_port, reporter.bot_model_stored)
        set_port_adapter(bot_model_validation_failed_out_port, reporter.validation_failed)
        await use_case(document)
    return bool(reporter.stored) and not reporter.failures


def run_cli(args: Optional[list] = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"botcatalog v{__version__}")
        return EXIT_OK

    if not parsed.command:
        parser.print_help()
        return EXIT_OK

    try:
        config = load_config(parsed.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE
    setup_logging(config.logging)

    path = Path(parsed.file)
    try:
        document = read_document(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        print(f"Error: cannot read {path}: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE

    simple = parsed.simple or config.use_case.simple
    stored = asyncio.run(run_store(document, simple=simple, reporter=ConsoleReporter()))
    return EXIT_OK if stored else EXIT_INVALID


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
