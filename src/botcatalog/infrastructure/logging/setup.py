from __future__ import annotations

import logging
from pathlib import Path

from botcatalog.config import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger from config. Entry points only, never on import."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=config.level, format=config.format, handlers=handlers, force=True)
