from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    format_style: str = "detailed",
) -> logging.Logger:
    """Configure the root logger for command line runs.

    Records go to stderr so JSON written to stdout stays clean.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["detailed"])

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(log_format))

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers, force=True)
    return logging.getLogger()
