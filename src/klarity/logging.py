"""Logging setup for the klarity command line."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Route klarity log records to stderr and/or a file.

    Nothing is configured when verbose is 0 and no log file is given. One -v
    logs INFO to stderr, -vv logs DEBUG. A log file alone records at INFO.
    Only the "klarity" logger is touched, so other libraries stay quiet.
    """
    if not verbose and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger = logging.getLogger("klarity")
    logger.setLevel(level)

    if verbose:
        _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info("klarity starting | %s | level=%s", started, logging.getLevelName(level))
    logger.info("=" * 60)
