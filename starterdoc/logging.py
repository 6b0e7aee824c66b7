"""Logging setup for the starterdoc pipeline and CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

_LOGGER_NAME = "starterdoc"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``starterdoc`` hierarchy (e.g. ``starterdoc.orchestrator``)."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the starterdoc logger.

    ``verbose`` lowers the threshold to DEBUG so per-file copy steps and
    undocumented declarations show up; ``quiet`` keeps only warnings and errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Handlers are replaced, not stacked, when main() runs repeatedly in one process.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[starterdoc] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(sink)

    return logger


def log_failure(logger: logging.Logger, stage: str, messages: Iterable[str]) -> None:
    """Log an aborted stage followed by every collected cause, one per line."""
    collected = [message for message in messages if message]
    logger.error("%s failed (%d issue%s)", stage, len(collected), "" if len(collected) == 1 else "s")
    for message in collected:
        logger.error("  - %s", message)


__all__ = ["configure_logging", "get_logger", "log_failure"]
