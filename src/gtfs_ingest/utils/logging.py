"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Looked up per logger: stderr may be replaced after configuration.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
) -> None:
    """
    Configure structured logging for ingestion runs.

    Log lines go to stderr so that CLI output on stdout stays clean.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, render each event as a JSON line.
    """
    if level.upper() not in _LEVEL_NAMES:
        msg = f"Unknown log level {level!r}. Expected one of: {', '.join(_LEVEL_NAMES)}"
        raise ValueError(msg)
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger bound to the given module name."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Context manager adding key-value pairs to every log line inside the block.

    Example:
        with log_context(table="stop_times"):
            log.info("Decoding table")  # includes table="stop_times"
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
