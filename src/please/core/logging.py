"""Centralised logging setup for the please application."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.types import FilteringBoundLogger

_CONFIGURED = False


def sanitise_context(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Drop None values from the event dictionary.

    Args:
        logger: The logger instance.
        method_name: The name of the method called on the logger.
        event_dict: The event dictionary to sanitize.

    Returns:
        The sanitized event dictionary.
    """
    return {k: v for k, v in event_dict.items() if v is not None}


def default_log_file() -> Path | None:
    """Return the log file path, creating its directory.

    `PLEASE_LOG_FILE` overrides the default `~/.please/logs/please.log`.
    Returns None when the directory cannot be created.
    """
    override = os.environ.get("PLEASE_LOG_FILE")
    log_file = Path(override) if override else Path.home() / ".please" / "logs" / "please.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return log_file


def configure_logging(
    level: str | None = None,
    log_file: Path | None = None,
    enable_console: bool = False,
    force: bool = False,
) -> None:
    """Configure logging for the please application.

    Args:
        level: The logging level as a string (e.g., "DEBUG", "INFO").
            Defaults to `PLEASE_LOG_LEVEL` or "INFO".
        log_file: Optional path to a log file for file logging.
        enable_console: Whether to render log events on stderr.
        force: Reconfigure even if logging was already set up.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level = (level or os.environ.get("PLEASE_LOG_LEVEL") or "INFO").upper()
    numeric_level = getattr(logging, level, logging.INFO)

    if log_file is None:
        log_file = default_log_file()

    for handler in list(logging.root.handlers):
        if getattr(handler, "_please", False):
            logging.root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if log_file is not None:
        handlers.append(RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=2))

    shared_processors = [
        sanitise_context,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)
        renderers = [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler._please = True  # type: ignore[attr-defined]
        logging.root.addHandler(handler)
    logging.root.setLevel(numeric_level)

    _CONFIGURED = True


def get_logger(name: str = "please") -> FilteringBoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional name for the logger, typically the module name.

    Returns:
        A structlog FilteringBoundLogger instance.

    Usage:
        log = get_logger(__name__)
        log.info("vendor_resolved", vendor="Apt")

    Standard context keys:
        - vendor (str): Display name of the vendor
        - action (str): Action name ("install", "search", ...)
        - command (str): Formatted vendor command
        - returncode (int): Exit status of the vendor command
        - duration_ms (int): Operation duration in milliseconds
        - error (str): Error message if applicable
    """
    if not _CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
