"""Logging configuration for pagerduty-notify."""

from __future__ import annotations

import logging

NOISY_LOGGERS = ("urllib3", "requests", "charset_normalizer")


def setup_logging(debug: bool = False, quiet: tuple[str, ...] = NOISY_LOGGERS) -> None:
    """Configure the root logger for a process that sends notifications.

    HTTP library loggers in ``quiet`` are held at WARNING unless ``debug`` is on,
    so request-level chatter does not drown out gateway outcomes.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger("pagerduty_notify").setLevel(level)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def mask_secret(value: str | None) -> str:
    """Show only the last 4 characters of a key for log lines."""
    if not value:
        return "<unset>"
    return "*" * max(len(value) - 4, 0) + value[-4:]
