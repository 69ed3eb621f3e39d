"""Logging configuration helpers."""

from __future__ import annotations

import logging

from hookbus.config import LoggingConfig

DISPATCH_LOGGER = "hookbus.dispatcher"


def _resolve_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(config: LoggingConfig | str = "INFO") -> None:
    if isinstance(config, str):
        config = LoggingConfig(level=config)
    logging.basicConfig(level=_resolve_level(config.level), format=config.format)
    # Per-run tracing is DEBUG-only; opt in without lowering every logger.
    if config.trace_dispatch:
        logging.getLogger(DISPATCH_LOGGER).setLevel(logging.DEBUG)
