"""Console logging adapter (development, testing, CI).

Structured records go to stdout through structlog's global configuration:
coloured key-value lines for people in development, one JSON object per
line for test and CI runs.

Usage:
    logger = ConsoleAdapter(use_json=True, level="DEBUG")
    logger.bind(gallery_id=12).info("gallery_published")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from clientgallery.infrastructure.logging.structlog_adapter import StructlogAdapter


class ConsoleAdapter(StructlogAdapter):
    """Stdout logger.

    Args:
        use_json: Render JSON lines instead of the coloured console format.
        level: Minimum level name (DEBUG, INFO, ...).
        **context: Context bound to every record (e.g. ``service=...``).
    """

    def __init__(
        self, *, use_json: bool = False, level: str = "INFO", **context: Any
    ) -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                getattr(logging, level.upper())
            ),
            context_class=dict,
            # Bound at configure time, so stdout redirection must precede construction
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger(**context)
