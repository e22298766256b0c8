"""Rotating file logging adapter (production).

Writes one JSON object per line to a size-rotated log file. Records are
held in a memory buffer and written in batches: the buffer is flushed when
it holds ``buffer_size`` records, when an ERROR or CRITICAL record arrives,
and on ``flush()``/``close()``.

Uses a dedicated stdlib logger (non-propagating) wrapped by structlog, so
it does not touch global structlog configuration and can coexist with a
ConsoleAdapter in the same process.

Usage:
    logger = FileAdapter(log_path="logs/clientgallery.log", buffer_size=50)
    logger.info("gallery_published", gallery_id=12)
    logger.close()
"""

from __future__ import annotations

import itertools
import logging
from logging.handlers import MemoryHandler, RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

from clientgallery.infrastructure.logging.structlog_adapter import StructlogAdapter

_instance_ids = itertools.count(1)


class FileAdapter(StructlogAdapter):
    """Buffered, size-rotated JSON file logger.

    Args:
        log_path: Active log file path; parent directories are created.
        max_bytes: Rotate once the file would exceed this size.
        backup_count: Rotated files to keep (``.1`` ... ``.N``).
        buffer_size: Records held in memory before writing.
        level: Minimum level name (DEBUG, INFO, ...).
        **context: Context bound to every record (e.g. ``service=...``).
    """

    def __init__(
        self,
        *,
        log_path: str | Path,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        buffer_size: int = 100,
        level: str = "INFO",
        **context: Any,
    ) -> None:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.log_path = path

        self._file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            delay=True,
        )
        self._file_handler.setFormatter(logging.Formatter("%(message)s"))
        self._buffer = MemoryHandler(
            capacity=buffer_size,
            flushLevel=logging.ERROR,
            target=self._file_handler,
        )

        self._stdlib_logger = logging.getLogger(
            f"clientgallery.file.{next(_instance_ids)}"
        )
        self._stdlib_logger.setLevel(getattr(logging, level.upper()))
        self._stdlib_logger.propagate = False
        self._stdlib_logger.addHandler(self._buffer)

        self._logger = structlog.wrap_logger(
            self._stdlib_logger,
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            **context,
        )

    def flush(self) -> None:
        """Write all buffered records to the log file."""
        self._buffer.flush()

    def close(self) -> None:
        """Flush, close the file and detach handlers.

        Bound adapters share the file, so close only the root adapter.
        """
        self._buffer.flush()
        self._stdlib_logger.removeHandler(self._buffer)
        self._buffer.close()
        self._file_handler.close()
