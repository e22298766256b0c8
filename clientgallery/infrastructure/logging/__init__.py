"""Logging adapters implementing LoggerProtocol.

- ConsoleAdapter: stdout (development, testing, CI)
- FileAdapter: buffered rotating JSON file (production)
"""

from clientgallery.infrastructure.logging.console_adapter import ConsoleAdapter
from clientgallery.infrastructure.logging.file_adapter import FileAdapter
from clientgallery.infrastructure.logging.structlog_adapter import StructlogAdapter

__all__ = ["ConsoleAdapter", "FileAdapter", "StructlogAdapter"]
