"""Infrastructure dependency factories.

Application-scoped services:
- Logging (console/file)
- Database (PostgreSQL/SQLite)

Each call builds a fresh instance from explicit settings. Callers own the
instances and pass the logger on explicitly; there is no module-level
logger.
"""

from pathlib import Path

from clientgallery.core.config import Settings
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.infrastructure.persistence.database import Database


def create_logger(settings: Settings) -> LoggerProtocol:
    """Build the logger for the configured environment.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)
    - production: FileAdapter (buffered, rotating JSON file)

    ``debug`` forces the DEBUG level regardless of ``log_level``. Every
    record carries ``service`` and ``version`` from the settings.

    Args:
        settings: Application settings.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    level = "DEBUG" if settings.debug else settings.log_level
    context = {"service": settings.app_name, "version": settings.app_version}

    if settings.is_production:
        from clientgallery.infrastructure.logging.file_adapter import FileAdapter

        return FileAdapter(
            log_path=Path(settings.log_dir) / settings.log_file_name,
            max_bytes=settings.log_max_file_size_bytes,
            backup_count=settings.log_backup_count,
            buffer_size=settings.log_buffer_size,
            level=level,
            **context,
        )

    from clientgallery.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=level, **context)


def create_database(settings: Settings) -> Database:
    """Build a database manager from settings.

    Returns:
        Database manager with its own engine.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )
