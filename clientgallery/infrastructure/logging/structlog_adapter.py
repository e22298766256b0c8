"""Shared LoggerProtocol surface for the structlog-backed adapters.

Subclasses build ``self._logger`` (a structlog bound logger) in their
``__init__``; everything callers use is implemented here once.
"""

from __future__ import annotations

import copy
from typing import Any, Self


class StructlogAdapter:
    """Structured logger over a structlog bound logger.

    Does not inherit from LoggerProtocol; the protocol is satisfied
    structurally.
    """

    _logger: Any

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, adding ``error_type``/``error_message`` when given one."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> Self:
        """Return an adapter that adds ``context`` to every record.

        The copy shares the parent's output (stream or file handlers); only
        the bound context differs.

        Args:
            **context: Key-value pairs such as ``gallery_id=12``.

        Returns:
            New adapter of the same type.
        """
        bound = copy.copy(self)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> Self:
        """Alias for :meth:`bind`."""
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
