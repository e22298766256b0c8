"""Classification of database integrity errors.

SQLite reports ``UNIQUE constraint failed: <table>.<column>`` and
PostgreSQL ``duplicate key value violates unique constraint "<name>"``
(SQLSTATE 23505). Foreign-key, NOT NULL and check violations are also
``IntegrityError`` but are not duplicates.
"""

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Return True if ``error`` was raised by a unique constraint."""
    if getattr(error.orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "unique" in str(error.orig).lower()
