"""SQL persistence adapters.

Usage:
    from clientgallery.infrastructure.persistence import Database
"""

from clientgallery.infrastructure.persistence.database import Database

__all__ = ["Database"]
