"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from clientgallery.core.enums import ErrorCode, Environment
"""

from clientgallery.core.enums.environment import Environment
from clientgallery.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
