"""Application environment types.

Used by Settings to choose the logging backend and other
environment-specific behavior.

Environments:
- DEVELOPMENT: Local development, coloured console logs
- TESTING: Automated test execution against a throwaway database
- CI: Continuous integration runs
- PRODUCTION: Deployed service, buffered rotating file logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
