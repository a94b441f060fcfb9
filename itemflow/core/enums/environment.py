"""Application environment types.

Used by Settings to determine environment-specific behavior, such as the
log renderer (console in development, JSON everywhere else).

Environments:
- DEVELOPMENT: Local development with hot reload, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
