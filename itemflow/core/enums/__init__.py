"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from itemflow.core.enums import ErrorCode, Environment
"""

from itemflow.core.enums.environment import Environment
from itemflow.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
