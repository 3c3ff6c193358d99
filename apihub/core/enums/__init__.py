"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from apihub.core.enums import ErrorCode, Environment
"""

from apihub.core.enums.environment import Environment
from apihub.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
