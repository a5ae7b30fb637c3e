"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from passhash.core.enums import ErrorCode, Environment
"""

from passhash.core.enums.environment import Environment
from passhash.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
