"""Core errors package.

Usage:
    from passhash.core.errors import DomainError
"""

from passhash.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
