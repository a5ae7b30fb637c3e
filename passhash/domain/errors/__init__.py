"""Domain errors package.

Usage:
    from passhash.domain.errors import HashFormatError, PasswordHashingError
"""

from passhash.domain.errors.hash_format_error import HashFormatError
from passhash.domain.errors.password_hashing_error import PasswordHashingError

__all__ = [
    "HashFormatError",
    "PasswordHashingError",
]
