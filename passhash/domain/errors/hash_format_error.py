"""MCF hash format errors.

Returned by the MCF parser when a stored hash cannot be interpreted.
Never raised as exceptions (return Failure(error) instead).

Codes:
    - INVALID_HASH: missing leading ``$``, buffer too short to hold a
      version, or cost digits that do not decode as a decimal number
    - INVALID_VERSION: major version byte greater than ``2``
    - HASH_TOO_SHORT: fewer than MIN_HASH_SIZE bytes (cost parsing only)
"""

from dataclasses import dataclass

from passhash.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class HashFormatError(DomainError):
    """Stored hash is not a well-formed bcrypt MCF string.

    Attributes:
        code: INVALID_HASH, INVALID_VERSION or HASH_TOO_SHORT.
        message: Human-readable message.
        details: Additional context (e.g. the numeric decode cause).
    """

    pass
