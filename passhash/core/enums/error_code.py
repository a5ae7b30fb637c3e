"""Machine-readable error codes for hash parsing and password hashing.

Values are stable: callers may match on them to tell a wrong password
(MISMATCH) apart from a corrupted credential record (INVALID_HASH).

Categories:
- Hash format errors (parser)
- Input validation errors (facade)
- Verification and primitive errors (facade)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes returned inside Failure results."""

    # Hash format errors
    INVALID_HASH = "invalid_hash"
    INVALID_VERSION = "invalid_version"
    HASH_TOO_SHORT = "hash_too_short"

    # Input validation errors
    EMPTY_PASSWORD = "empty_password"
    EMPTY_HASH = "empty_hash"

    # Verification and primitive errors
    MISMATCH = "mismatch"
    PRIMITIVE_FAILURE = "primitive_failure"
