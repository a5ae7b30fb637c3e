"""Password hashing and verification errors.

Returned by the PasswordHasher facade and the bcrypt primitive adapter.

Codes:
    - EMPTY_PASSWORD: plaintext input is empty
    - EMPTY_HASH: stored hash is empty (verify only)
    - MISMATCH: the password is not the one the hash was made from
    - PRIMITIVE_FAILURE: the bcrypt library rejected the input
"""

from dataclasses import dataclass

from passhash.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordHashingError(DomainError):
    """Hashing or verification failure.

    Attributes:
        code: EMPTY_PASSWORD, EMPTY_HASH, MISMATCH or PRIMITIVE_FAILURE.
        message: Human-readable message.
        details: Underlying cause (exception type and message), if any.
    """

    pass
