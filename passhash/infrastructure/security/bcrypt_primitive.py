"""Bcrypt primitive (adapter over the ``bcrypt`` library).

Implements BcryptPrimitiveProtocol. The library owns the Blowfish key
schedule, salt generation, bcrypt-base64 and the constant-time digest
comparison; this adapter only converts its return values and exceptions
into Result values.

Library behavior mapped here:
    - gensalt() raises ValueError for rounds outside [4, 31]
    - hashpw() raises ValueError for passwords over 72 bytes (bcrypt >= 5)
    - checkpw() returns False on mismatch
    - checkpw() raises ValueError for a malformed hash ("Invalid salt")
"""

import bcrypt

from passhash.core.constants import MAX_COST, MIN_COST
from passhash.core.enums import ErrorCode
from passhash.core.result import Failure, Result, Success
from passhash.domain.errors import PasswordHashingError
from passhash.domain.protocols.logger_protocol import LoggerProtocol


def _primitive_failure(
    message: str, error: Exception | None = None
) -> Failure[PasswordHashingError]:
    details = None
    if error is not None:
        details = {"error_type": type(error).__name__, "error_message": str(error)}
    return Failure(
        error=PasswordHashingError(
            code=ErrorCode.PRIMITIVE_FAILURE,
            message=message,
            details=details,
        )
    )


class BcryptPrimitive:
    """bcrypt generate/compare returning Result values.

    Usage:
        primitive = BcryptPrimitive()
        result = primitive.generate(b"SecurePass123!", 10)
        match result:
            case Success():
                stored = result.value
            case Failure():
                reject(result.error)
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize the primitive.

        Args:
            logger: Optional logger for library errors. Passwords and hashes
                are never logged.
        """
        self._logger = logger

    def generate(
        self, password: bytes, cost: int
    ) -> Result[bytes, PasswordHashingError]:
        """Hash a password with a fresh random salt at the given cost."""
        if not MIN_COST <= cost <= MAX_COST:
            return Failure(
                error=PasswordHashingError(
                    code=ErrorCode.PRIMITIVE_FAILURE,
                    message="Cost out of range",
                    details={
                        "cost": str(cost),
                        "min_cost": str(MIN_COST),
                        "max_cost": str(MAX_COST),
                    },
                )
            )

        try:
            salt = bcrypt.gensalt(rounds=cost)
            hashed = bcrypt.hashpw(password, salt)
        except (ValueError, TypeError) as e:
            if self._logger is not None:
                self._logger.warning(
                    "bcrypt_generate_failed",
                    cost=cost,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
            return _primitive_failure("bcrypt could not hash the password", e)

        return Success(value=hashed)

    def compare(
        self, hashed: bytes, password: bytes
    ) -> Result[None, PasswordHashingError]:
        """Compare a password against a stored hash in constant time."""
        try:
            matched = bcrypt.checkpw(password, hashed)
        except (ValueError, TypeError) as e:
            if self._logger is not None:
                self._logger.warning(
                    "bcrypt_compare_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
            return _primitive_failure("bcrypt could not use the stored hash", e)

        if not matched:
            return Failure(
                error=PasswordHashingError(
                    code=ErrorCode.MISMATCH,
                    message="Hashed password is not the hash of the given password",
                )
            )

        return Success(value=None)
