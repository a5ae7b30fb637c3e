"""Bcrypt password hashing facade.

Implements PasswordHashingProtocol on top of a BcryptPrimitiveProtocol.

Architecture:
    - Stateless: every call is a pure function of its arguments
    - Errors are returned as Failure values, never raised
    - Injected via dependency container (get_password_hasher)

Security:
    - Always hashes at DEFAULT_COST (10, ~60ms per hash)
    - Verification relies on the primitive's constant-time comparison
    - Password bytes are not zeroized (Python strings are immutable)

Performance:
    - hash_password and verify_password are CPU-bound and block the
      calling thread; use the *_async variants from an event loop
"""

import asyncio

from passhash.core.constants import DEFAULT_COST
from passhash.core.enums import ErrorCode
from passhash.core.result import Failure, Result, Success
from passhash.domain.errors import HashFormatError, PasswordHashingError
from passhash.domain.mcf_parser import parse_cost, parse_version
from passhash.domain.protocols.bcrypt_primitive_protocol import (
    BcryptPrimitiveProtocol,
)
from passhash.domain.protocols.logger_protocol import LoggerProtocol
from passhash.infrastructure.security.bcrypt_primitive import BcryptPrimitive


def _as_bytes(
    value: str | bytes | bytearray, field: str
) -> Result[bytes, PasswordHashingError]:
    if isinstance(value, str):
        try:
            return Success(value=value.encode("utf-8"))
        except UnicodeEncodeError as e:
            return Failure(
                error=PasswordHashingError(
                    code=ErrorCode.PRIMITIVE_FAILURE,
                    message=f"{field} is not encodable as UTF-8",
                    details={
                        "error_type": type(e).__name__,
                        "reason": e.reason,
                        "position": str(e.start),
                    },
                )
            )
    return Success(value=bytes(value))


class PasswordHasher:
    """Hash, verify and inspect bcrypt passwords.

    Usage:
        from passhash.core.container import get_password_hasher

        hasher = get_password_hasher()

        result = hasher.hash_password("correct horse battery staple")
        if isinstance(result, Success):
            stored = result.value  # "$2b$10$..."

        verified = hasher.verify_password(stored, "Tr0ub4dor&3")
        if isinstance(verified, Failure) and verified.error.code is ErrorCode.MISMATCH:
            ...  # wrong password
    """

    def __init__(
        self,
        primitive: BcryptPrimitiveProtocol | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            primitive: bcrypt primitive. Defaults to BcryptPrimitive.
            logger: Optional logger. Without one the facade performs no
                logging at all.
        """
        self._primitive = primitive if primitive is not None else BcryptPrimitive()
        self._logger = logger

    def hash_password(
        self, password: str | bytes
    ) -> Result[str, PasswordHashingError]:
        """Hash a plaintext password at DEFAULT_COST.

        Args:
            password: Plaintext password (str is UTF-8 encoded).

        Returns:
            Success with the MCF hash string exactly as produced by the
            primitive, Failure(EMPTY_PASSWORD) for empty input, or
            Failure(PRIMITIVE_FAILURE) with the library's cause (also
            used when a str password cannot be UTF-8 encoded).

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash_password("SecurePass123!").value[:7]
            '$2b$10$'
        """
        if not password:
            return self._fail(ErrorCode.EMPTY_PASSWORD, "Password is empty")

        encoded = _as_bytes(password, "Password")
        if isinstance(encoded, Failure):
            self._log_failure("hash_password_failed", encoded.error)
            return encoded

        result = self._primitive.generate(encoded.value, DEFAULT_COST)
        if isinstance(result, Failure):
            self._log_failure("hash_password_failed", result.error)
            return result

        if self._logger is not None:
            self._logger.debug("password_hashed", cost=DEFAULT_COST)
        return Success(value=result.value.decode("utf-8"))

    def verify_password(
        self, password_hash: str | bytes, password: str | bytes
    ) -> Result[bool, PasswordHashingError]:
        """Verify a plaintext password against a stored hash.

        Args:
            password_hash: Stored MCF hash.
            password: Plaintext password to check.

        Returns:
            Success(True) if the password matches. Otherwise a Failure:
            EMPTY_HASH, EMPTY_PASSWORD, MISMATCH (wrong password) or
            PRIMITIVE_FAILURE (hash unusable by bcrypt).

        Note:
            - The stored hash is checked for emptiness before the password
            - A Failure means "not verified"; Success(False) is never returned
        """
        if not password_hash:
            return self._fail(ErrorCode.EMPTY_HASH, "Hashed password is empty")
        if not password:
            return self._fail(ErrorCode.EMPTY_PASSWORD, "Password is empty")

        encoded_hash = _as_bytes(password_hash, "Hashed password")
        if isinstance(encoded_hash, Failure):
            self._log_failure("verify_password_failed", encoded_hash.error)
            return encoded_hash
        encoded_password = _as_bytes(password, "Password")
        if isinstance(encoded_password, Failure):
            self._log_failure("verify_password_failed", encoded_password.error)
            return encoded_password

        result = self._primitive.compare(encoded_hash.value, encoded_password.value)
        if isinstance(result, Failure):
            self._log_failure("verify_password_failed", result.error)
            return result

        return Success(value=True)

    def version(self, password_hash: str | bytes) -> Result[bytes, HashFormatError]:
        """Extract the bcrypt version (b"2", b"2a", b"2b", ...) from a hash."""
        return parse_version(password_hash)

    def cost(self, password_hash: str | bytes) -> Result[int, HashFormatError]:
        """Extract the cost from a hash."""
        return parse_cost(password_hash)

    async def hash_password_async(
        self, password: str | bytes
    ) -> Result[str, PasswordHashingError]:
        """Run hash_password on a worker thread.

        Cancelling the awaiting task does not stop the worker; its result
        is dropped.
        """
        return await asyncio.to_thread(self.hash_password, password)

    async def verify_password_async(
        self, password_hash: str | bytes, password: str | bytes
    ) -> Result[bool, PasswordHashingError]:
        """Run verify_password on a worker thread."""
        return await asyncio.to_thread(self.verify_password, password_hash, password)

    @staticmethod
    def _fail(code: ErrorCode, message: str) -> Failure[PasswordHashingError]:
        return Failure(error=PasswordHashingError(code=code, message=message))

    def _log_failure(self, event: str, error: PasswordHashingError) -> None:
        if self._logger is None:
            return
        if error.code is ErrorCode.MISMATCH:
            self._logger.info(event, error_code=error.code.value)
        else:
            self._logger.warning(event, error_code=error.code.value)
