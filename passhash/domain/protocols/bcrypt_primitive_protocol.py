"""Protocol for the external bcrypt primitive.

The Blowfish key schedule, bcrypt-base64, salt generation and the
constant-time digest comparison all live behind this port.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPrimitive over ``bcrypt``)
    - Tests substitute in-memory fakes
"""

from typing import Protocol

from passhash.core.result import Result
from passhash.domain.errors import PasswordHashingError


class BcryptPrimitiveProtocol(Protocol):
    """Generate and compare bcrypt MCF hashes.

    Any substitute implementation MUST compare digests in constant time.
    """

    def generate(
        self, password: bytes, cost: int
    ) -> Result[bytes, PasswordHashingError]:
        """Hash a password with a fresh random salt.

        Args:
            password: Plaintext password bytes.
            cost: bcrypt cost (log2 of key setup rounds).

        Returns:
            Success(mcf_bytes) or Failure(PRIMITIVE_FAILURE).
        """
        ...

    def compare(
        self, hashed: bytes, password: bytes
    ) -> Result[None, PasswordHashingError]:
        """Compare a password against an MCF hash.

        Args:
            hashed: Stored MCF hash bytes.
            password: Plaintext password bytes.

        Returns:
            Success(None) on match, Failure(MISMATCH) on mismatch,
            Failure(PRIMITIVE_FAILURE) if the hash cannot be used.
        """
        ...
