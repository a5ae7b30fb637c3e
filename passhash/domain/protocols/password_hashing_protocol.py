"""Password hashing protocol for application code.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements it (PasswordHasher)
    - No framework dependencies in domain
"""

from typing import Protocol

from passhash.core.result import Result
from passhash.domain.errors import HashFormatError, PasswordHashingError


class PasswordHashingProtocol(Protocol):
    """Hash, verify and inspect bcrypt passwords.

    Usage:
        def __init__(self, password_hasher: PasswordHashingProtocol):
            self.password_hasher = password_hasher

        result = self.password_hasher.hash_password("SecurePass123!")
    """

    def hash_password(
        self, password: str | bytes
    ) -> Result[str, PasswordHashingError]:
        """Hash a plaintext password at DEFAULT_COST.

        Note:
            - NEVER store plaintext passwords
            - Same password produces different hashes (random salt)
        """
        ...

    def verify_password(
        self, password_hash: str | bytes, password: str | bytes
    ) -> Result[bool, PasswordHashingError]:
        """Verify a plaintext password against a stored hash.

        Note:
            - Constant-time comparison (prevents timing attacks)
            - A wrong password is Failure(MISMATCH), never an exception
        """
        ...

    def version(self, password_hash: str | bytes) -> Result[bytes, HashFormatError]:
        """Extract the bcrypt version (e.g. b"2a") from a stored hash."""
        ...

    def cost(self, password_hash: str | bytes) -> Result[int, HashFormatError]:
        """Extract the cost from a stored hash."""
        ...
