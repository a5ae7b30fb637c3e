"""Security adapters: bcrypt primitive and password hashing facade."""

from passhash.infrastructure.security.bcrypt_primitive import BcryptPrimitive
from passhash.infrastructure.security.password_hasher import PasswordHasher

__all__ = ["BcryptPrimitive", "PasswordHasher"]
