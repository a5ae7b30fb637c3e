"""Domain protocols (ports).

Usage:
    from passhash.domain.protocols import PasswordHashingProtocol
"""

from passhash.domain.protocols.bcrypt_primitive_protocol import (
    BcryptPrimitiveProtocol,
)
from passhash.domain.protocols.logger_protocol import LoggerProtocol
from passhash.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)

__all__ = [
    "BcryptPrimitiveProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
]
