"""passhash: bcrypt password hashing facade with an MCF parser.

Usage:
    from passhash import PasswordHasher, Success

    hasher = PasswordHasher()
    stored = hasher.hash_password("correct horse battery staple").value
    assert isinstance(hasher.verify_password(stored, "correct horse battery staple"), Success)
    assert hasher.cost(stored).value == 10
"""

from passhash.core.constants import DEFAULT_COST, MAX_COST, MIN_COST
from passhash.core.container import get_password_hasher
from passhash.core.enums import ErrorCode
from passhash.core.result import Failure, Result, Success
from passhash.domain.errors import HashFormatError, PasswordHashingError
from passhash.domain.mcf_parser import is_valid_cost, parse_cost, parse_version
from passhash.infrastructure.security import BcryptPrimitive, PasswordHasher

__all__ = [
    "BcryptPrimitive",
    "DEFAULT_COST",
    "ErrorCode",
    "Failure",
    "HashFormatError",
    "MAX_COST",
    "MIN_COST",
    "PasswordHasher",
    "PasswordHashingError",
    "Result",
    "Success",
    "get_password_hasher",
    "is_valid_cost",
    "parse_cost",
    "parse_version",
]
