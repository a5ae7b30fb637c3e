"""Parser for the bcrypt Modular Crypt Format (MCF).

A bcrypt hash is framed as::

    $2$CC$<22-char salt><31-char digest>     single-char version
    $2a$CC$<22-char salt><31-char digest>    two-char version

The parser locates the version tag and the two-digit cost by byte offset.
It does not validate the salt or digest; the bcrypt primitive rejects
those when the hash is used.

Both functions are pure and return Result values:

    >>> parse_version(b"$2a$10$...")
    Success(value=b'2a')
    >>> parse_cost("$2a$10$N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy")
    Success(value=10)
"""

from passhash.core.constants import (
    COST_DIGITS,
    MAJOR_VERSION,
    MAX_COST,
    MCF_DELIMITER,
    MIN_COST,
    MIN_HASH_SIZE,
)
from passhash.core.enums import ErrorCode
from passhash.core.result import Failure, Result, Success
from passhash.domain.errors import HashFormatError

# $ + major + ($ | minor)
_VERSION_PREFIX_SIZE = 3


def _invalid_hash(message: str, **details: str) -> Failure[HashFormatError]:
    return Failure(
        error=HashFormatError(
            code=ErrorCode.INVALID_HASH,
            message=message,
            details=details or None,
        )
    )


def _to_bytes(hashed: str | bytes | bytearray) -> Result[bytes, HashFormatError]:
    if isinstance(hashed, str):
        try:
            return Success(value=hashed.encode("utf-8"))
        except UnicodeEncodeError as e:
            return _invalid_hash(
                "Hash is not encodable as UTF-8",
                cause=e.reason,
                position=str(e.start),
            )
    return Success(value=bytes(hashed))


def parse_version(hashed: str | bytes | bytearray) -> Result[bytes, HashFormatError]:
    """Extract the version tag from an MCF hash.

    The version is one byte (``$2$``) when byte 2 is the delimiter,
    otherwise two bytes (``$2a$``, ``$2b$``, ``$2y$``). Only the major byte
    is checked: anything above ``2`` is rejected, ``0`` and ``1`` pass.
    The minor byte is not whitelisted.

    Args:
        hashed: Stored hash as bytes or ASCII string.

    Returns:
        Success with a 1- or 2-byte version, or Failure with INVALID_HASH
        (no leading ``$``, fewer than 3 bytes, or a str that cannot be
        UTF-8 encoded) / INVALID_VERSION.
    """
    encoded = _to_bytes(hashed)
    if isinstance(encoded, Failure):
        return encoded
    data = encoded.value

    if len(data) < _VERSION_PREFIX_SIZE:
        return _invalid_hash(
            "Hash too short to contain a version", length=str(len(data))
        )

    if data[0] != MCF_DELIMITER:
        return _invalid_hash("Hash must start with '$'")

    if data[1] > MAJOR_VERSION[0]:
        return Failure(
            error=HashFormatError(
                code=ErrorCode.INVALID_VERSION,
                message="Unsupported bcrypt major version",
                details={"major": chr(data[1])},
            )
        )

    if data[2] != MCF_DELIMITER:
        return Success(value=data[1:3])

    return Success(value=data[1:2])


def parse_cost(hashed: str | bytes | bytearray) -> Result[int, HashFormatError]:
    """Extract the two-digit cost from an MCF hash.

    The cost follows ``$<version>$``, so it starts at offset 4 for the
    two-char version form and at offset 3 for the single-char form.
    The result is in [0, 99]; callers needing [MIN_COST, MAX_COST] should
    check with is_valid_cost().

    Args:
        hashed: Stored hash as bytes or ASCII string.

    Returns:
        Success with the cost, or Failure with HASH_TOO_SHORT (fewer than
        MIN_HASH_SIZE bytes) / INVALID_HASH (no leading ``$`` or
        non-decimal cost digits).
    """
    encoded = _to_bytes(hashed)
    if isinstance(encoded, Failure):
        return encoded
    data = encoded.value

    if len(data) < MIN_HASH_SIZE:
        return Failure(
            error=HashFormatError(
                code=ErrorCode.HASH_TOO_SHORT,
                message="Hash too short to be a bcrypt hash",
                details={"length": str(len(data)), "minimum": str(MIN_HASH_SIZE)},
            )
        )

    if data[0] != MCF_DELIMITER:
        return _invalid_hash("Hash must start with '$'")

    start = 4 if data[2] != MCF_DELIMITER else 3
    digits = data[start : start + COST_DIGITS]

    # bytes.isdigit() only accepts ASCII 0-9, so no sign or whitespace slips in
    if not digits.isdigit():
        return _invalid_hash(
            "Cost is not a two-digit decimal number",
            cause=f"invalid literal for int(): {digits!r}",
            offset=str(start),
        )

    return Success(value=int(digits))


def is_valid_cost(cost: int) -> bool:
    """Check a parsed cost against the bcrypt bounds [MIN_COST, MAX_COST]."""
    return MIN_COST <= cost <= MAX_COST
