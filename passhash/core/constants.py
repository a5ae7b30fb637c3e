"""Constants of the bcrypt Modular Crypt Format and its cost parameter.

These are fixed properties of the bcrypt algorithm, NOT environment-specific
configuration. For runtime settings use `passhash/core/config.py`.

Categories:
- Cost: bounds and default for the bcrypt work factor
- Framing: MCF delimiter, version bytes and minimum hash length
- Sizes: raw and encoded salt/digest lengths

Example:
    >>> from passhash.core.constants import DEFAULT_COST, MIN_HASH_SIZE
    >>> DEFAULT_COST
    10
"""

# =============================================================================
# Cost
# =============================================================================

MIN_COST: int = 4
"""Minimum cost accepted by the bcrypt primitive."""

MAX_COST: int = 31
"""Maximum cost accepted by the bcrypt primitive."""

DEFAULT_COST: int = 10
"""Cost used by the facade for every generated hash (2^10 key setup rounds)."""


# =============================================================================
# Framing
# =============================================================================

MCF_DELIMITER: int = ord("$")
"""Byte separating the MCF fields."""

MAJOR_VERSION: bytes = b"2"
"""Highest major version accepted by the parser."""

MIN_HASH_SIZE: int = 59
"""Shortest accepted MCF hash (single-char version form)."""

COST_DIGITS: int = 2
"""The cost is always written as two ASCII decimal digits."""


# =============================================================================
# Sizes
# =============================================================================

MAX_SALT_SIZE: int = 16
"""Raw salt length in bytes."""

MAX_CRYPTED_HASH_SIZE: int = 23
"""Raw digest length in bytes."""

ENCODED_SALT_SIZE: int = 22
"""Salt length once bcrypt-base64 encoded."""

ENCODED_HASH_SIZE: int = 31
"""Digest length once bcrypt-base64 encoded."""
