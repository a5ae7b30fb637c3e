"""Result types for railway-oriented programming.

Every hashing and parsing operation returns a Result instead of raising.
Callers branch on the variant:

Usage:
    result = parse_cost(stored_hash)
    if isinstance(result, Failure):
        log_and_reject(result.error)
    else:
        cost = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
