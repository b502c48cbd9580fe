"""Result types for railway-oriented programming.

Every backend primitive returns a Result instead of raising, so that a
missing secret (the most common backend outcome) flows as data rather than
as an exception.

Usage:
    def read(key: str) -> Result[bytes, SecretsError]:
        if key not in store:
            return Failure(error=SecretsError(...))
        return Success(value=store[key])

    match read("api_key"):
        case Success(value=payload):
            print(payload)
        case Failure(error=error):
            print(error.code)
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
type Result[T, E] = Success[T] | Failure[E]
