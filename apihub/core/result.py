"""Result types for railway-oriented programming.

Operations that can fail return ``Success`` or ``Failure`` instead of raising.
The outbound request pipeline, every CQRS handler, and the encryption service
all speak this type.

Usage:
    def parse_limit(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="limit must be numeric")
        return Success(value=int(raw))

    match parse_limit("20"):
        case Success(value=limit):
            ...
        case Failure(error=message):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
