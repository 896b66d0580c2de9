"""Success/error values returned across the forecast boundary."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a client-facing message."""
    message: str


Result = Union[Ok[T], Err]
