"""Domain models for the sugar tracker."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class UserRecord:
    """Represents the locally logged-in user."""

    id: str
    username: str
    email: str


@dataclass(frozen=True)
class MutationResult(Generic[T]):
    """Value applied to the in-memory state and whether it reached storage."""

    value: T
    persisted: bool
