"""Explicit result types returned by the component layer.

Every component operation returns either ``Ok(value)`` or ``Err(kind,
message)``. The HTTP layer translates ``Err`` into a response; nothing in
between raises for expected outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure kinds a component operation can report."""

    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_CREDENTIALS = "invalid_credentials"
    AUTHENTICATION_MISSING = "authentication_missing"
    INVALID_TOKEN = "invalid_token"
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
