"""Result types returned by the task store.

Mutating store operations never raise for expected failures. They return
``Ok`` carrying the value or ``Err`` carrying a classified ``TaskError``,
and the caller decides what to print.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    """Classification of expected failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ILLEGAL_STATE = "illegal_state"


class TaskError(Exception):
    """Base class for expected task failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ValidationError(TaskError):
    """A field value was rejected (blank title, bad priority, bad due date)."""

    kind = ErrorKind.VALIDATION


class NotFoundError(TaskError):
    """No task with the requested id."""

    kind = ErrorKind.NOT_FOUND


class IllegalStateError(TaskError):
    """The operation is not allowed in the task's current state."""

    kind = ErrorKind.ILLEGAL_STATE


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result carrying the error."""

    error: TaskError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]
