"""Two-branch result values returned by every service-layer operation.

An ``Outcome`` is either ``Success(value)`` or ``Failure(kind)``; callers branch on
the tag (``isinstance`` or ``match``) before touching the value. ``kind`` is one of
the closed set of failure categories below.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from personnel.core.exceptions import InvalidValue

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class GeneralFailure:
    """Expected business-rule rejection (duplicate key, missing id, illegal transition)."""

    message: str

    @property
    def cause(self) -> None:
        return None

    @property
    def user_message(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationFailure:
    """Structured input rejected by a domain invariant."""

    context: str
    invalid_values: tuple[InvalidValue, ...]
    message: str

    @property
    def cause(self) -> None:
        # The originating ValidationViolation is not retained.
        return None

    @property
    def user_message(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnexpectedCondition:
    """Anything the business logic did not anticipate.

    ``after_save`` marks conditions raised once the entity had already been saved
    (a failed propagation step); the transaction owner keeps those changes.
    """

    context: str
    cause: Exception
    after_save: bool = False

    @property
    def message(self) -> str:
        detail = str(self.cause) or repr(self.cause)
        return f"Error {self.context}: {detail}"

    @property
    def user_message(self) -> str:
        return f"Error inesperado: {self.context}"


FailureKind = Union[GeneralFailure, ValidationFailure, UnexpectedCondition]


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Outcome[U]:
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return func(self.value)

    def value_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: FailureKind

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return self.kind.message

    def map(self, func: Callable[[object], U]) -> Outcome[U]:
        return self

    def flat_map(self, func: Callable[[object], Outcome[U]]) -> Outcome[U]:
        return self

    def value_or(self, default: T) -> T:
        return default


Outcome = Union[Success[T], Failure]
