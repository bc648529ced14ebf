"""The single funnel turning exceptions from user-supplied steps into outcomes."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, Union

from personnel.core.exceptions import RuleViolation, ValidationViolation
from personnel.core.outcome import (
    Failure,
    FailureKind,
    GeneralFailure,
    Outcome,
    Success,
    UnexpectedCondition,
    ValidationFailure,
)
from personnel.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

Step = Callable[[], Union[T, Awaitable[T]]]


class FailureObserver(Protocol):
    """Receives every failure produced by the classifier."""

    def on_failure(self, label: str, kind: FailureKind) -> None: ...


class StructlogFailureObserver:
    """Default observer: warnings for business failures, errors with traceback otherwise."""

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger or get_logger(__name__)

    def on_failure(self, label: str, kind: FailureKind) -> None:
        if isinstance(kind, UnexpectedCondition):
            self._logger.error(
                "operation_error",
                operation=label,
                context=kind.context,
                after_save=kind.after_save,
                exc_info=kind.cause,
            )
        elif isinstance(kind, ValidationFailure):
            self._logger.warning(
                "operation_failed",
                operation=label,
                reason=kind.message,
                invalid_fields=[iv.field for iv in kind.invalid_values],
            )
        else:
            self._logger.warning("operation_failed", operation=label, reason=kind.message)


default_observer: FailureObserver = StructlogFailureObserver()


async def resolve_step(value: T | Awaitable[T]) -> T:
    if inspect.isawaitable(value):
        return await value
    return value


def classify(label: str, exc: Exception) -> FailureKind:
    if isinstance(exc, RuleViolation):
        return GeneralFailure(exc.message)
    if isinstance(exc, ValidationViolation):
        return ValidationFailure(
            context=label,
            invalid_values=exc.invalid_values,
            message=f"{label}: {exc.message}",
        )
    return UnexpectedCondition(context=label, cause=exc)


def report(label: str, kind: FailureKind, observer: FailureObserver | None = None) -> Failure:
    """Hand ``kind`` to the observer and wrap it; a broken observer never hides the failure."""
    try:
        (observer or default_observer).on_failure(label, kind)
    except Exception:
        logger.exception("failure_observer_error", operation=label, reason=kind.message)
    return Failure(kind)


async def run_protected(
    label: str, body: Step[T], *, observer: FailureObserver | None = None
) -> Outcome[T]:
    """Run ``body`` and map its completion or exception onto an ``Outcome``.

    Business signals become ``GeneralFailure``/``ValidationFailure``; any other
    ``Exception`` becomes ``UnexpectedCondition`` carrying the cause.
    """
    try:
        value = await resolve_step(body())
    except Exception as exc:
        return report(label, classify(label, exc), observer)
    return Success(value)
