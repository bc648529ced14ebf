"""Create, update and query pipelines composed from lookups and the classifier.

Every pipeline returns an ``Outcome`` and never raises for an ``Exception``.
Pipelines assume the caller has opened a transaction (see
``personnel.infra.unit_of_work.transactional``); they flush through the
repository but never commit or roll back themselves.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar, Union

from personnel.core.exceptions import RuleViolation
from personnel.core.outcome import Failure, Outcome, Success, UnexpectedCondition
from personnel.dsl.classifier import FailureObserver, report, resolve_step, run_protected
from personnel.dsl.context import OperationContext
from personnel.dsl.lookups import DuplicateCheck, Lookup, resolve_by_ids

E = TypeVar("E")
K = TypeVar("K")
M = TypeVar("M")
R = TypeVar("R")

Locate = Callable[[], Union[E, Awaitable[E]]]


def entity_id(entity: Any) -> Any:
    return entity.id


async def _mutating(label: str, mutate: Callable[[E], M | Awaitable[M]], entity: E) -> M:
    try:
        return await resolve_step(mutate(entity))
    except RuleViolation as exc:
        # Name the attempted update next to the domain's own message.
        raise RuleViolation(f"{label}: {exc.message}") from exc


async def _after_save(
    label: str, step: Callable[[], Any], observer: FailureObserver | None
) -> Outcome[Any]:
    # The change is already flushed: every failure here is unexpected and keeps it.
    try:
        return Success(await resolve_step(step()))
    except Exception as exc:
        kind = UnexpectedCondition(context=label, cause=exc, after_save=True)
        return report(label, kind, observer)


async def create_entity(
    context: OperationContext[E, K],
    construct: Callable[[], E | Awaitable[E]],
    *,
    duplicate: DuplicateCheck | None = None,
    identity: Callable[[E], R] = entity_id,
) -> Outcome[R]:
    """Check for a duplicate, build the entity in memory, persist it, project its identity.

    Neither the duplicate check nor construction touches storage, so a failure
    before the save leaves nothing written.
    """
    label = context.label
    observer = context.observer

    if duplicate is not None:
        checked = await run_protected(label, duplicate, observer=observer)
        if isinstance(checked, Failure):
            return checked

    built = await run_protected(label, construct, observer=observer)
    if isinstance(built, Failure):
        return built

    saved = await run_protected(
        label, lambda: context.repository.save_and_flush(built.value), observer=observer
    )
    if isinstance(saved, Failure):
        return saved

    return await run_protected(label, lambda: identity(saved.value), observer=observer)


async def update_entity(
    context: OperationContext[E, K],
    locate: Locate[E],
    mutate: Callable[[E], M | Awaitable[M]],
    *,
    propagate: Callable[[E, M], Any] | None = None,
    result: Callable[[E], R] | None = None,
) -> Outcome[R | None]:
    """Locate, mutate in place, save and optionally propagate the change.

    ``propagate`` receives the saved entity and whatever ``mutate`` returned.
    Once the save succeeded, a failure in ``propagate`` or ``result`` does not
    undo it: it is reported as an ``UnexpectedCondition`` flagged ``after_save``.
    """
    label = context.label
    observer = context.observer

    located = await run_protected(label, locate, observer=observer)
    if isinstance(located, Failure):
        return located
    entity = located.value

    changed = await run_protected(
        label, lambda: _mutating(label, mutate, entity), observer=observer
    )
    if isinstance(changed, Failure):
        return changed

    saved = await run_protected(
        label, lambda: context.repository.save_and_flush(entity), observer=observer
    )
    if isinstance(saved, Failure):
        return saved

    if propagate is not None:
        propagated = await _after_save(
            f"{label} (propagación)", lambda: propagate(saved.value, changed.value), observer
        )
        if isinstance(propagated, Failure):
            return propagated

    if result is None:
        return Success(None)
    return await _after_save(label, lambda: result(saved.value), observer)


async def query_entity(
    context: OperationContext[E, K],
    locate: Locate[E],
    project: Callable[[E], R | Awaitable[R]],
) -> Outcome[R]:
    """Locate and project without writing anything."""
    label = context.label

    located = await run_protected(label, locate, observer=context.observer)
    if isinstance(located, Failure):
        return located

    return await run_protected(label, lambda: project(located.value), observer=context.observer)


async def with_resolved(
    context: OperationContext[E, K],
    lookups: Sequence[Lookup[Any]],
    action: Callable[..., Outcome[R] | Awaitable[Outcome[R]]],
) -> Outcome[R]:
    """Resolve every lookup, then hand the entities to an action that returns an outcome."""
    resolved = await run_protected(
        context.label, lambda: resolve_by_ids(*lookups), observer=context.observer
    )
    if isinstance(resolved, Failure):
        return resolved

    outcome = await run_protected(
        context.label, lambda: action(*resolved.value), observer=context.observer
    )
    # A plain value from the action is already wrapped by ``run_protected``.
    if isinstance(outcome, Failure) or not isinstance(outcome.value, (Success, Failure)):
        return outcome
    return outcome.value


async def resolve_then(
    context: OperationContext[E, K],
    lookups: Sequence[Lookup[Any]],
    action: Callable[..., R | Awaitable[R]],
) -> Outcome[R]:
    """Resolve every lookup, then wrap the plain value produced by ``action``."""
    resolved = await run_protected(
        context.label, lambda: resolve_by_ids(*lookups), observer=context.observer
    )
    if isinstance(resolved, Failure):
        return resolved

    return await run_protected(
        context.label, lambda: action(*resolved.value), observer=context.observer
    )
