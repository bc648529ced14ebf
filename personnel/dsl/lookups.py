"""Id resolution combinators.

Lookups raise ``RuleViolation`` instead of returning outcomes: they run inside
pipeline steps and the enclosing pipeline classifies the signal.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from personnel.core.exceptions import RuleViolation
from personnel.repositories.interfaces import EntityRepository

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
K = TypeVar("K")


def not_found(entity_id: object) -> RuleViolation:
    return RuleViolation(f"Id no encontrado: {entity_id}")


async def resolve_required(repository: EntityRepository[E, K], entity_id: K | None) -> E:
    if entity_id is None:
        raise not_found(entity_id)
    entity = await repository.get_by_id(entity_id)
    if entity is None:
        raise not_found(entity_id)
    return entity


async def resolve_optional(repository: EntityRepository[E, K], entity_id: K | None) -> E | None:
    """Resolve an id the caller may omit.

    No id means "no entity"; an id that matches nothing is a dangling reference
    and fails like a required lookup.
    """
    if entity_id is None:
        return None
    return await resolve_required(repository, entity_id)


@dataclass(frozen=True)
class Lookup(Generic[E]):
    """A deferred lookup; awaiting ``lookup()`` performs the resolution."""

    resolve: Callable[[], Awaitable[E]]

    def __call__(self) -> Awaitable[E]:
        return self.resolve()


def required(repository: EntityRepository[E, K], entity_id: K | None) -> Lookup[E]:
    return Lookup(lambda: resolve_required(repository, entity_id))


def optional(repository: EntityRepository[E, K], entity_id: K | None) -> Lookup[E | None]:
    return Lookup(lambda: resolve_optional(repository, entity_id))


def found(entity: E) -> Lookup[E]:
    """Wrap an entity that is already resolved so it can be used as a locate step."""

    async def _resolved() -> E:
        return entity

    return Lookup(_resolved)


async def resolve_by_ids(*lookups: Lookup[Any]) -> tuple[Any, ...]:
    # Strictly left-to-right: a failing lookup stops before the next one runs.
    resolved = []
    for lookup in lookups:
        resolved.append(await lookup())
    return tuple(resolved)


async def resolve_by_ids2(first: Lookup[A], second: Lookup[B]) -> tuple[A, B]:
    a, b = await resolve_by_ids(first, second)
    return a, b


async def resolve_by_ids3(first: Lookup[A], second: Lookup[B], third: Lookup[C]) -> tuple[A, B, C]:
    a, b, c = await resolve_by_ids(first, second, third)
    return a, b, c


@dataclass(frozen=True)
class DuplicateCheck:
    """Natural-key probe run before an entity is built."""

    finder: Callable[[Any], Awaitable[Any]]
    key: Any

    async def __call__(self) -> None:
        if await self.finder(self.key) is not None:
            raise RuleViolation(f"clave duplicada: {self.key}")


def duplicate_check(finder: Callable[[Any], Awaitable[Any]], key: Any) -> DuplicateCheck:
    return DuplicateCheck(finder, key)
