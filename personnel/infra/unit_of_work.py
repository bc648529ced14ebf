"""Unit of Work abstraction used by the service layer.

The unit of work owns the transaction: service methods run their pipeline
inside ``transactional`` and the pipelines themselves never commit.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from personnel.core.outcome import Failure, Outcome, UnexpectedCondition
from personnel.dsl.classifier import FailureObserver, report
from personnel.repositories.interfaces import DepartmentRepository, EmployeeRepository
from personnel.repositories.sqlalchemy import (
    SqlAlchemyDepartmentRepository,
    SqlAlchemyEmployeeRepository,
)

T = TypeVar("T")


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    """Defines the repository boundary exposed to services."""

    departments: DepartmentRepository
    employees: EmployeeRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


UnitOfWorkFactory = Callable[[], UnitOfWork]


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self.departments: DepartmentRepository
        self.employees: EmployeeRepository

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        session = self._session_factory()
        self._session = session
        self.departments = SqlAlchemyDepartmentRepository(session)
        self.employees = SqlAlchemyEmployeeRepository(session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is None:
            return
        try:
            if exc_type:
                await self._session.rollback()
            else:
                await self._session.commit()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        if self._session is not None:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()


def keeps_changes(outcome: Outcome[object]) -> bool:
    if not isinstance(outcome, Failure):
        return True
    kind = outcome.kind
    return isinstance(kind, UnexpectedCondition) and kind.after_save


async def transactional(
    uow_factory: UnitOfWorkFactory,
    work: Callable[[UnitOfWork], Awaitable[Outcome[T]]],
    *,
    label: str = "transacción",
    observer: FailureObserver | None = None,
) -> Outcome[T]:
    """Run ``work`` in one unit of work.

    Successful outcomes commit. Failures roll back, except a failure after the
    save, whose change has already been accepted. A storage error while
    finishing the transaction is returned as an ``UnexpectedCondition``.
    """
    try:
        async with uow_factory() as uow:
            outcome = await work(uow)
            if keeps_changes(outcome):
                await uow.commit()
            else:
                await uow.rollback()
    except Exception as exc:
        return report(label, UnexpectedCondition(context=label, cause=exc), observer)
    return outcome
