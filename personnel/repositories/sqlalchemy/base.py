"""Shared SQLAlchemy implementation of the entity repository capability."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from personnel.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """find-by-id / find-by-natural-key / save-and-flush over an AsyncSession.

    Subclasses name the mapped class and the columns forming its natural key.
    """

    model: ClassVar[type[Any]]
    natural_key: ClassVar[tuple[str, ...]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def find_by_natural_key(self, *key: object) -> ModelT | None:
        if len(key) != len(self.natural_key):
            raise ValueError(
                f"{self.model.__name__} natural key expects {len(self.natural_key)} value(s)"
            )
        stmt = select(self.model)
        for column, value in zip(self.natural_key, key):
            stmt = stmt.where(getattr(self.model, column) == value)
        return (await self._session.scalars(stmt)).first()

    async def save_and_flush(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return int((await self._session.execute(stmt)).scalar_one())
