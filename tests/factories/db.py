from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


async def count_rows(session_factory: async_sessionmaker[AsyncSession], model) -> int:
    async with session_factory() as session:
        return int(
            (await session.execute(select(func.count()).select_from(model))).scalar_one()
        )


async def load(session_factory: async_sessionmaker[AsyncSession], model, entity_id: str):
    async with session_factory() as session:
        return await session.get(model, entity_id)
