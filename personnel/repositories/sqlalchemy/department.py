"""SQLAlchemy implementation of the department repository."""

from __future__ import annotations

from personnel.models import Department
from personnel.repositories.sqlalchemy.base import SqlAlchemyRepository


class SqlAlchemyDepartmentRepository(SqlAlchemyRepository[Department]):
    model = Department
    natural_key = ("code",)

    async def find_by_code(self, code: str) -> Department | None:
        return await self.find_by_natural_key(code)
