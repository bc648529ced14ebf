"""SQLAlchemy implementation of the employee repository."""

from __future__ import annotations

from sqlalchemy import select

from personnel.models import Employee
from personnel.repositories.sqlalchemy.base import SqlAlchemyRepository


class SqlAlchemyEmployeeRepository(SqlAlchemyRepository[Employee]):
    model = Employee
    natural_key = ("code",)

    async def find_by_code(self, code: str) -> Employee | None:
        return await self.find_by_natural_key(code)

    async def list_by_department(self, department_id: str) -> list[Employee]:
        stmt = (
            select(Employee)
            .where(Employee.department_id == department_id)
            .order_by(Employee.code.asc())
        )
        return list((await self._session.scalars(stmt)).all())
