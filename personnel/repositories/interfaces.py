"""Repository abstractions for the service layer."""

from __future__ import annotations

from typing import Protocol, TypeVar

from personnel.models.department import Department
from personnel.models.employee import Employee

E = TypeVar("E")
K = TypeVar("K", contravariant=True)


class EntityRepository(Protocol[E, K]):
    """Storage capability the pipelines require for one entity type."""

    async def get_by_id(self, entity_id: K) -> E | None: ...

    async def find_by_natural_key(self, *key: object) -> E | None: ...

    async def save_and_flush(self, entity: E) -> E: ...


class DepartmentRepository(EntityRepository[Department, str], Protocol):
    async def find_by_code(self, code: str) -> Department | None: ...

    async def count(self) -> int: ...


class EmployeeRepository(EntityRepository[Employee, str], Protocol):
    async def find_by_code(self, code: str) -> Employee | None: ...

    async def count(self) -> int: ...

    async def list_by_department(self, department_id: str) -> list[Employee]: ...
