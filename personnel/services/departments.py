"""Department use cases composed with the result DSL."""

from __future__ import annotations

from personnel.core.outcome import Outcome, Success
from personnel.dsl import (
    FailureObserver,
    OperationContext,
    create_entity,
    duplicate_check,
    query_entity,
    required,
    update_entity,
)
from personnel.dsl.classifier import default_observer
from personnel.dto import DepartmentDTO
from personnel.dto.mappers import map_department
from personnel.infra.unit_of_work import UnitOfWork, UnitOfWorkFactory, transactional
from personnel.logging import get_logger
from personnel.models import Department
from personnel.services.notification import EventPublisher

logger = get_logger(__name__)


class DepartmentService:
    """Use cases for creating, relocating and reading departments."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        publisher: EventPublisher,
        observer: FailureObserver | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._publisher = publisher
        self._observer = observer or default_observer

    def _context(self, label: str, uow: UnitOfWork) -> OperationContext[Department, str]:
        return OperationContext(label, uow.departments, self._observer)

    async def create_department(self, code: str, name: str, locality: str) -> Outcome[str]:
        label = f"Crear departamento {name}"

        async def work(uow: UnitOfWork) -> Outcome[str]:
            return await create_entity(
                self._context(label, uow),
                lambda: Department.create(code=code, name=name, locality=locality),
                duplicate=duplicate_check(uow.departments.find_by_code, code),
            )

        outcome = await transactional(
            self._uow_factory, work, label=label, observer=self._observer
        )
        if isinstance(outcome, Success):
            logger.info("department_created", department_id=outcome.value, code=code)
        return outcome

    async def relocate(self, department_id: str, new_locality: str) -> Outcome[None]:
        label = f"Relocalizar departamento {department_id} a {new_locality}"

        async def work(uow: UnitOfWork) -> Outcome[None]:
            return await update_entity(
                self._context(label, uow),
                required(uow.departments, department_id),
                lambda department: department.relocate(new_locality),
                propagate=lambda _, relocated: self._publisher.publish(relocated),
            )

        outcome = await transactional(
            self._uow_factory, work, label=label, observer=self._observer
        )
        if isinstance(outcome, Success):
            logger.info(
                "department_relocated", department_id=department_id, locality=new_locality
            )
        return outcome

    async def get_department(self, department_id: str) -> Outcome[DepartmentDTO]:
        label = f"Consultar departamento {department_id}"

        async def work(uow: UnitOfWork) -> Outcome[DepartmentDTO]:
            return await query_entity(
                self._context(label, uow),
                required(uow.departments, department_id),
                map_department,
            )

        return await transactional(self._uow_factory, work, label=label, observer=self._observer)
