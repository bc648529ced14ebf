"""Employee use cases composed with the result DSL."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from personnel.core.outcome import Outcome, Success
from personnel.dsl import (
    FailureObserver,
    OperationContext,
    create_entity,
    duplicate_check,
    found,
    optional,
    query_entity,
    required,
    resolve_then,
    update_entity,
    with_resolved,
)
from personnel.dsl.classifier import default_observer
from personnel.dto import EmployeeDTO
from personnel.dto.mappers import map_employee, map_employees
from personnel.infra.unit_of_work import UnitOfWork, UnitOfWorkFactory, transactional
from personnel.logging import get_logger
from personnel.models import Department, Employee, Gender

logger = get_logger(__name__)


class EmployeeService:
    """Use cases for hiring, reassigning and reading employees."""

    def __init__(
        self, uow_factory: UnitOfWorkFactory, observer: FailureObserver | None = None
    ) -> None:
        self._uow_factory = uow_factory
        self._observer = observer or default_observer

    def _context(self, label: str, uow: UnitOfWork) -> OperationContext[Employee, str]:
        return OperationContext(label, uow.employees, self._observer)

    async def create_employee(
        self,
        code: str,
        name: str,
        gender: Gender | str,
        job_title: str,
        supervisor_id: str | None,
        hire_date: date,
        salary: Decimal,
        commission: Decimal | None,
        department_id: str,
    ) -> Outcome[str]:
        label = f"Crear empleado {name}"

        async def work(uow: UnitOfWork) -> Outcome[str]:
            context = self._context(label, uow)

            def hire(supervisor: Employee | None, department: Department):
                return create_entity(
                    context,
                    lambda: Employee.create(
                        code=code,
                        name=name,
                        gender=gender,
                        job_title=job_title,
                        supervisor=supervisor,
                        hire_date=hire_date,
                        salary=salary,
                        commission=commission,
                        department=department,
                    ),
                    duplicate=duplicate_check(uow.employees.find_by_code, code),
                )

            return await with_resolved(
                context,
                [optional(uow.employees, supervisor_id), required(uow.departments, department_id)],
                hire,
            )

        outcome = await transactional(
            self._uow_factory, work, label=label, observer=self._observer
        )
        if isinstance(outcome, Success):
            logger.info("employee_created", employee_id=outcome.value, code=code)
        return outcome

    async def reassign(
        self,
        employee_id: str,
        department_id: str,
        job_title: str,
        supervisor_id: str | None,
        salary: Decimal,
        commission: Decimal | None,
    ) -> Outcome[None]:
        label = f"Reasignar empleado {employee_id}"

        async def work(uow: UnitOfWork) -> Outcome[None]:
            context = self._context(label, uow)

            def apply(employee: Employee, department: Department, supervisor: Employee | None):
                return update_entity(
                    context,
                    found(employee),
                    lambda e: e.reassign(
                        department=department,
                        job_title=job_title,
                        supervisor=supervisor,
                        salary=salary,
                        commission=commission,
                    ),
                )

            return await with_resolved(
                context,
                [
                    required(uow.employees, employee_id),
                    required(uow.departments, department_id),
                    optional(uow.employees, supervisor_id),
                ],
                apply,
            )

        outcome = await transactional(
            self._uow_factory, work, label=label, observer=self._observer
        )
        if isinstance(outcome, Success):
            logger.info("employee_reassigned", employee_id=employee_id, department_id=department_id)
        return outcome

    async def get_employee(self, employee_id: str) -> Outcome[EmployeeDTO]:
        label = f"Consultar empleado {employee_id}"

        async def work(uow: UnitOfWork) -> Outcome[EmployeeDTO]:
            return await query_entity(
                self._context(label, uow),
                required(uow.employees, employee_id),
                map_employee,
            )

        return await transactional(self._uow_factory, work, label=label, observer=self._observer)

    async def list_by_department(self, department_id: str) -> Outcome[list[EmployeeDTO]]:
        label = f"Listar empleados del departamento {department_id}"

        async def work(uow: UnitOfWork) -> Outcome[list[EmployeeDTO]]:
            async def staff(department: Department) -> list[EmployeeDTO]:
                return map_employees(await uow.employees.list_by_department(department.id))

            return await query_entity(
                self._context(label, uow),
                required(uow.departments, department_id),
                staff,
            )

        return await transactional(self._uow_factory, work, label=label, observer=self._observer)

    async def reports_to(self, employee_id: str, supervisor_id: str) -> Outcome[bool]:
        label = f"Verificar supervisor de {employee_id}"

        async def work(uow: UnitOfWork) -> Outcome[bool]:
            return await resolve_then(
                self._context(label, uow),
                [required(uow.employees, employee_id), required(uow.employees, supervisor_id)],
                lambda employee, supervisor: employee.supervisor_id == supervisor.id,
            )

        return await transactional(self._uow_factory, work, label=label, observer=self._observer)
