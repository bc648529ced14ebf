"""Utilities to map ORM entities into DTOs."""

from __future__ import annotations

from collections.abc import Iterable

from personnel.dto import DepartmentDTO, EmployeeDTO
from personnel.models import Department, Employee


def map_department(department: Department) -> DepartmentDTO:
    return DepartmentDTO.model_validate(department)


def map_employee(employee: Employee) -> EmployeeDTO:
    return EmployeeDTO.model_validate(employee)


def map_employees(employees: Iterable[Employee]) -> list[EmployeeDTO]:
    return [map_employee(e) for e in employees]
