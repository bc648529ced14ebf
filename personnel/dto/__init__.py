"""Public DTO exports for read projections."""

from .department import DepartmentDTO
from .employee import EmployeeDTO

__all__ = [
    "DepartmentDTO",
    "EmployeeDTO",
]
