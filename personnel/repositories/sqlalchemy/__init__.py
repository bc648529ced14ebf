"""SQLAlchemy implementations of repository interfaces."""

from .department import SqlAlchemyDepartmentRepository
from .employee import SqlAlchemyEmployeeRepository

__all__ = [
    "SqlAlchemyDepartmentRepository",
    "SqlAlchemyEmployeeRepository",
]
