# Module imports so Base.metadata knows every table
# personnel/models/__init__.py
from .base import Base
from .department import Department
from .employee import Employee, Gender

__all__ = [
    "Base",
    "Department",
    "Employee",
    "Gender",
]
