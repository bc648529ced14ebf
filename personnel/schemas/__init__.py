from .common import validate_fields
from .department import DepartmentFields
from .employee import AssignmentFields, EmployeeFields, Gender

__all__ = [
    "validate_fields",
    "DepartmentFields",
    "AssignmentFields",
    "EmployeeFields",
    "Gender",
]
