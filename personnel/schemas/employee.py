from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, constr


class Gender(str, Enum):
    FEMALE = "FEMALE"
    MALE = "MALE"


class AssignmentFields(BaseModel):
    """Fields that change when an employee is (re)assigned."""

    job_title: constr(strip_whitespace=True, min_length=1) = Field(description="Cargo")
    salary: Decimal = Field(gt=0, max_digits=12, decimal_places=2, description="Salario")
    commission: Decimal | None = Field(
        default=None, ge=0, max_digits=12, decimal_places=2, description="Comisión (opcional)"
    )

    model_config = ConfigDict(frozen=True)


class EmployeeFields(AssignmentFields):
    code: constr(strip_whitespace=True, min_length=1, max_length=10) = Field(
        description="Código del empleado (clave natural)"
    )
    name: constr(strip_whitespace=True, min_length=1) = Field(description="Nombre")
    gender: Gender = Field(description="Género")
    hire_date: date = Field(description="Fecha de contratación")
