"""Read projections of employees."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from personnel.schemas.employee import Gender


class EmployeeDTO(BaseModel):
    id: str = Field(description="Id del empleado")
    code: str = Field(description="Código (clave natural)")
    name: str = Field(description="Nombre")
    gender: Gender = Field(description="Género")
    job_title: str = Field(description="Cargo")
    supervisor_id: str | None = Field(default=None, description="Id del supervisor (opcional)")
    hire_date: date = Field(description="Fecha de contratación")
    salary: Decimal = Field(description="Salario")
    commission: Decimal | None = Field(default=None, description="Comisión (opcional)")
    department_id: str = Field(description="Id del departamento")

    model_config = ConfigDict(from_attributes=True, frozen=True)
