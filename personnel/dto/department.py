"""Read projections of departments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DepartmentDTO(BaseModel):
    id: str = Field(description="Id del departamento")
    code: str = Field(description="Código (clave natural)")
    name: str = Field(description="Nombre")
    locality: str = Field(description="Localidad")

    model_config = ConfigDict(from_attributes=True, frozen=True)
