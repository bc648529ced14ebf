from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, constr


class DepartmentFields(BaseModel):
    code: constr(strip_whitespace=True, min_length=1, max_length=10) = Field(
        description="Código del departamento (clave natural)"
    )
    name: constr(strip_whitespace=True, min_length=1) = Field(description="Nombre")
    locality: constr(strip_whitespace=True, min_length=1) = Field(description="Localidad")

    model_config = ConfigDict(frozen=True)
