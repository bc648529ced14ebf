from __future__ import annotations

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from personnel.core.exceptions import RuleViolation
from personnel.events import DepartmentRelocated
from personnel.models.base import Base, new_id
from personnel.schemas.common import validate_fields
from personnel.schemas.department import DepartmentFields


class Department(Base):
    __tablename__ = "departments"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(String(36), primary_key=True, default=new_id)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    locality = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @classmethod
    def create(cls, *, code: str, name: str, locality: str) -> Department:
        fields = validate_fields(
            DepartmentFields,
            "datos de departamento inválidos",
            code=code,
            name=name,
            locality=locality,
        )
        return cls(code=fields.code, name=fields.name, locality=fields.locality)

    def relocate(self, new_locality: str | None) -> DepartmentRelocated:
        locality = (new_locality or "").strip()
        if not locality:
            raise RuleViolation(f"localidad inválida para el departamento {self.code}")
        if locality == self.locality:
            raise RuleViolation(f"el departamento {self.code} ya está en {locality}")
        previous = self.locality
        self.locality = locality
        return DepartmentRelocated(
            department_id=self.id,
            code=self.code,
            previous_locality=previous,
            new_locality=locality,
        )
