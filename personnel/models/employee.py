from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Numeric, String
from sqlalchemy.sql import func

from personnel.core.exceptions import RuleViolation
from personnel.models.base import Base, new_id
from personnel.models.department import Department
from personnel.schemas.common import validate_fields
from personnel.schemas.employee import AssignmentFields, EmployeeFields, Gender


class Employee(Base):
    __tablename__ = "employees"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(String(36), primary_key=True, default=new_id)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    gender = Column(Enum(Gender, name="gender"), nullable=False)
    job_title = Column(String, nullable=False)
    # Self reference: managers are employees too
    supervisor_id = Column(String(36), ForeignKey("employees.id"), nullable=True, index=True)
    hire_date = Column(Date, nullable=False)
    salary = Column(Numeric(12, 2), nullable=False)
    commission = Column(Numeric(12, 2), nullable=True)
    department_id = Column(
        String(36), ForeignKey("departments.id"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @classmethod
    def create(
        cls,
        *,
        code: str,
        name: str,
        gender: Gender | str,
        job_title: str,
        supervisor: Employee | None,
        hire_date: date,
        salary: Decimal,
        commission: Decimal | None,
        department: Department,
    ) -> Employee:
        fields = validate_fields(
            EmployeeFields,
            "datos de empleado inválidos",
            code=code,
            name=name,
            gender=gender,
            job_title=job_title,
            hire_date=hire_date,
            salary=salary,
            commission=commission,
        )
        return cls(
            code=fields.code,
            name=fields.name,
            gender=fields.gender,
            job_title=fields.job_title,
            supervisor_id=supervisor.id if supervisor is not None else None,
            hire_date=fields.hire_date,
            salary=fields.salary,
            commission=fields.commission,
            department_id=department.id,
        )

    def reassign(
        self,
        *,
        department: Department,
        job_title: str,
        supervisor: Employee | None,
        salary: Decimal,
        commission: Decimal | None,
    ) -> None:
        if supervisor is not None and supervisor.id == self.id:
            raise RuleViolation(f"el empleado {self.code} no puede supervisarse a sí mismo")
        fields = validate_fields(
            AssignmentFields,
            "datos de asignación inválidos",
            job_title=job_title,
            salary=salary,
            commission=commission,
        )
        self.department_id = department.id
        self.job_title = fields.job_title
        self.supervisor_id = supervisor.id if supervisor is not None else None
        self.salary = fields.salary
        self.commission = fields.commission
