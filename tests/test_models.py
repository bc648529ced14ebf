from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from personnel.core.exceptions import RuleViolation, ValidationViolation
from personnel.events import DepartmentRelocated
from personnel.models import Department, Employee, Gender
from tests.factories import make_department, make_employee


def test_department_create_strips_fields():
    department = Department.create(code=" 10 ", name=" Contabilidad ", locality="Quito ")

    assert department.code == "10"
    assert (department.name, department.locality) == ("Contabilidad", "Quito")


def test_department_create_rejects_long_code():
    with pytest.raises(ValidationViolation) as exc_info:
        Department.create(code="X" * 11, name="Ventas", locality="Bogota")

    [invalid] = exc_info.value.invalid_values
    assert invalid.field == "code"
    assert invalid.value == "X" * 11


def test_relocate_returns_event_with_previous_locality():
    department = make_department("10", locality="Quito")

    event = department.relocate("Lima")

    assert department.locality == "Lima"
    assert event == DepartmentRelocated(
        department_id=department.id, code="10", previous_locality="Quito", new_locality="Lima"
    )
    assert event.to_payload()["event"] == "department_relocated"


@pytest.mark.parametrize("locality", [None, "", "   "])
def test_relocate_to_blank_locality_is_a_rule_violation(locality):
    department = make_department(locality="Quito")

    with pytest.raises(RuleViolation):
        department.relocate(locality)
    assert department.locality == "Quito"


def test_employee_create_links_department_and_supervisor():
    department = make_department()
    boss = make_employee(department, code="7839", name="King")

    employee = Employee.create(
        code="7499",
        name="Allen",
        gender="MALE",
        job_title="Vendedor",
        supervisor=boss,
        hire_date=date(2011, 2, 20),
        salary=Decimal(8000),
        commission=None,
        department=department,
    )

    assert employee.gender is Gender.MALE
    assert employee.supervisor_id == boss.id
    assert employee.department_id == department.id
    assert employee.commission is None


def test_employee_create_reports_every_invalid_field():
    department = make_department()

    with pytest.raises(ValidationViolation) as exc_info:
        Employee.create(
            code="7499",
            name="",
            gender="OTHER",
            job_title="Vendedor",
            supervisor=None,
            hire_date=date(2011, 2, 20),
            salary=Decimal(0),
            commission=Decimal(-1),
            department=department,
        )

    fields = {iv.field for iv in exc_info.value.invalid_values}
    assert fields == {"name", "gender", "salary", "commission"}


def test_reassign_updates_assignment():
    quito = make_department("10")
    bogota = make_department("30", "Ventas", "Bogota")
    king = make_employee(quito, code="7839", name="King")
    allen = make_employee(bogota)

    allen.reassign(
        department=quito,
        job_title="Oficinista",
        supervisor=king,
        salary=Decimal(5000),
        commission=None,
    )

    assert allen.department_id == quito.id
    assert allen.job_title == "Oficinista"
    assert allen.supervisor_id == king.id
    assert allen.salary == Decimal(5000)
    assert allen.commission is None


def test_employee_cannot_supervise_themself():
    department = make_department()
    allen = make_employee(department)

    with pytest.raises(RuleViolation, match="no puede supervisarse"):
        allen.reassign(
            department=department,
            job_title="Vendedor",
            supervisor=allen,
            salary=Decimal(8000),
            commission=None,
        )
