from __future__ import annotations

import pytest

from personnel.core.exceptions import RuleViolation
from personnel.dsl.lookups import (
    duplicate_check,
    found,
    optional,
    required,
    resolve_by_ids,
    resolve_by_ids2,
    resolve_by_ids3,
    resolve_optional,
    resolve_required,
)
from tests.factories import InMemoryRepository, make_department, make_employee


@pytest.fixture
def department():
    return make_department()


@pytest.fixture
def departments(department):
    return InMemoryRepository(department)


@pytest.mark.asyncio
async def test_resolve_required_returns_entity(departments, department):
    assert await resolve_required(departments, department.id) is department


@pytest.mark.asyncio
async def test_resolve_required_missing_row_names_the_id(departments):
    with pytest.raises(RuleViolation, match="Id no encontrado: 9999"):
        await resolve_required(departments, "9999")


@pytest.mark.asyncio
async def test_resolve_required_without_id_is_an_error(departments):
    with pytest.raises(RuleViolation):
        await resolve_required(departments, None)
    assert departments.lookups == []


@pytest.mark.asyncio
async def test_resolve_optional_without_id_is_no_entity(departments):
    assert await resolve_optional(departments, None) is None
    assert departments.lookups == []


@pytest.mark.asyncio
async def test_resolve_optional_dangling_id_is_an_error(departments):
    with pytest.raises(RuleViolation, match="Id no encontrado: 42"):
        await resolve_optional(departments, "42")


@pytest.mark.asyncio
async def test_resolve_by_ids2_resolves_left_to_right(departments, department):
    employee = make_employee(department)
    employees = InMemoryRepository(employee)

    resolved = await resolve_by_ids2(
        required(employees, employee.id), required(departments, department.id)
    )

    assert resolved == (employee, department)


@pytest.mark.asyncio
async def test_first_missing_id_short_circuits_the_rest(departments, department):
    employees = InMemoryRepository()

    with pytest.raises(RuleViolation, match="Id no encontrado: nadie"):
        await resolve_by_ids2(required(employees, "nadie"), required(departments, department.id))

    assert departments.lookups == []


@pytest.mark.asyncio
async def test_resolve_by_ids3_accepts_optional_lookups(departments, department):
    boss = make_employee(department, code="7839", name="King")
    employees = InMemoryRepository(boss)

    resolved = await resolve_by_ids3(
        required(departments, department.id),
        optional(employees, None),
        optional(employees, boss.id),
    )

    assert resolved == (department, None, boss)


@pytest.mark.asyncio
async def test_resolve_by_ids_with_found_entity(department):
    assert await resolve_by_ids(found(department)) == (department,)


@pytest.mark.asyncio
async def test_duplicate_check_passes_for_unknown_key(departments):
    await duplicate_check(departments.find_by_code, "99")()


@pytest.mark.asyncio
async def test_duplicate_check_rejects_existing_key(departments):
    check = duplicate_check(departments.find_by_code, "10")

    with pytest.raises(RuleViolation, match="clave duplicada: 10"):
        await check()
