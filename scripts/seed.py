# scripts/seed.py
"""
Seed the reference departments and employees through the service layer.

Every record goes through the same pipelines the application uses, so a second
run stops at the first duplicate key instead of writing twins.
"""

import argparse
import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

# Run from the repository root
sys.path.append(os.path.abspath("."))

from personnel.core.outcome import Failure
from personnel.models import Gender
from personnel.services.departments import DepartmentService
from personnel.services.employees import EmployeeService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepartmentSeed:
    code: str
    name: str
    locality: str


@dataclass(frozen=True)
class EmployeeSeed:
    code: str
    name: str
    gender: Gender
    job_title: str
    supervisor_code: str | None
    hire_date: date
    salary: Decimal
    commission: Decimal | None
    department_code: str


DEPARTMENTS: list[DepartmentSeed] = [
    DepartmentSeed("10", "Contabilidad", "Quito"),
    DepartmentSeed("20", "Investigación", "Sunrise"),
    DepartmentSeed("30", "Ventas", "Bogota"),
]

# Supervisors are listed before the people reporting to them.
EMPLOYEES: list[EmployeeSeed] = [
    EmployeeSeed(
        "7839", "King", Gender.FEMALE, "Presidente", None,
        date(2011, 11, 17), Decimal(15000), None, "10",
    ),
    EmployeeSeed(
        "7566", "Jones", Gender.MALE, "Gerente", "7839",
        date(2011, 4, 2), Decimal(14875), None, "20",
    ),
    EmployeeSeed(
        "7698", "Blake", Gender.MALE, "Gerente", "7839",
        date(2011, 1, 1), Decimal(14250), None, "30",
    ),
    EmployeeSeed(
        "7499", "Allen", Gender.MALE, "Vendedor", "7698",
        date(2011, 2, 20), Decimal(8000), Decimal(1500), "30",
    ),
]


class SeedError(RuntimeError):
    pass


async def seed(
    department_service: DepartmentService, employee_service: EmployeeService
) -> dict[str, str]:
    """Create the reference data and return the generated ids keyed by code."""

    department_ids: dict[str, str] = {}
    for d in DEPARTMENTS:
        outcome = await department_service.create_department(d.code, d.name, d.locality)
        if isinstance(outcome, Failure):
            raise SeedError(outcome.message)
        department_ids[d.code] = outcome.value
        logger.info("department %s seeded (%s)", d.code, outcome.value)

    employee_ids: dict[str, str] = {}
    for e in EMPLOYEES:
        outcome = await employee_service.create_employee(
            e.code,
            e.name,
            e.gender,
            e.job_title,
            employee_ids.get(e.supervisor_code) if e.supervisor_code else None,
            e.hire_date,
            e.salary,
            e.commission,
            department_ids[e.department_code],
        )
        if isinstance(outcome, Failure):
            raise SeedError(outcome.message)
        employee_ids[e.code] = outcome.value
        logger.info("employee %s seeded (%s)", e.code, outcome.value)

    return {**department_ids, **employee_ids}


async def create_schema() -> None:
    from personnel import db
    from personnel.models import Base

    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed reference departments and employees.")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (default: DATABASE_URL from the environment/.env).",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding.",
    )
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    from personnel import db, deps
    from personnel.logging import setup_logging

    setup_logging()
    if args.database_url:
        db.configure_engine(args.database_url)
    if args.create_schema:
        await create_schema()

    try:
        ids = await seed(deps.get_department_service(), deps.get_employee_service())
    except SeedError as exc:
        logger.error("Seeding stopped: %s", exc)
        return 1
    finally:
        await db.engine.dispose()

    print(f"✅ seeded {len(ids)} records")
    return 0


def main(argv: list[str] | None = None) -> int:
    return asyncio.run(_run(parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
