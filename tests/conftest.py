# tests/conftest.py
import os

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

# Load .env.test if available; TEST_DATABASE_URL wins over the per-test SQLite file
load_dotenv(".env.test", override=False)
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL or "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("APP_ENV", "test")

from personnel.db import create_session_factory  # noqa: E402 (import after env tweaks)
from personnel.infra.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from personnel.models import Base  # noqa: E402
from personnel.services.departments import DepartmentService  # noqa: E402
from personnel.services.employees import EmployeeService  # noqa: E402
from personnel.services.notification import RecordingEventPublisher  # noqa: E402
from tests.factories import RecordingObserver  # noqa: E402


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'personnel.db'}"
    # NullPool: every session gets its own connection, as against a real server
    eng = create_async_engine(url, poolclass=NullPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def department_service(uow_factory, publisher, observer) -> DepartmentService:
    return DepartmentService(uow_factory, publisher, observer)


@pytest.fixture
def employee_service(uow_factory, observer) -> EmployeeService:
    return EmployeeService(uow_factory, observer)
