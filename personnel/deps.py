"""Service wiring for callers that own the process (scripts, hosting apps)."""

from __future__ import annotations

from personnel import db
from personnel.core.config import settings
from personnel.infra.unit_of_work import SqlAlchemyUnitOfWork
from personnel.services.departments import DepartmentService
from personnel.services.employees import EmployeeService
from personnel.services.notification import EventPublisher, WebhookEventPublisher


def _uow_factory() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(db.SessionLocal)


def get_event_publisher() -> EventPublisher:
    return WebhookEventPublisher(
        settings.notification_webhook_url, timeout=settings.notification_timeout
    )


def get_department_service(publisher: EventPublisher | None = None) -> DepartmentService:
    return DepartmentService(_uow_factory, publisher or get_event_publisher())


def get_employee_service() -> EmployeeService:
    return EmployeeService(_uow_factory)
