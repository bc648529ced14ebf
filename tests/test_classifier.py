from __future__ import annotations

import pytest

from personnel.core.exceptions import InvalidValue, RuleViolation, ValidationViolation
from personnel.core.outcome import (
    Failure,
    GeneralFailure,
    Success,
    UnexpectedCondition,
    ValidationFailure,
)
from personnel.dsl import classifier
from personnel.dsl.classifier import StructlogFailureObserver, run_protected


@pytest.mark.asyncio
async def test_plain_value_becomes_success(observer):
    outcome = await run_protected("sumar", lambda: 1 + 1, observer=observer)

    assert outcome == Success(2)
    assert observer.failures == []


@pytest.mark.asyncio
async def test_coroutine_result_is_awaited(observer):
    async def body():
        return "listo"

    assert await run_protected("async", body, observer=observer) == Success("listo")


@pytest.mark.asyncio
async def test_rule_violation_becomes_general_failure(observer):
    def body():
        raise RuleViolation("clave duplicada: 10")

    outcome = await run_protected("Crear departamento", body, observer=observer)

    assert outcome == Failure(GeneralFailure("clave duplicada: 10"))
    assert observer.failures == [("Crear departamento", GeneralFailure("clave duplicada: 10"))]


@pytest.mark.asyncio
async def test_validation_violation_preserves_invalid_values_in_order(observer):
    invalid = [
        InvalidValue("code", "", "too short"),
        InvalidValue("salary", -5, "must be greater than 0"),
    ]

    def body():
        raise ValidationViolation("datos inválidos", invalid)

    outcome = await run_protected("Crear empleado", body, observer=observer)

    assert isinstance(outcome, Failure)
    assert outcome.kind == ValidationFailure(
        "Crear empleado", tuple(invalid), "Crear empleado: datos inválidos"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [KeyError("id"), TypeError("bad"), ZeroDivisionError(), RuntimeError("boom")],
)
async def test_any_other_exception_becomes_unexpected_condition(error, observer):
    def body():
        raise error

    outcome = await run_protected("Consultar", body, observer=observer)

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.kind, UnexpectedCondition)
    assert outcome.kind.cause is error
    assert outcome.kind.context == "Consultar"
    assert len(observer.failures) == 1


class FakeLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict]] = []

    def warning(self, event, **kw):
        self.calls.append(("warning", event, kw))

    def error(self, event, **kw):
        self.calls.append(("error", event, kw))

    def exception(self, event, **kw):
        self.calls.append(("exception", event, kw))


@pytest.mark.asyncio
async def test_structlog_observer_logs_business_failures_as_warnings():
    logger = FakeLogger()
    observer = StructlogFailureObserver(logger)

    def body():
        raise RuleViolation("Id no encontrado: 9")

    await run_protected("Relocalizar", body, observer=observer)

    assert logger.calls == [
        (
            "warning",
            "operation_failed",
            {"operation": "Relocalizar", "reason": "Id no encontrado: 9"},
        )
    ]


@pytest.mark.asyncio
async def test_structlog_observer_logs_unexpected_with_exc_info():
    logger = FakeLogger()
    observer = StructlogFailureObserver(logger)
    error = RuntimeError("db down")

    def body():
        raise error

    await run_protected("Crear", body, observer=observer)

    level, event, fields = logger.calls[0]
    assert (level, event) == ("error", "operation_error")
    assert fields["exc_info"] is error
    assert fields["after_save"] is False


@pytest.mark.asyncio
async def test_structlog_observer_lists_invalid_fields():
    logger = FakeLogger()
    observer = StructlogFailureObserver(logger)

    def body():
        raise ValidationViolation("x", [InvalidValue("name", "", "empty")])

    await run_protected("Crear", body, observer=observer)

    assert logger.calls[0][2]["invalid_fields"] == ["name"]


@pytest.mark.asyncio
async def test_default_observer_is_used_when_none_given():
    def body():
        raise RuleViolation("sin observador")

    outcome = await run_protected("Sin observador", body)

    assert outcome == Failure(GeneralFailure("sin observador"))


class BrokenObserver:
    def on_failure(self, label, kind):
        raise RuntimeError("log sink down")


@pytest.mark.asyncio
async def test_broken_observer_does_not_hide_the_failure(monkeypatch):
    fallback = FakeLogger()
    monkeypatch.setattr(classifier, "logger", fallback)

    def body():
        raise ValueError("bad input")

    outcome = await run_protected("Crear", body, observer=BrokenObserver())

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.kind.cause, ValueError)
    [(level, event, fields)] = fallback.calls
    assert (level, event) == ("exception", "failure_observer_error")
    assert fields["operation"] == "Crear"
