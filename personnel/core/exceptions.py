"""Business signals raised by domain code and converted by the service layer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class InvalidValue:
    """A single rejected input: which field, the offending value and why."""

    field: str
    value: Any
    reason: str


class RuleViolation(Exception):
    """Raised when an expected business rule rejects an operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationViolation(Exception):
    """Raised when structured input breaks a domain invariant.

    The invalid values keep the order in which they were detected so clients can
    display them next to the matching fields.
    """

    def __init__(self, message: str, invalid_values: Iterable[InvalidValue] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.invalid_values: tuple[InvalidValue, ...] = tuple(invalid_values)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, message: str) -> ValidationViolation:
        invalid = [
            InvalidValue(
                field=".".join(str(part) for part in err.get("loc", ())) or "__root__",
                value=err.get("input"),
                reason=err.get("msg", ""),
            )
            for err in exc.errors()
        ]
        return cls(message, invalid)
