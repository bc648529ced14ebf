from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from personnel.core.exceptions import ValidationViolation

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_fields(schema: type[SchemaT], message: str, **values: Any) -> SchemaT:
    """Validate raw field values, re-raising pydantic errors as a ValidationViolation."""
    try:
        return schema(**values)
    except ValidationError as exc:
        raise ValidationViolation.from_pydantic(exc, message) from exc
