"""Result-composition helpers for service methods."""

from .classifier import FailureObserver, StructlogFailureObserver, run_protected
from .context import OperationContext
from .lookups import (
    Lookup,
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
from .pipelines import create_entity, query_entity, resolve_then, update_entity, with_resolved

__all__ = [
    "FailureObserver",
    "StructlogFailureObserver",
    "run_protected",
    "OperationContext",
    "Lookup",
    "duplicate_check",
    "found",
    "optional",
    "required",
    "resolve_by_ids",
    "resolve_by_ids2",
    "resolve_by_ids3",
    "resolve_optional",
    "resolve_required",
    "create_entity",
    "query_entity",
    "resolve_then",
    "update_entity",
    "with_resolved",
]
