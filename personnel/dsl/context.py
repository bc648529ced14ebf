from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from personnel.dsl.classifier import FailureObserver, default_observer
from personnel.repositories.interfaces import EntityRepository

E = TypeVar("E")
K = TypeVar("K")


@dataclass(frozen=True)
class OperationContext(Generic[E, K]):
    """Operation label plus the repository a pipeline persists through.

    Built once per service call; the label prefixes every log line and failure
    message produced for that call.
    """

    label: str
    repository: EntityRepository[E, K]
    observer: FailureObserver = field(default=default_observer, compare=False)
