from .db import count_rows, load
from .fakes import (
    FailingSaveRepository,
    InMemoryRepository,
    RecordingObserver,
    StubUnitOfWork,
    make_department,
    make_employee,
)

__all__ = [
    "count_rows",
    "load",
    "FailingSaveRepository",
    "InMemoryRepository",
    "RecordingObserver",
    "StubUnitOfWork",
    "make_department",
    "make_employee",
]
