"""Change notifications published after a successful update."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DepartmentRelocated:
    department_id: str
    code: str
    previous_locality: str
    new_locality: str

    name = "department_relocated"

    def to_payload(self) -> dict[str, Any]:
        return {"event": self.name, **asdict(self)}
