from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from data.connection import QueryFailure


STUDENT_COLUMNS = [
    "id",
    "student_number",
    "first_name",
    "middle_name",
    "last_name",
    "email",
    "department",
    "program",
    "year_level",
    "created_at",
]


@dataclass(frozen=True)
class StudentRecord:
    """One row of the `students` table. Everything except `id` may be missing."""

    id: str
    student_number: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    program: Optional[str] = None
    year_level: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StudentRecord":
        if not isinstance(row, Mapping):
            raise QueryFailure(f"Malformed student row: expected an object, got {type(row).__name__}")

        values = {f.name: _as_text(row.get(f.name)) for f in fields(cls)}
        if not values["id"]:
            raise QueryFailure("Malformed student row: missing id")
        return cls(**values)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def get_full_name(record: StudentRecord) -> str:
    parts = [record.first_name, record.middle_name, record.last_name]
    return " ".join(p for p in parts if p)
