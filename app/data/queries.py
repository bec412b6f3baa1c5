from __future__ import annotations

from dataclasses import dataclass

from data.students import STUDENT_COLUMNS


MAX_ROWS = 50


@dataclass(frozen=True)
class RecordQuery:
    table: str
    columns: tuple[str, ...]
    order_by: str
    descending: bool = True
    limit: int = MAX_ROWS

    @property
    def select_clause(self) -> str:
        # PostgREST select syntax
        return ", ".join(self.columns)


def q_recent_students(limit: int = MAX_ROWS) -> RecordQuery:
    """Newest students first, capped at `limit` rows."""
    return RecordQuery(
        table="students",
        columns=tuple(STUDENT_COLUMNS),
        order_by="created_at",
        descending=True,
        limit=limit,
    )


STUDENTS_QUERY = q_recent_students()
