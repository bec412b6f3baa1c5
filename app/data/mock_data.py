from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from faker import Faker

from data.queries import RecordQuery


DEPARTMENTS = {
    "College of Computer Studies": ["BS Computer Science", "BS Information Technology"],
    "College of Engineering": ["BS Civil Engineering", "BS Electrical Engineering"],
    "College of Business": ["BS Accountancy", "BS Business Administration"],
    "College of Education": ["Bachelor of Elementary Education"],
}
YEAR_LEVELS = ["1st Year", "2nd Year", "3rd Year", "4th Year"]


def students_mock(n_rows: int = 75, seed: int = 17) -> list[dict[str, Any]]:
    fake = Faker()
    Faker.seed(seed)
    rng = random.Random(seed)
    now = datetime.now(timezone.utc).replace(microsecond=0)
    rows = []
    for i in range(n_rows):
        dept = rng.choice(list(DEPARTMENTS))
        first, last = fake.first_name(), fake.last_name()
        # Leave some optional fields empty so the placeholder path shows up in the demo
        rows.append(
            {
                "id": fake.uuid4(),
                "student_number": f"{now.year - rng.randint(0, 3)}-{rng.randint(0, 99999):05d}",
                "first_name": first,
                "middle_name": fake.last_name() if rng.random() < 0.6 else None,
                "last_name": last,
                "email": f"{first}.{last}{i}@example.edu".lower() if rng.random() < 0.9 else None,
                "department": dept,
                "program": rng.choice(DEPARTMENTS[dept]) if rng.random() < 0.85 else None,
                "year_level": rng.choice(YEAR_LEVELS) if rng.random() < 0.9 else None,
                "created_at": (now - timedelta(minutes=rng.randint(0, 60 * 24 * 120))).isoformat(),
            }
        )
    return rows


@dataclass
class MockStudentClient:
    """Offline stand-in for SupabaseClient: answers RecordQuery from Faker rows."""

    n_rows: int = 75
    rows: Optional[list[dict[str, Any]]] = None

    def __post_init__(self) -> None:
        if self.rows is None:
            self.rows = students_mock(self.n_rows)

    def select(self, query: RecordQuery) -> list[dict[str, Any]]:
        # ISO strings in one timezone sort chronologically; NULL sorts above every value, as in Postgres
        ordered = sorted(
            self.rows,
            key=lambda r: (r.get(query.order_by) is None, r.get(query.order_by) or ""),
            reverse=query.descending,
        )
        return [{c: r.get(c) for c in query.columns} for r in ordered[: query.limit]]
