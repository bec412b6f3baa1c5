from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from data.connection import QueryFailure
from data.queries import STUDENTS_QUERY, RecordQuery
from data.students import StudentRecord


logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class RecordClient(Protocol):
    def select(self, query: RecordQuery) -> list[dict[str, Any]]: ...


@dataclass(frozen=True)
class ViewerState:
    status: str  # "loading" | "error" | "loaded"
    records: tuple[StudentRecord, ...] = ()
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "ViewerState":
        return cls(status="loading")

    @classmethod
    def failed(cls, message: Optional[str]) -> "ViewerState":
        return cls(status="error", error=message or UNKNOWN_ERROR)

    @classmethod
    def loaded(cls, records: Sequence[StudentRecord]) -> "ViewerState":
        return cls(status="loaded", records=tuple(records))

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"


def failure_message(exc: BaseException) -> str:
    if isinstance(exc, QueryFailure):
        return exc.message or UNKNOWN_ERROR
    return str(exc) or UNKNOWN_ERROR


def fetch_records(client: RecordClient, query: RecordQuery = STUDENTS_QUERY) -> ViewerState:
    """
    Runs the students query once and resolves it to a terminal state.
    Never raises: every failure becomes ViewerState(status="error").
    """
    logger.info("Fetching %s (limit=%d)", query.table, query.limit)
    try:
        rows = client.select(query)
        records = [StudentRecord.from_row(r) for r in (rows or [])[: query.limit]]
    except Exception as e:
        message = failure_message(e)
        logger.warning("Fetching %s failed: %s", query.table, message)
        return ViewerState.failed(message)

    logger.info("Fetched %d %s record(s)", len(records), query.table)
    return ViewerState.loaded(records)
