from __future__ import annotations

import html
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd
import streamlit as st

from data.queries import MAX_ROWS
from data.students import StudentRecord, get_full_name


PLACEHOLDER = "—"

# (label, css class) in display order
TABLE_COLUMNS = [
    ("ID", "col-id"),
    ("Name", "col-name"),
    ("Email", "col-email"),
    ("Department", "col-department"),
    ("Program", "col-program"),
    ("Year", "col-year"),
    ("Created", "col-created"),
]


def display_value(value: Optional[str]) -> str:
    return value if value else PLACEHOLDER


def format_created_at(value: Optional[str]) -> str:
    """
    ISO timestamp -> local date/time in the server locale's format.
    Naive timestamps are read as UTC; anything that is not ISO 8601 is shown as-is.
    LC_TIME is whatever config.configure_locale() installed at startup.
    """
    if not value:
        return PLACEHOLDER
    # pandas would also accept words like "now"/"today"
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return value
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return value
    return ts.to_pydatetime().astimezone().strftime("%x %X")


def student_rows(records: Sequence[StudentRecord], limit: int = MAX_ROWS) -> list[dict[str, str]]:
    rows = []
    for s in records[:limit]:
        rows.append(
            {
                "ID": s.id,
                "Name": display_value(get_full_name(s)),
                "Email": display_value(s.email),
                "Department": display_value(s.department),
                "Program": display_value(s.program),
                "Year": display_value(s.year_level),
                "Created": format_created_at(s.created_at),
            }
        )
    return rows


def student_table_html(records: Sequence[StudentRecord], limit: int = MAX_ROWS) -> str:
    # Single line: indented HTML would be read as a markdown code block
    head = "".join(f"<th>{label}</th>" for label, _ in TABLE_COLUMNS)
    body = "".join(
        "<tr>"
        + "".join(f'<td class="{cls}">{html.escape(row[label])}</td>' for label, cls in TABLE_COLUMNS)
        + "</tr>"
        for row in student_rows(records, limit)
    )
    return (
        '<div class="records-table-wrap"><table class="records-table">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody>"
        "</table></div>"
    )


def render_student_table(records: Sequence[StudentRecord]) -> None:
    st.markdown(student_table_html(records), unsafe_allow_html=True)
