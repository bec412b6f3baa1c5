from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from components.header import render_header
from components.student_table import render_student_table
from config import AppConfig
from data.service import RecordClient, ViewerState, fetch_records


PAGE_TITLE = "🎓 Student Records"
STATE_KEY = "student_viewer_state"

LOADING_TEXT = "Loading students..."
EMPTY_TEXT = "No student records found."


def _status_line(css_class: str, text: str) -> str:
    return f'<p class="{css_class}">{html.escape(text)}</p>'


def status_markup(state: ViewerState) -> Optional[str]:
    """The single status line for `state`, or None when the table is shown."""
    if state.is_loading:
        return _status_line("status-loading", LOADING_TEXT)
    if state.status == "error":
        return _status_line("status-error", f"Error: {state.error}")
    if not state.records:
        return _status_line("status-empty", EMPTY_TEXT)
    return None


def load_state(client: Optional[RecordClient], setup_error: Optional[str] = None) -> ViewerState:
    """
    Fetch once per browser session; reruns reuse the stored terminal state.
    The loading line is only on screen while the query is in flight.
    """
    state = st.session_state.get(STATE_KEY)
    if state is not None:
        return state

    if client is None:
        state = ViewerState.failed(setup_error)
        st.session_state[STATE_KEY] = state
        return state

    placeholder = st.empty()
    placeholder.markdown(status_markup(ViewerState.loading()), unsafe_allow_html=True)
    state = fetch_records(client)
    # Stored before touching the placeholder again: a rerun requested mid-query interrupts at the next st call
    st.session_state[STATE_KEY] = state
    placeholder.empty()
    return state


def render(cfg: AppConfig, client: Optional[RecordClient], setup_error: Optional[str] = None) -> None:
    render_header(PAGE_TITLE, right_pill=f"Data: {cfg.source_label}")

    state = load_state(client, setup_error)

    markup = status_markup(state)
    if markup is not None:
        st.markdown(markup, unsafe_allow_html=True)
        return

    render_student_table(state.records)
    st.caption(f"Showing {len(state.records)} most recent record(s)")
