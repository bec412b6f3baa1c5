from data.connection import QueryFailure
from data.queries import MAX_ROWS, STUDENTS_QUERY
from data.service import UNKNOWN_ERROR, ViewerState, fetch_records
from tests.helpers import FakeClient, student_row


def test_initial_state_is_loading():
    state = ViewerState.loading()
    assert state.is_loading
    assert state.records == ()
    assert state.error is None


def test_fetch_issues_the_fixed_students_query_once():
    client = FakeClient(rows=[student_row("1")])
    fetch_records(client)

    assert client.calls == [STUDENTS_QUERY]
    query = client.calls[0]
    assert query.table == "students"
    assert query.order_by == "created_at"
    assert query.descending is True
    assert query.limit == MAX_ROWS == 50
    assert query.select_clause == (
        "id, student_number, first_name, middle_name, last_name, email, department, program, year_level, created_at"
    )


def test_success_transitions_to_loaded():
    client = FakeClient(rows=[student_row("2", first_name="Jane"), student_row("1")])
    state = fetch_records(client)

    assert state.status == "loaded"
    assert not state.is_loading
    assert state.error is None
    assert [r.id for r in state.records] == ["2", "1"]


def test_empty_and_null_results_are_empty_sequences():
    assert fetch_records(FakeClient(rows=[])).records == ()
    assert fetch_records(FakeClient(rows=None)).records == ()


def test_results_are_capped_at_limit():
    client = FakeClient(rows=[student_row(str(i)) for i in range(75)])
    state = fetch_records(client)
    assert len(state.records) == 50
    assert state.records[-1].id == "49"


def test_query_failure_message_becomes_error_state():
    state = fetch_records(FakeClient(error=QueryFailure("network timeout")))
    assert state.status == "error"
    assert state.error == "network timeout"
    assert state.records == ()


def test_failure_without_message_falls_back_to_unknown_error():
    assert fetch_records(FakeClient(error=QueryFailure())).error == UNKNOWN_ERROR
    assert fetch_records(FakeClient(error=RuntimeError())).error == UNKNOWN_ERROR
    assert UNKNOWN_ERROR == "Unknown error"


def test_unexpected_exception_is_not_reraised():
    state = fetch_records(FakeClient(error=ConnectionError("connection refused")))
    assert state.status == "error"
    assert state.error == "connection refused"


def test_malformed_row_fails_the_whole_fetch():
    state = fetch_records(FakeClient(rows=[student_row("1"), {"email": "no-id@x.com"}]))
    assert state.status == "error"
    assert "missing id" in state.error
    assert state.records == ()
