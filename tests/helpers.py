from types import SimpleNamespace

from config import AppConfig


def make_config(**overrides) -> AppConfig:
    values = {
        "supabase_url": "https://example.supabase.co",
        "supabase_key": "test-key",
        "use_mock": False,
        "mock_student_count": 5,
        "log_level": "INFO",
    }
    values.update(overrides)
    return AppConfig(**values)


def student_row(id_: str, **fields) -> dict:
    row = {"id": id_}
    row.update(fields)
    return row


class FakeClient:
    """Records every query; returns `rows` as-is or raises `error`."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def select(self, query):
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return list(self.rows)


class StubSupabase:
    """Mimics the supabase-py query builder chain used by SupabaseClient."""

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def table(self, name):
        self.calls.append(("table", name))
        return self

    def select(self, columns):
        self.calls.append(("select", columns))
        return self

    def order(self, column, desc=False):
        self.calls.append(("order", column, desc))
        return self

    def limit(self, n):
        self.calls.append(("limit", n))
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.data)
