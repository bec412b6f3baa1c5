import locale
import os
import time

import pytest

CONFIG_ENV_VARS = [
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "SUPABASE_ANON_KEY",
    "USE_MOCK_DATA",
    "MOCK_STUDENT_COUNT",
    "LOG_LEVEL",
]


@pytest.fixture()
def clean_env(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the picture
    monkeypatch.setattr("config.load_dotenv", lambda override=False: False)
    return monkeypatch


@pytest.fixture()
def utc_c_locale():
    """Pin the process to TZ=UTC and the C LC_TIME, restoring both afterwards."""
    saved_tz = os.environ.get("TZ")
    saved_lc_time = locale.setlocale(locale.LC_TIME)
    os.environ["TZ"] = "UTC"
    time.tzset()
    locale.setlocale(locale.LC_TIME, "C")
    yield
    locale.setlocale(locale.LC_TIME, saved_lc_time)
    if saved_tz is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved_tz
    time.tzset()
