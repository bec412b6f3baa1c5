"""
Entry point: `streamlit run app/app.py`.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from config import AppConfig, configure_locale, configure_logging, get_config  # noqa: E402
from data.connection import BackendConfigError, get_supabase_client  # noqa: E402
from data.mock_data import MockStudentClient  # noqa: E402
from data.service import RecordClient  # noqa: E402

from views import students  # noqa: E402


logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def get_record_client(cfg: AppConfig) -> RecordClient:
    # One client per process, shared by every session
    if cfg.use_mock:
        return MockStudentClient(n_rows=cfg.mock_student_count)
    return get_supabase_client(cfg)


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg.log_level)
    configure_locale()

    try:
        client = get_record_client(cfg)
    except BackendConfigError as e:
        logger.error("Backend not configured: %s", e)
        students.render(cfg, None, setup_error=str(e))
        return

    students.render(cfg, client)


if __name__ == "__main__":
    main()
