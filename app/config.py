from __future__ import annotations

import locale
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here; components/styles.py turns them into CSS variables.
#
THEME = {
    "bg_primary": "#F9FAFB",     # page background (gray-50)
    "bg_card": "#FFFFFF",        # table surface
    "bg_table_head": "#F3F4F6",  # gray-100
    "text_primary": "#1F2937",   # gray-800
    "text_secondary": "#374151", # gray-700
    "text_muted": "#6B7280",     # gray-500
    "border_color": "#E5E7EB",   # gray-200
    "shadow": "0 1px 2px rgba(16,24,40,0.06)",
    "radius_px": 8,
    "danger": "#DC2626",         # red-600
}


@dataclass(frozen=True)
class AppConfig:
    # Required for live mode (Supabase)
    supabase_url: Optional[str]
    supabase_key: Optional[str]

    # Demo mode: Faker-generated students instead of Supabase
    use_mock: bool
    mock_student_count: int

    log_level: str

    @property
    def is_backend_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def source_label(self) -> str:
        return "Mock" if self.use_mock else "Supabase"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getenv_int(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - SUPABASE_ANON_KEY is accepted when SUPABASE_KEY is unset
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL"),
        supabase_key=_getenv("SUPABASE_KEY") or _getenv("SUPABASE_ANON_KEY"),
        use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        mock_student_count=_getenv_int("MOCK_STUDENT_COUNT", 75),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def configure_locale() -> bool:
    """
    Adopt the environment's LC_TIME (LANG / LC_ALL / LC_TIME) so `%x %X` follows the server locale.
    Python starts in the C locale until this runs. Returns False if the locale is not installed.
    """
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning("Keeping the C locale for dates: %s", e)
        return False
    return True
