from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from config import AppConfig

if TYPE_CHECKING:
    from data.queries import RecordQuery


logger = logging.getLogger(__name__)


class BackendConfigError(RuntimeError):
    pass


class QueryFailure(Exception):
    """A failed remote query. `message` is None when the failure carried no text."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "")
        self.message = message or None


@dataclass(frozen=True)
class SupabaseClient:
    cfg: AppConfig
    client: Client = field(repr=False)

    def select(self, query: "RecordQuery") -> list[dict[str, Any]]:
        """
        Runs `query` against Supabase (PostgREST) and returns the raw rows.
        Any failure (network, backend-reported, malformed payload) surfaces as QueryFailure.
        """
        try:
            response = (
                self.client.table(query.table)
                .select(query.select_clause)
                .order(query.order_by, desc=query.descending)
                .limit(query.limit)
                .execute()
            )
        except APIError as e:
            logger.debug("Supabase API error on %s: %s", query.table, type(e).__name__)
            raise QueryFailure(e.message or str(e) or None) from e
        except Exception as e:
            logger.debug("Supabase request failed on %s: %s", query.table, type(e).__name__)
            raise QueryFailure(str(e) or None) from e

        rows = response.data
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise QueryFailure(f"Malformed response from {query.table}: expected a list, got {type(rows).__name__}")
        return rows


def get_supabase_client(cfg: AppConfig) -> SupabaseClient:
    if not cfg.is_backend_configured:
        raise BackendConfigError(
            "Missing SUPABASE_URL or SUPABASE_KEY for the Supabase connection. "
            "Set both (e.g. in .env), or set USE_MOCK_DATA=true for demo data."
        )
    return SupabaseClient(cfg=cfg, client=create_client(cfg.supabase_url, cfg.supabase_key))
