"""Supabase storage — project lookup, token verification, system prompt persistence.

The service reads projects and writes the generated system prompt back onto
the copy row. Both tables are owned by the main application; this module only
touches the columns it needs.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, create_client

import config

logger = logging.getLogger(__name__)

_supabase_client: Client | None = None


class StorageNotConfigured(RuntimeError):
    pass


def get_supabase_client() -> Client:
    """Get or create the Supabase client (singleton)."""
    global _supabase_client

    if _supabase_client is None:
        if not config.storage_configured():
            raise StorageNotConfigured(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set"
            )
        _supabase_client = create_client(
            config.SUPABASE_URL,
            config.SUPABASE_SERVICE_ROLE_KEY,
        )

    return _supabase_client


def set_supabase_client(client: Any | None):
    """Install a client instance directly (tests, or a pre-built client)."""
    global _supabase_client
    _supabase_client = client


def reset_supabase_client():
    """Reset the Supabase client (useful for testing)."""
    global _supabase_client
    _supabase_client = None


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

def verify_access_token(token: str) -> Any | None:
    """Return the Supabase user for a bearer token, or None if it is rejected."""
    client = get_supabase_client()
    try:
        response = client.auth.get_user(token)
    except Exception as exc:
        logger.warning("Token verification failed: %s", exc)
        return None
    return getattr(response, "user", None)


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

def fetch_project(project_id: str) -> dict[str, Any] | None:
    """Load a project row by id. Returns None if it doesn't exist."""
    client = get_supabase_client()
    result = (
        client.table(config.PROJECTS_TABLE)
        .select("*")
        .eq("id", project_id)
        .limit(1)
        .execute()
    )
    rows = result.data or []
    return rows[0] if rows else None


# ---------------------------------------------------------------------------
# Copies
# ---------------------------------------------------------------------------

def save_generated_system_prompt(copy_id: str, row: dict[str, Any]) -> int:
    """Write the generated system prompt columns onto a copy. Returns rows updated."""
    client = get_supabase_client()
    result = (
        client.table(config.COPIES_TABLE)
        .update(row)
        .eq("id", copy_id)
        .execute()
    )
    updated = len(result.data or [])
    if updated == 0:
        logger.warning("No copy row updated for copy_id=%s", copy_id)
    else:
        logger.info("System prompt saved on copy %s", copy_id)
    return updated
