# core/supabase_helpers.py

from enum import Enum
from typing import Any, Iterable, Optional

from fastapi import HTTPException
from supabase import Client

from core.errors import handle_supabase_error, not_found
from core.supabase_client import get_supabase_client


# =================================================================
#  TABLE HELPERS
# =================================================================
# Thin wrappers around client.table(...) for the school-scoped tables
# (maintenance, reports, appointments, documents, investments, ...).
# Authorization is NOT done here: callers run requires_page() and
# require_school_access() first.
# =================================================================

def require_client() -> Client:
    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")
    return client


def clean_payload(data: dict) -> dict:
    """
    Prepare a model_dump() for PostgREST:
    - enums → their value
    - strip string whitespace, empty strings → None (clears an optional column;
      update models reject blanks for NOT NULL columns before this point)
    - dates/datetimes → ISO strings
    Numeric-looking strings stay strings (postal codes, BRIN numbers).
    """
    clean = {}
    for key, value in data.items():
        if isinstance(value, Enum):
            clean[key] = value.value
        elif isinstance(value, str):
            stripped = value.strip()
            clean[key] = stripped or None
        elif hasattr(value, "isoformat"):
            clean[key] = value.isoformat()
        else:
            clean[key] = value
    return clean


def select_rows(
    table: str,
    filters: Optional[dict] = None,
    *,
    columns: str = "*",
    in_filters: Optional[dict[str, Iterable[Any]]] = None,
    order: Optional[str] = None,
    desc: bool = False,
) -> list[dict]:
    """SELECT with equality filters; None-valued filters are skipped."""
    client = require_client()

    try:
        query = client.table(table).select(columns)
        for key, val in (filters or {}).items():
            if val is not None:
                query = query.eq(key, val)
        for key, values in (in_filters or {}).items():
            query = query.in_(key, list(values))
        if order:
            query = query.order(order, desc=desc)
        return query.execute().data or []

    except HTTPException:
        raise
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to fetch {table}")


def select_one(table: str, row_id: str, entity: str) -> dict:
    rows = select_rows(table, {"id": row_id})
    if not rows:
        raise not_found(entity, row_id)
    return rows[0]


def insert_row(table: str, data: dict, entity: str) -> dict:
    client = require_client()

    try:
        result = client.table(table).insert(clean_payload(data)).execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to create {entity.lower()}")

    if not result.data:
        raise HTTPException(500, f"{entity} insert returned no data")
    return result.data[0]


def insert_rows(table: str, rows: list[dict], entity: str) -> list[dict]:
    """Bulk INSERT; an empty list is a no-op."""
    if not rows:
        return []

    client = require_client()

    try:
        result = client.table(table).insert([clean_payload(r) for r in rows]).execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to create {entity.lower()}")
    return result.data or []


def delete_where(table: str, filters: dict, entity: str) -> None:
    """DELETE by equality filters. Refuses an empty filter set."""
    if not filters:
        raise ValueError("delete_where requires at least one filter")

    client = require_client()

    try:
        query = client.table(table).delete()
        for key, val in filters.items():
            query = query.eq(key, val)
        query.execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to delete {entity.lower()}")


def update_row(table: str, row_id: str, data: dict, entity: str) -> dict:
    cleaned = clean_payload(data)
    if not cleaned:
        raise HTTPException(400, "No fields to update")

    client = require_client()

    try:
        result = client.table(table).update(cleaned).eq("id", row_id).execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to update {entity.lower()}")

    if not result.data:
        raise not_found(entity, row_id)
    return result.data[0]


def delete_row(table: str, row_id: str, entity: str) -> None:
    client = require_client()

    try:
        result = client.table(table).delete().eq("id", row_id).execute()
    except Exception as e:
        raise handle_supabase_error(e, f"Failed to delete {entity.lower()}")

    if not result.data:
        raise not_found(entity, row_id)
