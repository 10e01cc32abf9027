from fastapi import Depends, HTTPException
from typing import List, Optional

from dependencies.auth import get_current_user, CurrentUser
from core.errors import forbidden_page, handle_supabase_error
from core.logging_config import logger
from core.permissions import PageKey, can_access_beheer, has_access
from core.supabase_client import get_supabase_client
from core.supabase_helpers import select_one


# -----------------------------------------------------
# FastAPI dependency wrappers (server request guard)
# -----------------------------------------------------
def requires_page(page: PageKey):
    """
    Usage:
        @router.get("", dependencies=[Depends(requires_page(PageKey.onderhoud))])

    Same table as the client route guard; the API never assumes the
    client already checked.
    """

    def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not has_access(current_user.role, page):
            logger.warning(
                f"Denied page '{page}' for user {current_user.id} (role={current_user.role})"
            )
            raise forbidden_page(page)
        return current_user

    return dependency


def requires_any_page(*pages: PageKey):
    """Passes when at least one of ``pages`` is accessible."""
    label = " or ".join(str(p) for p in pages)

    def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not any(has_access(current_user.role, p) for p in pages):
            logger.warning(
                f"Denied pages '{label}' for user {current_user.id} (role={current_user.role})"
            )
            raise forbidden_page(label)
        return current_user

    return dependency


# ============================================================
# ADMIN HELPERS
# ============================================================

def is_admin(user: CurrentUser) -> bool:
    """Admins (beheer access) see every school."""
    return can_access_beheer(user.role)


def require_admin(user: CurrentUser):
    if not is_admin(user):
        raise forbidden_page(PageKey.beheer)


# ============================================================
# SCHOOL SCOPING (multi-tenant)
# ============================================================

def get_user_school_ids(user: CurrentUser) -> Optional[List[str]]:
    """
    School ids the user is linked to via user_schools.
    None means unrestricted (admin).
    """
    if is_admin(user):
        return None

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        result = (
            client.table("user_schools")
            .select("school_id")
            .eq("user_id", user.id)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "School access lookup")

    return [row["school_id"] for row in (result.data or [])]


def require_school_access(user: CurrentUser, school_id: str):
    """403 unless the user is admin or linked to ``school_id``."""
    school_ids = get_user_school_ids(user)
    if school_ids is None:
        return

    if school_id not in school_ids:
        logger.warning(f"Denied school {school_id} for user {user.id}")
        raise HTTPException(
            status_code=403,
            detail="You do not have access to this school.",
        )


def load_school_row(user: CurrentUser, table: str, row_id: str, entity: str) -> dict:
    """Fetch a row by id (404 if missing) and check its school_id against the user."""
    row = select_one(table, row_id, entity)
    require_school_access(user, row.get("school_id"))
    return row
