# routers/admin.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from core.errors import handle_supabase_error
from core.logging_config import logger
from core.permission_helpers import requires_page
from core.permissions import PageKey, UserRole, coerce_role
from core.supabase_helpers import (
    require_client,
    select_rows,
    select_one,
    insert_row,
    delete_row,
)
from dependencies.auth import CurrentUser
from models.school import BoardCreate, SchoolCreate, UserSchoolLink
from models.user import RoleUpdate, UserRead


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
)

# Beheer page only. directeur and medewerker never reach these routes.
guard = requires_page(PageKey.beheer)


# -----------------------------------------------------
# Normalize Supabase list_users() result
# -----------------------------------------------------
def extract_user_list(result):
    if isinstance(result, list):
        return result
    if isinstance(result, dict) and "users" in result:
        return result["users"]
    users_attr = getattr(result, "users", None)
    if users_attr is not None:
        return users_attr
    return []


def list_auth_users() -> list:
    client = require_client()
    try:
        return extract_user_list(client.auth.admin.list_users())
    except Exception as e:
        raise handle_supabase_error(e, "Failed to list users")


def to_user_read(auth_user) -> UserRead:
    metadata = auth_user.user_metadata or {}
    role = coerce_role(metadata.get("role"))
    return UserRead(
        id=auth_user.id,
        email=auth_user.email,
        first_name=metadata.get("first_name"),
        last_name=metadata.get("last_name"),
        role=role.value if role else None,
    )


# -----------------------------------------------------
# Helper: Validate role change
# -----------------------------------------------------
def validate_role_change(requestor: CurrentUser, target_user_id: str, desired_role: UserRole, users: list):
    target = next((u for u in users if u.id == target_user_id), None)
    if target is None:
        raise HTTPException(404, "Target user not found")

    if target_user_id == requestor.id and desired_role != UserRole.admin:
        raise HTTPException(400, "You cannot remove your own admin role.")

    admin_ids = [
        u.id for u in users if coerce_role((u.user_metadata or {}).get("role")) == UserRole.admin
    ]
    if target_user_id in admin_ids and desired_role != UserRole.admin and len(admin_ids) == 1:
        raise HTTPException(400, "Cannot demote the last remaining admin.")

    return target


# ============================================================
# USERS
# ============================================================
@router.get("/users", summary="Admin: list users", response_model=list[UserRead])
def admin_list_users(current_user: CurrentUser = Depends(guard)):
    return [to_user_read(u) for u in list_auth_users()]


@router.patch("/users/{user_id}/role", summary="Admin: change a user's role", response_model=UserRead)
def admin_update_role(user_id: str, payload: RoleUpdate, current_user: CurrentUser = Depends(guard)):
    users = list_auth_users()
    target = validate_role_change(current_user, user_id, payload.role, users)

    metadata = {**(target.user_metadata or {}), "role": payload.role.value}

    client = require_client()
    try:
        resp = client.auth.admin.update_user_by_id(user_id, {"user_metadata": metadata})
    except Exception as e:
        raise handle_supabase_error(e, "Failed to update user role")

    logger.info(f"Role of {user_id} set to {payload.role.value} by {current_user.id}")
    return to_user_read(resp.user)


# ============================================================
# USER ↔ SCHOOL LINKS
# ============================================================
@router.get("/users/{user_id}/schools", summary="Admin: schools linked to a user")
def admin_user_schools(user_id: str, current_user: CurrentUser = Depends(guard)):
    return {"success": True, "data": select_rows("user_schools", {"user_id": user_id})}


@router.post("/user-schools", summary="Admin: link a user to a school", status_code=201)
def admin_link_user_school(payload: UserSchoolLink, current_user: CurrentUser = Depends(guard)):
    select_one("schools", payload.school_id, "School")

    existing = select_rows("user_schools", {"user_id": payload.user_id, "school_id": payload.school_id})
    if existing:
        raise HTTPException(400, "User is already linked to this school")

    link = insert_row("user_schools", payload.model_dump(), "School link")
    logger.info(f"User {payload.user_id} linked to school {payload.school_id} by {current_user.id}")
    return link


@router.delete("/user-schools/{link_id}", summary="Admin: unlink a user from a school")
def admin_unlink_user_school(link_id: str, current_user: CurrentUser = Depends(guard)):
    delete_row("user_schools", link_id, "School link")
    return {"success": True}


# ============================================================
# BOARDS + SCHOOLS
# ============================================================
@router.get("/boards", summary="Admin: list boards")
def admin_list_boards(current_user: CurrentUser = Depends(guard)):
    return {"success": True, "data": select_rows("boards", order="name")}


@router.post("/boards", summary="Admin: create a board", status_code=201)
def admin_create_board(payload: BoardCreate, current_user: CurrentUser = Depends(guard)):
    return insert_row("boards", payload.model_dump(), "Board")


@router.get("/schools", summary="Admin: list schools")
def admin_list_schools(
    board_id: Optional[str] = None,
    current_user: CurrentUser = Depends(guard),
):
    return {"success": True, "data": select_rows("schools", {"board_id": board_id}, order="name")}


@router.post("/schools", summary="Admin: create a school", status_code=201)
def admin_create_school(payload: SchoolCreate, current_user: CurrentUser = Depends(guard)):
    if payload.board_id:
        select_one("boards", payload.board_id, "Board")
    return insert_row("schools", payload.model_dump(), "School")
