# routers/maintenance.py

from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.logging_config import logger
from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, update_row, delete_row
from dependencies.auth import CurrentUser
from models.enums import Priority, WorkStatus
from models.maintenance import MaintenanceCreate, MaintenanceUpdate


TABLE = "maintenance"

router = APIRouter(
    prefix="/maintenance",
    tags=["Maintenance"],
)

# Every route below is gated on the onderhoud page.
guard = requires_page(PageKey.onderhoud)


# ============================================================
# LIST MAINTENANCE TASKS
# ============================================================
@router.get(
    "",
    summary="List maintenance tasks for a school",
    description="""
    **Permissions:** Requires the `onderhoud` page and access to the school.

    **Query Parameters:**
    - `school_id`: School to list tasks for (required)
    - `status`: Optional workflow status filter
    - `priority`: Optional priority filter
    """,
)
def list_maintenance(
    school_id: str = Query(..., alias="schoolId"),
    status: Optional[WorkStatus] = None,
    priority: Optional[Priority] = None,
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)

    rows = select_rows(
        TABLE,
        {
            "school_id": school_id,
            "status": status.value if status else None,
            "priority": priority.value if priority else None,
        },
        order="created_at",
        desc=True,
    )
    return {"success": True, "data": rows}


# ============================================================
# GET ONE
# ============================================================
@router.get("/{task_id}", summary="Get a maintenance task")
def get_maintenance(task_id: str, current_user: CurrentUser = Depends(guard)):
    return load_school_row(current_user, TABLE, task_id, "Maintenance task")


# ============================================================
# CREATE
# ============================================================
@router.post("", summary="Create a maintenance task", status_code=201)
def create_maintenance(payload: MaintenanceCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)

    row = insert_row(TABLE, payload.model_dump(mode="json"), "Maintenance task")
    logger.info(f"Maintenance task {row.get('id')} created by {current_user.id}")
    return row


# ============================================================
# UPDATE
# ============================================================
@router.patch("/{task_id}", summary="Update a maintenance task")
def update_maintenance(
    task_id: str,
    payload: MaintenanceUpdate,
    current_user: CurrentUser = Depends(guard),
):
    load_school_row(current_user, TABLE, task_id, "Maintenance task")
    return update_row(TABLE, task_id, payload.model_dump(mode="json", exclude_unset=True), "Maintenance task")


# ============================================================
# DELETE
# ============================================================
@router.delete("/{task_id}", summary="Delete a maintenance task")
def delete_maintenance(task_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, TABLE, task_id, "Maintenance task")
    delete_row(TABLE, task_id, "Maintenance task")
    return {"success": True}
