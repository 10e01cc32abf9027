# routers/reports.py

from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.logging_config import logger
from core.permission_helpers import (
    requires_page,
    requires_any_page,
    require_school_access,
    load_school_row,
)
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, update_row, delete_row
from dependencies.auth import CurrentUser
from models.enums import WorkStatus
from models.report import ReportCreate, ReportUpdate, ReportCommentCreate


TABLE = "reports"
COMMENTS_TABLE = "report_comments"

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
)

# Reading also serves the dashboard meldingen tab; writing needs the full page.
read_guard = requires_any_page(PageKey.meldingen, PageKey.dashboard_meldingen)
write_guard = requires_page(PageKey.meldingen)


# ============================================================
# LIST REPORTS
# ============================================================
@router.get(
    "",
    summary="List reports (meldingen) for a school",
    description="""
    **Permissions:** `meldingen` page or the `dashboard_meldingen` tab,
    plus access to the school.
    """,
)
def list_reports(
    school_id: str = Query(..., alias="schoolId"),
    status: Optional[WorkStatus] = None,
    limit: int = Query(100, ge=1, le=1000),
    current_user: CurrentUser = Depends(read_guard),
):
    require_school_access(current_user, school_id)

    rows = select_rows(
        TABLE,
        {"school_id": school_id, "status": status.value if status else None},
        order="created_at",
        desc=True,
    )
    return {"success": True, "data": rows[:limit]}


@router.get("/{report_id}", summary="Get a report")
def get_report(report_id: str, current_user: CurrentUser = Depends(read_guard)):
    return load_school_row(current_user, TABLE, report_id, "Report")


# ============================================================
# CREATE / UPDATE / DELETE
# ============================================================
@router.post("", summary="Create a report", status_code=201)
def create_report(payload: ReportCreate, current_user: CurrentUser = Depends(write_guard)):
    require_school_access(current_user, payload.school_id)

    data = payload.model_dump(mode="json")
    if not data.get("reported_by"):
        data["reported_by"] = current_user.display_name

    row = insert_row(TABLE, data, "Report")
    logger.info(f"Report {row.get('id')} created by {current_user.id}")
    return row


@router.patch("/{report_id}", summary="Update a report")
def update_report(report_id: str, payload: ReportUpdate, current_user: CurrentUser = Depends(write_guard)):
    load_school_row(current_user, TABLE, report_id, "Report")
    return update_row(TABLE, report_id, payload.model_dump(mode="json", exclude_unset=True), "Report")


@router.delete("/{report_id}", summary="Delete a report")
def delete_report(report_id: str, current_user: CurrentUser = Depends(write_guard)):
    load_school_row(current_user, TABLE, report_id, "Report")
    delete_row(TABLE, report_id, "Report")
    return {"success": True}


# ============================================================
# COMMENTS
# ============================================================
@router.get("/{report_id}/comments", summary="List comments on a report")
def list_comments(report_id: str, current_user: CurrentUser = Depends(read_guard)):
    load_school_row(current_user, TABLE, report_id, "Report")
    rows = select_rows(COMMENTS_TABLE, {"report_id": report_id}, order="created_at")
    return {"success": True, "data": rows}


@router.post("/{report_id}/comments", summary="Comment on a report", status_code=201)
def add_comment(
    report_id: str,
    payload: ReportCommentCreate,
    current_user: CurrentUser = Depends(write_guard),
):
    report = load_school_row(current_user, TABLE, report_id, "Report")
    return insert_row(
        COMMENTS_TABLE,
        {
            "report_id": report_id,
            "user_id": current_user.id,
            "school_id": report["school_id"],
            "content": payload.content,
        },
        "Comment",
    )
