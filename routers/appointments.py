# routers/appointments.py

from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from core.calendar_helpers import month_grid_range, overlaps, parse_month
from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, update_row, delete_row
from dependencies.auth import CurrentUser
from models.appointment import AppointmentCreate, AppointmentUpdate


TABLE = "appointments"

router = APIRouter(
    prefix="/appointments",
    tags=["Planning"],
)

guard = requires_page(PageKey.planning)


def _parse_ts(value) -> Optional[datetime]:
    """ISO string → naive UTC datetime, so stored and submitted values compare."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


# ============================================================
# LIST APPOINTMENTS
# ============================================================
@router.get(
    "",
    summary="List appointments for a school",
    description="""
    **Permissions:** Requires the `planning` page and access to the school.

    With `month=YYYY-MM` only appointments overlapping the visible
    Monday-first month grid (including leading/trailing days) are returned.
    """,
)
def list_appointments(
    school_id: str = Query(..., alias="schoolId"),
    month: Optional[str] = Query(None, description="YYYY-MM"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)

    grid = None
    if month:
        try:
            grid = month_grid_range(*parse_month(month))
        except ValueError as e:
            raise HTTPException(400, str(e))

    rows = select_rows(TABLE, {"school_id": school_id}, order="start_date")

    if grid:
        grid_start, grid_end = grid
        visible = []
        for row in rows:
            start = _parse_ts(row.get("start_date"))
            end = _parse_ts(row.get("end_date")) or start
            if start and overlaps(start, end, grid_start, grid_end):
                visible.append(row)
        rows = visible

    result = {"success": True, "data": rows}
    if grid:
        result["range"] = {"start": grid[0].isoformat(), "end": grid[1].isoformat()}
    return result


# ============================================================
# CREATE / UPDATE / DELETE
# ============================================================
@router.post("", summary="Create an appointment", status_code=201)
def create_appointment(payload: AppointmentCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row(TABLE, payload.model_dump(mode="json"), "Appointment")


@router.patch("/{appointment_id}", summary="Update an appointment")
def update_appointment(
    appointment_id: str,
    payload: AppointmentUpdate,
    current_user: CurrentUser = Depends(guard),
):
    existing = load_school_row(current_user, TABLE, appointment_id, "Appointment")
    changes = payload.model_dump(mode="json", exclude_unset=True)

    # A partial update may move only one end of the range.
    start = _parse_ts(changes.get("start_date", existing.get("start_date")))
    end = _parse_ts(changes.get("end_date", existing.get("end_date")))
    if start and end and end < start:
        raise HTTPException(400, "end_date must not be before start_date")

    return update_row(TABLE, appointment_id, changes, "Appointment")


@router.delete("/{appointment_id}", summary="Delete an appointment")
def delete_appointment(appointment_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, TABLE, appointment_id, "Appointment")
    delete_row(TABLE, appointment_id, "Appointment")
    return {"success": True}
