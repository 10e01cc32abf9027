# routers/dashboard.py

from datetime import date
from fastapi import APIRouter, Depends

from core.permission_helpers import requires_page, require_school_access
from core.permissions import DashboardTab, PageKey, get_dashboard_tabs
from core.supabase_helpers import select_rows
from dependencies.auth import CurrentUser
from models.enums import WorkStatus
from routers.financial import build_financial_summary


router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)

OPEN_STATUSES = (WorkStatus.pending.value, WorkStatus.in_progress.value)


def count_by(rows: list[dict], field: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for row in rows:
        key = row.get(field) or "unknown"
        counts[key] = counts.get(key, 0) + 1
    return counts


def _open(rows: list[dict]) -> list[dict]:
    return [r for r in rows if r.get("status") in OPEN_STATUSES]


# ============================================================
# DASHBOARD
# ============================================================
@router.get(
    "/{school_id}",
    summary="Dashboard tabs and summaries",
    description="""
    **Permissions:** Requires the `dashboard` page and access to the school.

    `tabs` lists the visible tabs in render order. `summaries` only contains
    data for those tabs; a tab the role may not see is never computed.
    """,
)
def get_dashboard(school_id: str, current_user: CurrentUser = Depends(requires_page(PageKey.dashboard))):
    require_school_access(current_user, school_id)

    tabs = get_dashboard_tabs(current_user.role)
    summaries: dict[str, dict] = {}

    # Lazily loaded, shared by overzicht / meldingen / onderhoud
    cache: dict[str, list[dict]] = {}

    def rows(table: str) -> list[dict]:
        if table not in cache:
            cache[table] = select_rows(table, {"school_id": school_id})
        return cache[table]

    for tab in tabs:
        if tab == DashboardTab.overzicht:
            summaries[tab.value] = {
                "open_maintenance": len(_open(rows("maintenance"))),
                "open_reports": len(_open(rows("reports"))),
                "buildings": len(rows("building_data")),
            }
        elif tab == DashboardTab.meldingen:
            reports = rows("reports")
            summaries[tab.value] = {
                "total": len(reports),
                "by_status": count_by(reports, "status"),
                "by_priority": count_by(_open(reports), "priority"),
            }
        elif tab == DashboardTab.onderhoud:
            tasks = rows("maintenance")
            summaries[tab.value] = {
                "total": len(tasks),
                "by_status": count_by(tasks, "status"),
                "by_priority": count_by(_open(tasks), "priority"),
            }
        elif tab == DashboardTab.financieel:
            year = date.today().year
            summaries[tab.value] = build_financial_summary(school_id, year, year)

    return {
        "success": True,
        "school_id": school_id,
        "tabs": [tab.value for tab in tabs],
        "summaries": summaries,
    }
