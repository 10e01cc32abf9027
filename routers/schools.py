# routers/schools.py

from fastapi import APIRouter, Depends

from core.permission_helpers import get_user_school_ids
from core.supabase_helpers import select_rows
from dependencies.auth import get_current_user, CurrentUser


router = APIRouter(
    prefix="/user-schools",
    tags=["Schools"],
)


# ============================================================
# SCHOOLS FOR THE SCHOOL SWITCHER
# ============================================================
@router.get("", summary="Schools available to the current user")
def list_user_schools(current_user: CurrentUser = Depends(get_current_user)):
    """
    Admins get every school. Everyone else gets the schools linked in
    user_schools; an empty list sends the client to /no-access.
    """
    school_ids = get_user_school_ids(current_user)

    if school_ids is None:
        schools = select_rows("schools", order="name")
    elif not school_ids:
        schools = []
    else:
        schools = select_rows("schools", in_filters={"id": school_ids}, order="name")

    return {"success": True, "data": schools}
