# routers/objects.py

from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, delete_row
from dependencies.auth import CurrentUser
from models.enums import DrawingCategory, FloorLevel
from models.objects import DrawingCreate, ContractCreate


# Objecten: technical drawings and service contracts.
router = APIRouter(tags=["Objects"])

guard = requires_page(PageKey.objecten)


# ============================================================
# DRAWINGS
# ============================================================
@router.get("/drawings", summary="List drawings")
def list_drawings(
    school_id: str = Query(..., alias="schoolId"),
    category: Optional[DrawingCategory] = None,
    level: Optional[FloorLevel] = None,
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows(
        "drawings",
        {
            "school_id": school_id,
            "category": category.value if category else None,
            "level": level.value if level else None,
        },
        order="title",
    )
    return {"success": True, "data": rows}


@router.post("/drawings", summary="Add a drawing", status_code=201)
def create_drawing(payload: DrawingCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row("drawings", payload.model_dump(mode="json"), "Drawing")


@router.delete("/drawings/{drawing_id}", summary="Delete a drawing")
def delete_drawing(drawing_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, "drawings", drawing_id, "Drawing")
    delete_row("drawings", drawing_id, "Drawing")
    return {"success": True}


# ============================================================
# CONTRACTS
# ============================================================
@router.get("/contracts", summary="List contracts")
def list_contracts(
    school_id: str = Query(..., alias="schoolId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows("contracts", {"school_id": school_id}, order="end_date")
    return {"success": True, "data": rows}


@router.post("/contracts", summary="Add a contract", status_code=201)
def create_contract(payload: ContractCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row("contracts", payload.model_dump(mode="json"), "Contract")


@router.delete("/contracts/{contract_id}", summary="Delete a contract")
def delete_contract(contract_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, "contracts", contract_id, "Contract")
    delete_row("contracts", contract_id, "Contract")
    return {"success": True}
