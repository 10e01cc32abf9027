# routers/buildings.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, delete_row
from dependencies.auth import CurrentUser
from models.building import BuildingDataCreate, RoomCreate, InstallationCreate, TerrainCreate
from models.enums import InstallationType


# Building information (gebouwinformatie): buildings, rooms,
# W/E installations and outdoor terrain per school.
router = APIRouter(tags=["Building Information"])

guard = requires_page(PageKey.gebouwinformatie)


# ============================================================
# BUILDING DATA
# ============================================================
@router.get("/building-data", summary="List buildings of a school")
def list_building_data(
    school_id: str = Query(..., alias="schoolId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    return {"success": True, "data": select_rows("building_data", {"school_id": school_id}, order="name")}


@router.post("/building-data", summary="Add a building", status_code=201)
def create_building_data(payload: BuildingDataCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row("building_data", payload.model_dump(), "Building")


@router.delete("/building-data/{building_id}", summary="Delete a building")
def delete_building_data(building_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, "building_data", building_id, "Building")
    delete_row("building_data", building_id, "Building")
    return {"success": True}


# ============================================================
# ROOMS
# ============================================================
@router.get("/rooms", summary="List rooms")
def list_rooms(
    school_id: str = Query(..., alias="schoolId"),
    building_id: Optional[str] = Query(None, alias="buildingId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows("rooms", {"school_id": school_id, "building_id": building_id}, order="name")
    return {"success": True, "data": rows}


@router.post("/rooms", summary="Add a room", status_code=201)
def create_room(payload: RoomCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    # The building must belong to the same school
    building = load_school_row(current_user, "building_data", payload.building_id, "Building")
    if building.get("school_id") != payload.school_id:
        raise HTTPException(400, "Building belongs to a different school")
    return insert_row("rooms", payload.model_dump(), "Room")


@router.delete("/rooms/{room_id}", summary="Delete a room")
def delete_room(room_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, "rooms", room_id, "Room")
    delete_row("rooms", room_id, "Room")
    return {"success": True}


# ============================================================
# INSTALLATIONS
# ============================================================
@router.get("/installation-data", summary="List installations")
def list_installations(
    school_id: str = Query(..., alias="schoolId"),
    type: Optional[InstallationType] = None,
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows(
        "installation_data",
        {"school_id": school_id, "type": type.value if type else None},
        order="name",
    )
    return {"success": True, "data": rows}


@router.post("/installation-data", summary="Add an installation", status_code=201)
def create_installation(payload: InstallationCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row("installation_data", payload.model_dump(mode="json"), "Installation")


@router.delete("/installation-data/{installation_id}", summary="Delete an installation")
def delete_installation(installation_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, "installation_data", installation_id, "Installation")
    delete_row("installation_data", installation_id, "Installation")
    return {"success": True}


# ============================================================
# TERRAIN
# ============================================================
@router.get("/terrain", summary="Outdoor terrain of a school")
def list_terrain(
    school_id: str = Query(..., alias="schoolId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    return {"success": True, "data": select_rows("terrain", {"school_id": school_id})}


@router.post("/terrain", summary="Add terrain data", status_code=201)
def create_terrain(payload: TerrainCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row("terrain", payload.model_dump(), "Terrain")
