# models/building.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from .enums import InstallationType


# -------------------------------------------------
# Building data
# -------------------------------------------------
class BuildingDataCreate(BaseModel):
    school_id: str
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    build_year: Optional[int] = Field(None, ge=1800, le=2200)
    gross_floor_area: Optional[int] = Field(None, ge=0)
    purpose: Optional[str] = None
    construction_company: Optional[str] = None


# -------------------------------------------------
# Rooms
# -------------------------------------------------
class RoomCreate(BaseModel):
    school_id: str
    building_id: str
    name: str = Field(..., min_length=1)
    purpose: Optional[str] = None
    gross_floor_area: int = Field(..., ge=0)
    max_students: Optional[int] = Field(None, ge=0)


# -------------------------------------------------
# Terrain
# -------------------------------------------------
class TerrainCreate(BaseModel):
    school_id: str
    green_area: int = Field(0, ge=0)
    paved_area: int = Field(0, ge=0)
    play_equipment: List[str] = []


# -------------------------------------------------
# Installations (W / E)
# -------------------------------------------------
class InstallationCreate(BaseModel):
    school_id: str
    type: InstallationType = InstallationType.w_installation
    name: str = Field(..., min_length=1)
    brand: str
    model: Optional[str] = None
    installer: str
    inspection_company: Optional[str] = None
    installer_does_inspection: bool = False
    install_date: Optional[datetime] = None
    warranty_until: Optional[datetime] = None
