# models/school.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr


# -------------------------------------------------
# Boards (besturen)
# -------------------------------------------------
class BoardCreate(BaseModel):
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None


# -------------------------------------------------
# Schools
# -------------------------------------------------
class SchoolBase(BaseModel):
    name: str
    board_id: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    brin_number: Optional[str] = None
    phone: Optional[str] = None
    school_photo_url: Optional[str] = None


class SchoolCreate(SchoolBase):
    """No ID supplied; Supabase generates the UUID."""
    pass


class SchoolRead(SchoolBase):
    id: str
    created_at: Optional[datetime] = None


# -------------------------------------------------
# user_schools junction
# -------------------------------------------------
class UserSchoolLink(BaseModel):
    user_id: str
    school_id: str
    is_default: bool = False
