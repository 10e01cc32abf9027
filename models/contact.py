# models/contact.py

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from .common import NonBlankStr
from .enums import ContactCategory


class ContactCreate(BaseModel):
    school_id: str
    name: str = Field(..., min_length=1)
    category: ContactCategory
    role: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    company: Optional[str] = None


class ContactUpdate(BaseModel):
    name: Optional[NonBlankStr] = None
    category: Optional[ContactCategory] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    company: Optional[str] = None
