# models/user.py

from typing import List, Optional
from pydantic import BaseModel

from core.permissions import DashboardTab, PageKey, UserRole


# ===============================================================
# ADMIN: USER MANAGEMENT
# ===============================================================

class UserRead(BaseModel):
    """Row of the users table as listed on the beheer page."""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None


class RoleUpdate(BaseModel):
    role: UserRole


# ===============================================================
# /auth/user RESPONSE
# ===============================================================

class NavigationEntry(BaseModel):
    name: str
    href: str
    page: PageKey


class AuthUserResponse(BaseModel):
    """Everything the client needs to gate its views for this session."""
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    pages: List[PageKey] = []
    dashboard_tabs: List[DashboardTab] = []
    navigation: List[NavigationEntry] = []
    permissions_version: str
