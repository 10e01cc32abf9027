# models/maintenance.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .common import NonBlankStr
from .enums import Priority, WorkStatus


class MaintenanceBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    location: Optional[str] = None
    priority: Priority = Priority.medium
    status: WorkStatus = WorkStatus.pending
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None


class MaintenanceCreate(MaintenanceBase):
    school_id: str


class MaintenanceUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[str] = None
    location: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[WorkStatus] = None
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None
