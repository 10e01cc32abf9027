# models/report.py

from typing import Optional
from pydantic import BaseModel, Field

from .common import NonBlankStr
from .enums import Priority, WorkStatus


# -------------------------------------------------
# Reports (meldingen)
# -------------------------------------------------
class ReportCreate(BaseModel):
    school_id: str
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: Optional[str] = None
    priority: Priority = Priority.medium
    status: WorkStatus = WorkStatus.pending
    reported_by: Optional[str] = None
    maintenance_id: Optional[str] = None


class ReportUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[NonBlankStr] = None
    location: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[WorkStatus] = None
    maintenance_id: Optional[str] = None


# -------------------------------------------------
# Comments
# -------------------------------------------------
class ReportCommentCreate(BaseModel):
    content: str = Field(..., min_length=1)
