# models/appointment.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from .common import NonBlankStr
from .enums import ActivityType


class AppointmentCreate(BaseModel):
    school_id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    location: Optional[str] = None
    is_all_day: bool = False
    activity_type: Optional[ActivityType] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AppointmentUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    is_all_day: Optional[bool] = None
    activity_type: Optional[ActivityType] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
