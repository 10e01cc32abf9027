# models/objects.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from .enums import DrawingCategory, FloorLevel


# -------------------------------------------------
# Drawings (tekeningen)
# -------------------------------------------------
class DrawingCreate(BaseModel):
    school_id: str
    title: str = Field(..., min_length=1)
    category: DrawingCategory
    level: FloorLevel
    version: str
    file_url: Optional[str] = None


# -------------------------------------------------
# Contracts
# -------------------------------------------------
class ContractCreate(BaseModel):
    school_id: str
    title: str = Field(..., min_length=1)
    vendor: str
    contract_type: str
    start_date: datetime
    end_date: datetime
    amount: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
