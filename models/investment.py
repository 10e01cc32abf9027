# models/investment.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .common import NonBlankStr, check_unique_years
from .enums import InvestmentStatus, InvestmentType, QuoteStatus


# -------------------------------------------------
# Investment year budgets
# -------------------------------------------------
class InvestmentYear(BaseModel):
    year: int = Field(..., ge=1900, le=2200)
    amount: int = Field(..., ge=0)


# -------------------------------------------------
# Investments
# -------------------------------------------------
class InvestmentBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    type: InvestmentType = InvestmentType.necessary
    status: InvestmentStatus = InvestmentStatus.afwachting
    start_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    is_cyclic: bool = False
    cycle_years: Optional[int] = None

    @model_validator(mode="after")
    def check_cycle(self):
        if self.is_cyclic and (self.cycle_years is None or self.cycle_years < 1):
            raise ValueError("cycle_years must be at least 1 for cyclic investments")
        if not self.is_cyclic:
            self.cycle_years = None
        return self


class InvestmentCreate(InvestmentBase):
    school_id: str
    years: List[InvestmentYear] = []

    @field_validator("years")
    def unique_years(cls, v):
        return check_unique_years(v)


class InvestmentUpdate(BaseModel):
    title: Optional[NonBlankStr] = None
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[InvestmentType] = None
    status: Optional[InvestmentStatus] = None
    start_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    is_cyclic: Optional[bool] = None
    cycle_years: Optional[int] = Field(None, ge=1)

    # Replaces all year rows when provided
    years: Optional[List[InvestmentYear]] = None

    @field_validator("years")
    def unique_years(cls, v):
        return check_unique_years(v) if v is not None else v


# -------------------------------------------------
# Quotes (offertes)
# -------------------------------------------------
class QuoteCreate(BaseModel):
    school_id: str
    vendor: str = Field(..., min_length=1)
    quoted_amount: int = Field(..., ge=0)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: QuoteStatus = QuoteStatus.draft
    quote_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    investment_id: Optional[str] = None


class QuoteUpdate(BaseModel):
    vendor: Optional[NonBlankStr] = None
    quoted_amount: Optional[int] = Field(None, ge=0)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[QuoteStatus] = None
    quote_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    investment_id: Optional[str] = None
