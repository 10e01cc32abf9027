# -------------------------
# Enums
# -------------------------
from .enums import (
    BaseStrEnum,
    Priority,
    WorkStatus,
    InvestmentStatus,
    InvestmentType,
    QuoteStatus,
    ActivityType,
    InstallationType,
    FloorLevel,
    DrawingCategory,
    ContactCategory,
)

__all__ = [
    "BaseStrEnum",
    "Priority",
    "WorkStatus",
    "InvestmentStatus",
    "InvestmentType",
    "QuoteStatus",
    "ActivityType",
    "InstallationType",
    "FloorLevel",
    "DrawingCategory",
    "ContactCategory",
]
