"""
Pydantic models for emission breakdowns, trends and summaries.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class EmissionBreakdown(BaseModel):
    """Per-category emissions for one record, in kg CO2."""

    record_id: UUID
    date: datetime
    transportation: float = Field(..., description="Transportation kg CO2")
    energy: float = Field(..., description="Energy kg CO2")
    waste: float = Field(..., description="Waste kg CO2")
    total: float = Field(..., description="Total kg CO2")
    notes: str = ""


class TrendPoint(BaseModel):
    """One point of the emissions trend series."""

    date: datetime
    total_emission: float


class EmissionSummary(BaseModel):
    """Aggregate over a set of records."""

    record_count: int = Field(0, ge=0)
    transportation: float = 0.0
    energy: float = 0.0
    waste: float = 0.0
    total: float = 0.0
    average_per_record: float = 0.0
    max_record_total: float = 0.0
    from_date: datetime | None = None
    to_date: datetime | None = None
