"""
Pydantic models for records, store results and emission summaries.
"""
from carbon_tracker.pydantic_models.emission import (
    EmissionBreakdown,
    EmissionSummary,
    TrendPoint,
)
from carbon_tracker.pydantic_models.record import (
    CarbonRecordBase,
    CarbonRecordPydModel,
)
from carbon_tracker.pydantic_models.store import RecordFileModel, StoreResult

__all__ = [
    "CarbonRecordBase",
    "CarbonRecordPydModel",
    "EmissionBreakdown",
    "EmissionSummary",
    "RecordFileModel",
    "StoreResult",
    "TrendPoint",
]
