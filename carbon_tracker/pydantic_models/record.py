"""
Pydantic models for daily carbon records.

Field names are snake_case in Python and camelCase in the JSON file.
"""
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from carbon_tracker.utils.constants import APPLE_REFERENCE_EPOCH_OFFSET, EmissionFactor


def local_now() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


class CarbonRecordBase(BaseModel):
    """Base record model: one day's measurements."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: datetime = Field(
        default_factory=local_now,
        description="When the entry was created; the day it represents",
    )
    transportation_km: float = Field(
        ..., alias="transportationKm", description="Kilometres travelled"
    )
    energy_kwh: float = Field(
        ..., alias="energyKWh", description="Electricity used in kWh"
    )
    waste_kg: float = Field(..., alias="wasteKg", description="Waste produced in kg")
    notes: str = Field("", description="Free-form notes")

    @field_validator("date", mode="before")
    @classmethod
    def parse_reference_timestamp(cls, value: Any) -> Any:
        """Accept the numeric timestamps written by the iOS app."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(
                value + APPLE_REFERENCE_EPOCH_OFFSET, tz=timezone.utc
            )
        return value

    @field_validator("date")
    @classmethod
    def ensure_aware(cls, value: datetime) -> datetime:
        # naive timestamps are local time
        if value.tzinfo is None:
            return value.astimezone()
        return value


class CarbonRecordPydModel(CarbonRecordBase):
    """
    A stored record.

    Emissions are properties computed from the three measurements on every
    access and are never serialized.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique record identifier")

    @property
    def transportation_emission(self) -> float:
        """Transportation emissions in kg CO2."""
        return self.transportation_km * EmissionFactor.TRANSPORTATION_KG_PER_KM

    @property
    def energy_emission(self) -> float:
        """Energy emissions in kg CO2."""
        return self.energy_kwh * EmissionFactor.ENERGY_KG_PER_KWH

    @property
    def waste_emission(self) -> float:
        """Waste emissions in kg CO2."""
        return self.waste_kg * EmissionFactor.WASTE_KG_PER_KG

    @property
    def total_emission(self) -> float:
        """Total emissions in kg CO2."""
        return self.transportation_emission + self.energy_emission + self.waste_emission

    @property
    def local_date(self):
        """Calendar day of the record in the local timezone."""
        return self.date.astimezone().date()

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the persisted field names."""
        return self.model_dump(mode="json", by_alias=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CarbonRecordPydModel):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
