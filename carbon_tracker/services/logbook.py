"""
Daily log entry service.

Turns raw user input into records and enforces one entry per calendar day
before handing them to the store.
"""

import logging
from datetime import date, datetime

from carbon_tracker.pydantic_models.emission import EmissionBreakdown
from carbon_tracker.pydantic_models.record import CarbonRecordPydModel, local_now
from carbon_tracker.services.calculators.emission_calculator import EmissionCalculator
from carbon_tracker.storage.record_store import RecordStore

logger = logging.getLogger(__name__)


class LogEntryError(Exception):
    """Base class for rejected log entries."""
    pass


class EntryValidationError(LogEntryError):
    """Raised when an input is not a number."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Please enter a valid number for {field} (got {value!r})")


class DuplicateEntryError(LogEntryError):
    """Raised when today already has an entry."""

    def __init__(self, existing: CarbonRecordPydModel):
        self.existing = existing
        super().__init__(
            "An entry for today already exists. "
            "Delete the existing entry to add a new one."
        )


def parse_number(field: str, value: str | float | int) -> float:
    """
    Parse a numeric input.

    Raises:
        EntryValidationError: If the value is not a number
    """
    if isinstance(value, bool):
        raise EntryValidationError(field, value)
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        raise EntryValidationError(field, value) from None


class DailyLogService:
    """Log entry workflow on top of a RecordStore."""

    def __init__(self, store: RecordStore):
        self.store = store

    @staticmethod
    def parse_measurements(
        transportation_km: str | float,
        energy_kwh: str | float,
        waste_kg: str | float,
    ) -> tuple[float, float, float]:
        """Parse the three measurements, failing on the first bad one."""
        return (
            parse_number("transportation", transportation_km),
            parse_number("energy", energy_kwh),
            parse_number("waste", waste_kg),
        )

    def log_today(
        self,
        transportation_km: str | float,
        energy_kwh: str | float,
        waste_kg: str | float,
        notes: str = "",
        now: datetime | None = None,
    ) -> CarbonRecordPydModel:
        """
        Create and store today's record.

        Args:
            transportation_km: Kilometres travelled
            energy_kwh: Electricity used
            waste_kg: Waste produced
            notes: Optional notes
            now: Override for the entry timestamp

        Returns:
            The stored record

        Raises:
            EntryValidationError: If an input is not a number
            DuplicateEntryError: If today already has a record
            RecordWriteError: If the store could not be saved
        """
        km, kwh, kg = self.parse_measurements(transportation_km, energy_kwh, waste_kg)
        now = now or local_now()

        existing = self.store.record_for_today(today=now.astimezone().date())
        if existing is not None:
            logger.info(f"Rejected entry: record {existing.id} already logged today")
            raise DuplicateEntryError(existing)

        record = CarbonRecordPydModel(
            date=now,
            transportation_km=km,
            energy_kwh=kwh,
            waste_kg=kg,
            notes=notes,
        )
        result = self.store.add(record)
        if not result.ok:
            self.store.discard(record)
            result.raise_for_status()
        return record

    def today_breakdown(self, today: date | None = None) -> EmissionBreakdown | None:
        """Emission breakdown for today's record, if there is one."""
        record = self.store.record_for_today(today=today)
        if record is None:
            return None
        return EmissionCalculator.breakdown(record)
