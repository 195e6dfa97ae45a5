"""
Emission calculations over carbon records.

Stateless helpers over the emissions each record derives from
utils.constants.EmissionFactor.
"""

from typing import Iterable

from carbon_tracker.pydantic_models.emission import EmissionBreakdown
from carbon_tracker.pydantic_models.record import CarbonRecordPydModel


class EmissionCalculator:
    """
    Emission calculation service.

    Collects per-category and total emissions in kg CO2.
    """

    @staticmethod
    def breakdown(record: CarbonRecordPydModel) -> EmissionBreakdown:
        """Per-category and total emissions for one record."""
        return EmissionBreakdown(
            record_id=record.id,
            date=record.date,
            transportation=record.transportation_emission,
            energy=record.energy_emission,
            waste=record.waste_emission,
            total=record.total_emission,
            notes=record.notes,
        )

    @staticmethod
    def total(records: Iterable[CarbonRecordPydModel]) -> float:
        """Sum of total emissions across records."""
        return sum(record.total_emission for record in records)
