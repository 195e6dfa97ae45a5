"""
Factory for carbon records.
"""
import uuid
from datetime import timedelta

import factory

from carbon_tracker.pydantic_models.record import CarbonRecordPydModel, local_now


class CarbonRecordFactory(factory.Factory):
    """Factory for creating CarbonRecordPydModel test instances."""

    class Meta:
        model = CarbonRecordPydModel

    id = factory.LazyFunction(uuid.uuid4)
    date = factory.LazyFunction(local_now)
    transportation_km = 10.0
    energy_kwh = 5.0
    waste_kg = 1.0
    notes = factory.Sequence(lambda n: f"Test note {n}")


class DaysAgoRecordFactory(CarbonRecordFactory):
    """Record dated a number of whole days before now."""

    class Params:
        days_ago = 1

    date = factory.LazyAttribute(lambda obj: local_now() - timedelta(days=obj.days_ago))
