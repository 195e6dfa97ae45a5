"""
Trend and history aggregation.

Builds the recent-emissions series and summary figures from the records
held by a RecordStore.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional

from carbon_tracker.pydantic_models.emission import EmissionSummary, TrendPoint
from carbon_tracker.pydantic_models.record import CarbonRecordPydModel, local_now
from carbon_tracker.storage.record_store import RecordStore
from carbon_tracker.utils.constants import DEFAULT_TREND_WINDOW_DAYS

logger = logging.getLogger(__name__)


class TrendAggregator:
    """
    Service for summarizing records over time.

    Provides:
    - The records from the last N days, oldest first
    - Trend points of total emission per record
    - Totals, averages and maximum over any set of records
    """

    def __init__(self, store: RecordStore, window_days: int = DEFAULT_TREND_WINDOW_DAYS):
        self.store = store
        self.window_days = window_days

    def recent_records(
        self,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[CarbonRecordPydModel]:
        """
        Records dated within the last ``days`` days, oldest first.

        Args:
            days: Window length, defaults to the configured window
            now: Override for the current time
        """
        days = self.window_days if days is None else days
        now = (now or local_now()).astimezone()
        cutoff = now - timedelta(days=days)

        recent = [r for r in self.store.records if r.date >= cutoff]
        recent.sort(key=lambda r: r.date)
        logger.debug(f"{len(recent)} records since {cutoff.isoformat()}")
        return recent

    def trend_points(
        self,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[TrendPoint]:
        """Total emission per record over the window, for charting."""
        return [
            TrendPoint(date=r.date, total_emission=r.total_emission)
            for r in self.recent_records(days=days, now=now)
        ]

    @staticmethod
    def summarize(records: Iterable[CarbonRecordPydModel]) -> EmissionSummary:
        """
        Aggregate emissions over the given records.

        Returns:
            EmissionSummary; all zeros when there are no records
        """
        records = list(records)
        if not records:
            return EmissionSummary()

        totals = [r.total_emission for r in records]
        total = sum(totals)
        return EmissionSummary(
            record_count=len(records),
            transportation=sum(r.transportation_emission for r in records),
            energy=sum(r.energy_emission for r in records),
            waste=sum(r.waste_emission for r in records),
            total=total,
            average_per_record=total / len(records),
            max_record_total=max(totals),
            from_date=min(r.date for r in records),
            to_date=max(r.date for r in records),
        )

    def recent_summary(
        self,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> EmissionSummary:
        """Summary of the trend window."""
        return self.summarize(self.recent_records(days=days, now=now))

    def history_summary(self) -> EmissionSummary:
        """Summary of every stored record."""
        return self.summarize(self.store.records)
