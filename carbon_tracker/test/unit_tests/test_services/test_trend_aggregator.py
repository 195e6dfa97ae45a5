"""
Service tests for trend aggregation.
"""
from datetime import datetime, timedelta

import pytest

from carbon_tracker.pydantic_models.record import local_now
from carbon_tracker.services.aggregators import TrendAggregator
from carbon_tracker.test.factory.record import CarbonRecordFactory, DaysAgoRecordFactory


def test_recent_records_window(record_store, trend_aggregator):
    """Test only records from the last seven days are returned, oldest first."""
    now = local_now()
    old = CarbonRecordFactory(date=now - timedelta(days=10))
    today = CarbonRecordFactory(date=now)
    three_days = CarbonRecordFactory(date=now - timedelta(days=3))
    for record in (old, today, three_days):
        record_store.add(record)

    recent = trend_aggregator.recent_records(now=now)

    assert recent == [three_days, today]


def test_recent_records_custom_window(record_store, trend_aggregator):
    now = local_now()
    record = CarbonRecordFactory(date=now - timedelta(days=10))
    record_store.add(record)

    assert trend_aggregator.recent_records(days=30, now=now) == [record]
    assert trend_aggregator.recent_records(days=1, now=now) == []


def test_recent_records_accepts_naive_now(record_store, trend_aggregator):
    record_store.add(CarbonRecordFactory())

    assert len(trend_aggregator.recent_records(now=datetime.now())) == 1


def test_trend_points(record_store, trend_aggregator):
    """Test trend points carry each record's total emission."""
    record_store.add(DaysAgoRecordFactory(days_ago=2, energy_kwh=10.0))
    record_store.add(DaysAgoRecordFactory(days_ago=1, energy_kwh=2.0))

    points = trend_aggregator.trend_points()

    assert len(points) == 2
    assert points[0].date < points[1].date
    assert points[0].total_emission == pytest.approx(10 * 0.21 + 10 * 0.5 + 0.1)
    assert points[1].total_emission == pytest.approx(10 * 0.21 + 2 * 0.5 + 0.1)


def test_summarize_empty():
    summary = TrendAggregator.summarize([])

    assert summary.record_count == 0
    assert summary.total == 0.0
    assert summary.from_date is None


def test_summarize_records():
    """Test totals, average and maximum over a set of records."""
    low = DaysAgoRecordFactory(
        days_ago=1, transportation_km=0, energy_kwh=2.0, waste_kg=0
    )
    high = CarbonRecordFactory(transportation_km=10, energy_kwh=4.0, waste_kg=5.0)

    summary = TrendAggregator.summarize([low, high])

    assert summary.record_count == 2
    assert summary.transportation == pytest.approx(2.1)
    assert summary.energy == pytest.approx(3.0)
    assert summary.waste == pytest.approx(0.5)
    assert summary.total == pytest.approx(5.6)
    assert summary.average_per_record == pytest.approx(2.8)
    assert summary.max_record_total == pytest.approx(4.6)
    assert summary.from_date == low.date
    assert summary.to_date == high.date


def test_history_and_recent_summary(record_store, trend_aggregator):
    record_store.add(DaysAgoRecordFactory(days_ago=20))
    record_store.add(CarbonRecordFactory())

    assert trend_aggregator.history_summary().record_count == 2
    assert trend_aggregator.recent_summary().record_count == 1
