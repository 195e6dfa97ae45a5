"""
Service tests for the daily log entry workflow.
"""
from datetime import timedelta

import pytest

from carbon_tracker.pydantic_models.record import local_now
from carbon_tracker.services.logbook import (
    DailyLogService,
    DuplicateEntryError,
    EntryValidationError,
    parse_number,
)
from carbon_tracker.storage.exceptions import RecordWriteError
from carbon_tracker.storage.record_store import RecordStore
from carbon_tracker.test.factory.record import DaysAgoRecordFactory


def test_log_today_stores_parsed_record(log_service, records_file):
    """Test text inputs are parsed and the record is persisted."""
    record = log_service.log_today("12.5", " 4 ", "0.75", notes="bus day")

    assert record.transportation_km == 12.5
    assert record.energy_kwh == 4.0
    assert record.waste_kg == 0.75
    assert record.notes == "bus day"
    assert RecordStore(records_file).records == (record,)


def test_log_today_rejects_second_entry(log_service):
    """Test only one entry can be logged per calendar day."""
    first = log_service.log_today(1, 1, 1)

    with pytest.raises(DuplicateEntryError) as exc_info:
        log_service.log_today(2, 2, 2)

    assert exc_info.value.existing == first
    assert len(log_service.store) == 1


def test_log_today_allowed_after_yesterday(log_service):
    log_service.store.add(DaysAgoRecordFactory(days_ago=1))

    log_service.log_today(3, 3, 3)

    assert len(log_service.store) == 2


def test_log_today_after_deleting_existing(log_service):
    """Test deleting today's entry allows a new one."""
    log_service.log_today(1, 1, 1)
    log_service.store.delete([0])

    record = log_service.log_today(5, 5, 5)

    assert log_service.store.record_for_today() == record


def test_log_today_uses_given_timestamp(log_service):
    now = local_now() - timedelta(days=3)

    record = log_service.log_today(1, 2, 3, now=now)

    assert record.date == now


@pytest.mark.parametrize(
    "inputs, field",
    [
        (("abc", "1", "1"), "transportation"),
        (("1", "", "1"), "energy"),
        (("1", "1", "1,5"), "waste"),
    ],
)
def test_non_numeric_input_rejected(log_service, inputs, field):
    """Test invalid input names the field and stores nothing."""
    with pytest.raises(EntryValidationError) as exc_info:
        log_service.log_today(*inputs)

    assert exc_info.value.field == field
    assert len(log_service.store) == 0


def test_parse_number_rejects_bool():
    with pytest.raises(EntryValidationError):
        parse_number("energy", True)


def test_log_today_raises_on_write_failure(tmp_path):
    """Test a failed save surfaces as RecordWriteError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    service = DailyLogService(RecordStore(blocker / "carbonRecords.json"))

    with pytest.raises(RecordWriteError):
        service.log_today(1, 1, 1)

    assert len(service.store) == 0


def test_log_today_retry_after_write_failure(tmp_path):
    """Test a failed save leaves no record behind, so a retry is not a duplicate."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    service = DailyLogService(RecordStore(blocker / "carbonRecords.json"))

    with pytest.raises(RecordWriteError):
        service.log_today(1, 1, 1)
    with pytest.raises(RecordWriteError):
        service.log_today(1, 1, 1)

    assert service.store.record_for_today() is None

    blocker.unlink()
    record = service.log_today(1, 1, 1)

    assert service.store.records == (record,)


def test_today_breakdown(log_service):
    """Test the dashboard breakdown for today's record."""
    assert log_service.today_breakdown() is None

    record = log_service.log_today(10, 4, 2, notes="note")
    breakdown = log_service.today_breakdown()

    assert breakdown.record_id == record.id
    assert breakdown.transportation == pytest.approx(2.1)
    assert breakdown.energy == pytest.approx(2.0)
    assert breakdown.waste == pytest.approx(0.2)
    assert breakdown.total == pytest.approx(4.3)
    assert breakdown.notes == "note"
