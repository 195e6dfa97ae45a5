"""
Pytest configuration and fixtures.
"""
import pytest

from carbon_tracker.core.config import ConfigFile, configure_logging, get_config
from carbon_tracker.services.aggregators import TrendAggregator
from carbon_tracker.services.logbook import DailyLogService
from carbon_tracker.storage.record_store import RecordStore

configure_logging(get_config(ConfigFile.TEST))


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with test storage settings.
    """
    return get_config(ConfigFile.TEST)


@pytest.fixture(scope="function")
def records_file(tmp_path, test_config):
    """
    Path for a records file inside a per-test temporary directory.

    Uses the configured file name so tests exercise the same layout.
    """
    return tmp_path / "data" / test_config.data_file_path.name


@pytest.fixture(scope="function")
def record_store(records_file):
    """Empty store backed by a file that does not exist yet."""
    return RecordStore(records_file)


@pytest.fixture(scope="function")
def log_service(record_store):
    return DailyLogService(record_store)


@pytest.fixture(scope="function")
def trend_aggregator(record_store, test_config):
    return TrendAggregator(record_store, window_days=test_config.trend_window_days)
