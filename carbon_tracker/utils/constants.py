"""
Application constants.
"""
from enum import Enum


class ConfigFile:
    """Configuration file names."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class EmissionFactor:
    """Fixed emission coefficients in kg CO2 per unit of activity."""
    TRANSPORTATION_KG_PER_KM = 0.21
    ENERGY_KG_PER_KWH = 0.5
    WASTE_KG_PER_KG = 0.1


class StoreStatus(str, Enum):
    """Outcome of a record store load or save."""
    LOADED = "loaded"
    FILE_ABSENT = "file_absent"
    DECODE_FAILURE = "decode_failure"
    SAVED = "saved"
    WRITE_FAILURE = "write_failure"


# Storage defaults
DEFAULT_DATA_DIR = "~/.carbon_tracker"
DEFAULT_FILE_NAME = "carbonRecords.json"
SCHEMA_VERSION = 1

# Trends screen shows the last week
DEFAULT_TREND_WINDOW_DAYS = 7

# Timestamps written by the iOS app count seconds from 2001-01-01 UTC
APPLE_REFERENCE_EPOCH_OFFSET = 978307200
