"""
Configuration loading.

Each environment has a TOML file under ``carbon_tracker/cfg``.
"""
import logging
import os
from pathlib import Path
from typing import Any

import toml

from carbon_tracker.utils.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_FILE_NAME,
    DEFAULT_TREND_WINDOW_DAYS,
    ConfigFile,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "cfg"


class Config:
    """Parsed configuration with typed accessors for the common keys."""

    def __init__(self, data: dict[str, Any], source: Path | None = None):
        self.data = data
        self.source = source

    @property
    def data_dir(self) -> Path:
        raw = self.data.get("storage", {}).get("data_dir", DEFAULT_DATA_DIR)
        return Path(os.path.expandvars(str(raw))).expanduser()

    @property
    def data_file_path(self) -> Path:
        file_name = self.data.get("storage", {}).get("file_name", DEFAULT_FILE_NAME)
        return self.data_dir / file_name

    @property
    def trend_window_days(self) -> int:
        return int(
            self.data.get("trends", {}).get("window_days", DEFAULT_TREND_WINDOW_DAYS)
        )

    @property
    def log_level(self) -> str:
        return str(self.data.get("logging", {}).get("level", "INFO")).upper()


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: Config) -> None:
    """Set up root logging at the level from the [logging] section."""
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(config.log_level)


def get_config_file_from_env() -> str:
    """
    Resolve the config file name from the ENVIRONMENT variable.

    Returns:
        File name such as "development.toml"
    """
    env = os.getenv("ENVIRONMENT", "development")
    return f"{env}.toml"


def get_config(config_file: str | None = None) -> Config:
    """
    Load configuration from a TOML file.

    Args:
        config_file: File name inside the cfg directory, or a path to a TOML
            file anywhere on disk. Defaults to the file for $ENVIRONMENT.

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the file does not exist
    """
    config_file = config_file or get_config_file_from_env()
    config_path = Path(config_file)
    if not config_path.is_absolute() and not config_path.exists():
        config_path = CONFIG_DIR / config_file

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading config from {config_path}")
    return Config(toml.load(config_path), source=config_path)


__all__ = [
    "Config",
    "ConfigFile",
    "configure_logging",
    "get_config",
    "get_config_file_from_env",
]
