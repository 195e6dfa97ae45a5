"""
Pydantic models for the persisted file and store operation results.
"""
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from carbon_tracker.pydantic_models.record import CarbonRecordPydModel
from carbon_tracker.storage.exceptions import RecordDecodeError, RecordWriteError
from carbon_tracker.utils.constants import SCHEMA_VERSION, StoreStatus


class RecordFileModel(BaseModel):
    """Versioned envelope written to the records file."""

    model_config = ConfigDict(extra="forbid")

    version: int = Field(SCHEMA_VERSION, ge=0, description="Schema version")
    records: list[CarbonRecordPydModel] = Field(..., description="Stored records")


class StoreResult(BaseModel):
    """Outcome of a load or save, returned instead of raising."""

    status: StoreStatus
    path: Path
    record_count: int = Field(0, ge=0)
    error: str | None = None
    backup_path: Path | None = Field(
        None, description="Where an unreadable file was moved on load"
    )

    @property
    def ok(self) -> bool:
        return self.status not in (
            StoreStatus.DECODE_FAILURE,
            StoreStatus.WRITE_FAILURE,
        )

    def raise_for_status(self) -> "StoreResult":
        """
        Raise the matching exception if the operation failed.

        Returns:
            self, so calls can be chained

        Raises:
            RecordDecodeError: If the file could not be decoded
            RecordWriteError: If the file could not be written
        """
        if self.status == StoreStatus.DECODE_FAILURE:
            raise RecordDecodeError(self.path, self.error or "unreadable file")
        if self.status == StoreStatus.WRITE_FAILURE:
            raise RecordWriteError(self.path, self.error or "write failed")
        return self
