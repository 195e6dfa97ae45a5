"""
Offline record store.

Keeps every record in memory and rewrites the whole JSON file after each
mutation.
"""
import json
import logging
import os
import tempfile
import threading
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterable

from pydantic import ValidationError

from carbon_tracker.core.config import Config
from carbon_tracker.pydantic_models.record import CarbonRecordPydModel
from carbon_tracker.pydantic_models.store import RecordFileModel, StoreResult
from carbon_tracker.storage.exceptions import RecordDecodeError
from carbon_tracker.utils.constants import SCHEMA_VERSION, StoreStatus

logger = logging.getLogger(__name__)

StoreListener = Callable[["RecordStore"], None]


class RecordStore:
    """
    Ordered collection of carbon records backed by a single JSON file.

    The store is policy-free: it does not enforce one entry per day. That
    rule belongs to the caller (see DailyLogService).
    """

    def __init__(self, file_path: Path | str, autoload: bool = True):
        """
        Initialize the store.

        Args:
            file_path: Location of the JSON records file
            autoload: Load the file immediately
        """
        self.file_path = Path(file_path).expanduser()
        self._records: list[CarbonRecordPydModel] = []
        self._listeners: list[StoreListener] = []
        self._write_lock = threading.Lock()
        self.last_result: StoreResult | None = None

        if autoload:
            self.load()

    @classmethod
    def from_config(cls, config: Config, autoload: bool = True) -> "RecordStore":
        return cls(config.data_file_path, autoload=autoload)

    @property
    def records(self) -> tuple[CarbonRecordPydModel, ...]:
        """Snapshot of the records in insertion order."""
        return tuple(self._records)

    @property
    def data_file_path(self) -> Path:
        """Backing file location, handed to export/share actions as-is."""
        return self.file_path

    def export_path(self) -> Path | None:
        """Backing file location if there is anything to export."""
        return self.file_path if self.file_path.is_file() else None

    def __len__(self) -> int:
        return len(self._records)

    # Observers

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Register a callback run after every load, add and delete.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Persistence

    def load(self) -> StoreResult:
        """
        Replace the in-memory records with the file contents.

        A missing file gives an empty store. An unreadable file is moved
        aside, logged, and also gives an empty store; the failure is reported
        in the returned result rather than raised.
        """
        if not self.file_path.exists():
            logger.info(f"No records file at {self.file_path}, starting empty")
            self._records = []
            result = StoreResult(status=StoreStatus.FILE_ABSENT, path=self.file_path)
        else:
            try:
                self._records = self._read_file()
                logger.info(
                    f"Loaded {len(self._records)} records from {self.file_path}"
                )
                result = StoreResult(
                    status=StoreStatus.LOADED,
                    path=self.file_path,
                    record_count=len(self._records),
                )
            except RecordDecodeError as e:
                logger.error(f"Error loading records: {e}")
                self._records = []
                result = StoreResult(
                    status=StoreStatus.DECODE_FAILURE,
                    path=self.file_path,
                    error=str(e),
                    backup_path=self._move_aside(),
                )

        self.last_result = result
        self._notify()
        return result

    def save(self) -> StoreResult:
        """
        Write every record to the file, replacing it atomically.

        Write errors are logged and returned, never raised.
        """
        payload = RecordFileModel(version=SCHEMA_VERSION, records=self._records)
        document = payload.model_dump(mode="json", by_alias=True)

        with self._write_lock:
            try:
                self._write_file(document)
            except OSError as e:
                logger.error(f"Error saving records to {self.file_path}: {e}")
                result = StoreResult(
                    status=StoreStatus.WRITE_FAILURE,
                    path=self.file_path,
                    record_count=len(self._records),
                    error=f"{type(e).__name__}: {e}",
                )
            else:
                logger.debug(f"Saved {len(self._records)} records to {self.file_path}")
                result = StoreResult(
                    status=StoreStatus.SAVED,
                    path=self.file_path,
                    record_count=len(self._records),
                )

        self.last_result = result
        return result

    def _read_file(self) -> list[CarbonRecordPydModel]:
        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise RecordDecodeError(self.file_path, "Could not read records file", e)

        # Files without an envelope predate schema versioning
        if isinstance(raw, list):
            raw = {"version": 0, "records": raw}

        try:
            parsed = RecordFileModel.model_validate(raw)
        except ValidationError as e:
            raise RecordDecodeError(self.file_path, "Invalid records file", e)

        if parsed.version > SCHEMA_VERSION:
            raise RecordDecodeError(
                self.file_path,
                f"Unsupported schema version {parsed.version} "
                f"(newest supported is {SCHEMA_VERSION})",
            )
        return list(parsed.records)

    def _write_file(self, document: dict) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.file_path.name}.", dir=self.file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _move_aside(self) -> Path | None:
        stamp = datetime.now().strftime("%Y%m%d%H%M%S")
        backup = self.file_path.with_name(f"{self.file_path.name}.corrupt-{stamp}")
        try:
            os.replace(self.file_path, backup)
        except OSError as e:
            logger.warning(f"Could not move unreadable file {self.file_path}: {e}")
            return None
        logger.warning(f"Moved unreadable records file to {backup}")
        return backup

    # Mutations

    def add(self, record: CarbonRecordPydModel) -> StoreResult:
        """Append a record and persist the collection."""
        self._records.append(record)
        logger.info(f"Added record {record.id} dated {record.date.isoformat()}")
        result = self.save()
        self._notify()
        return result

    def discard(self, record: CarbonRecordPydModel) -> bool:
        """
        Drop a record from memory without saving.

        Used to roll back an add whose save failed, so memory matches the
        file again.

        Returns:
            True if the record was present
        """
        for position, existing in enumerate(self._records):
            if existing.id == record.id:
                del self._records[position]
                logger.info(f"Discarded unsaved record {record.id}")
                self._notify()
                return True
        return False

    def delete(self, indices: Iterable[int]) -> StoreResult:
        """
        Remove the records at the given insertion-order positions and persist.

        Args:
            indices: Positions in ``records``; duplicates are ignored

        Raises:
            IndexError: If any position is out of range; nothing is removed
        """
        positions = sorted(set(indices), reverse=True)
        for position in positions:
            if position < 0 or position >= len(self._records):
                raise IndexError(
                    f"Record index {position} out of range for {len(self._records)} records"
                )

        for position in positions:
            removed = self._records.pop(position)
            logger.info(f"Deleted record {removed.id}")

        result = self.save()
        self._notify()
        return result

    # Queries

    def record_for_today(self, today: date | None = None) -> CarbonRecordPydModel | None:
        """
        First record, in insertion order, dated on the current local day.

        Args:
            today: Override for the current day
        """
        today = today or date.today()
        return next((r for r in self._records if r.local_date == today), None)

    def sorted_records(self) -> list[CarbonRecordPydModel]:
        """Records ordered most recent first; equal dates keep insertion order."""
        return sorted(self._records, key=lambda r: r.date, reverse=True)
