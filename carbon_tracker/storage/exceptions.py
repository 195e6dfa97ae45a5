"""
Record store exceptions.
"""
from pathlib import Path


class RecordStoreError(Exception):
    """
    Base class for record file failures.

    Keeps the file path and the original exception, if one was caught.
    """

    def __init__(
        self, path: Path, message: str, original_exception: Exception | None = None
    ):
        self.path = path
        self.message = message
        self.original_exception = original_exception

        error_msg = f"{message} ({path})"
        if original_exception:
            error_msg += (
                f"\nCaused by: {type(original_exception).__name__}: "
                f"{original_exception}"
            )

        super().__init__(error_msg)


class RecordDecodeError(RecordStoreError):
    """Raised when the records file is corrupt or incompatible."""
    pass


class RecordWriteError(RecordStoreError):
    """Raised when the records file cannot be written."""
    pass
