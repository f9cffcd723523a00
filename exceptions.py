"""Custom exception classes for the RAID champion data sheet exporter.

All exceptions defined here are fatal — any raise aborts the run with a full
traceback. Remote API failures are not wrapped; they surface as the
``gspread`` exceptions raised by the client.
"""

from pathlib import Path


class SpreadsheetIdFileError(Exception):
    """Raised when the local spreadsheet ID file cannot be created, read or written.

    Always chained from the underlying ``OSError``.

    Args:
        path: The path of the spreadsheet ID file.
        action: What was being attempted (e.g. "reading", "writing").
    """

    def __init__(self, path: Path, action: str) -> None:
        self.path = path
        self.action = action
        super().__init__(
            f"Error occurred when {action} spreadsheet ID file '{path}'. "
            f"Operation will be aborted."
        )


class DataFileError(Exception):
    """Raised when the champion data file is missing a field or holds an invalid value.

    Examples: a champion without a ``faction`` key, a rarity name that does
    not match any known rarity.

    Args:
        path: The path of the data file being loaded.
        field: The name of the offending field (e.g. "faction", "skills").
        reason: Human-readable explanation of why the value is invalid.
    """

    def __init__(self, path: Path, field: str, reason: str) -> None:
        self.path = path
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid data file '{path}': field '{field}'. {reason}"
        )
