"""Local persistence of the spreadsheet ID.

The ID file is the sole record of which spreadsheet belongs to this
installation. It is opened, fully read or written, and closed within each
call.
"""

import logging
from pathlib import Path
from typing import Optional

from config import SPREADSHEET_ID_FILE
from exceptions import SpreadsheetIdFileError

logger = logging.getLogger(__name__)


class SpreadsheetIdStore:
    """Reads and writes the single-line spreadsheet ID file.

    Args:
        path: Location of the ID file. Defaults to
            ``config.SPREADSHEET_ID_FILE``.
    """

    def __init__(self, path: Path = SPREADSHEET_ID_FILE) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def create(self) -> None:
        """Create an empty ID file, including its parent directory.

        Raises:
            SpreadsheetIdFileError: If the file cannot be created.
        """
        logger.info("Creating new local file %s", self.path.resolve())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as e:
            raise SpreadsheetIdFileError(self.path, "creating") from e

    def read(self) -> Optional[str]:
        """Return the first line of the ID file.

        Returns:
            The stored ID without its line ending, an empty string if the
            file is empty, or ``None`` if the file does not exist.

        Raises:
            SpreadsheetIdFileError: If the file exists but cannot be read.
        """
        if not self.exists():
            return None
        logger.info("Retrieving spreadsheet ID from file")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.readline().rstrip("\r\n")
        except OSError as e:
            raise SpreadsheetIdFileError(self.path, "reading") from e

    def write(self, spreadsheet_id: str) -> None:
        """Overwrite the ID file with exactly *spreadsheet_id*.

        Raises:
            SpreadsheetIdFileError: If the file cannot be written.
        """
        logger.info("Writing spreadsheet ID to file")
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(spreadsheet_id)
        except OSError as e:
            raise SpreadsheetIdFileError(self.path, "writing") from e
