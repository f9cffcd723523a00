"""Spreadsheet initialization and publishing for the Champions/Skills export.

``initialize_spreadsheet()`` decides, once per run, whether to create a new
spreadsheet or reuse the one recorded in the local ID file.
``publish()`` writes the collected rows and formats both sheets.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Sequence

from config import (
    BANDING_FIRST_BAND_COLOR,
    BANDING_HEADER_COLOR,
    BANDING_SECOND_BAND_COLOR,
    SPREADSHEET_TITLE_FORMAT,
)
from rows import SheetRows
from sheets import SheetsService
from spreadsheet_id import SpreadsheetIdStore

logger = logging.getLogger(__name__)


class SpreadsheetState(Enum):
    """Situation found at startup, before anything is created."""

    NO_LOCAL_FILE = "no_local_file"
    LOCAL_FILE_NO_REMOTE = "local_file_no_remote"
    LOCAL_FILE_REMOTE_EXISTS = "local_file_remote_exists"


@dataclass(frozen=True)
class InitResult:
    spreadsheet_id: str
    state: SpreadsheetState


def spreadsheet_title(today: Optional[date] = None) -> str:
    """Return the spreadsheet title stamped with *today* (defaults to the current date)."""
    today = today or date.today()
    return SPREADSHEET_TITLE_FORMAT.format(date=today.strftime("%Y-%m-%d"))


def _create_spreadsheet(
    service: SheetsService,
    store: SpreadsheetIdStore,
    sheets: Sequence[SheetRows],
    today: Optional[date],
) -> str:
    spreadsheet_id = service.create_spreadsheet(
        spreadsheet_title(today), [sheet.title for sheet in sheets],
    )
    store.write(spreadsheet_id)
    return spreadsheet_id


def initialize_spreadsheet(
    service: SheetsService,
    store: SpreadsheetIdStore,
    sheets: Sequence[SheetRows],
    today: Optional[date] = None,
) -> InitResult:
    """Make sure a spreadsheet exists for this installation and return its ID.

    Three cases are handled:

    1. No ID file: the file is created, a new spreadsheet is created with
       one tab per entry in *sheets*, and its ID is written to the file.
    2. ID file present but the spreadsheet is gone (or the file is empty):
       a new spreadsheet is created and its ID overwrites the stored one.
    3. ID file present and the spreadsheet exists: nothing is created and
       the file is left untouched. In-place update of an existing
       spreadsheet is not implemented; the later flush simply overwrites
       each sheet.

    In every case the header row is added to each of *sheets*, since a
    flush always rewrites a sheet from its first row.

    Args:
        service: Sheets client used for the existence check and creation.
        store: Local spreadsheet ID file.
        sheets: Row collections, one per tab, in tab order. Must be empty.
        today: Date used in the title of a new spreadsheet.

    Returns:
        The spreadsheet ID to write to, and the state found at startup.

    Raises:
        SpreadsheetIdFileError: If the ID file cannot be created, read or
            written.
        gspread.exceptions.APIError: If a remote call fails.
    """
    if not store.exists():
        state = SpreadsheetState.NO_LOCAL_FILE
        store.create()
        spreadsheet_id = _create_spreadsheet(service, store, sheets, today)
    else:
        stored_id = store.read()
        if stored_id and service.exists(stored_id):
            state = SpreadsheetState.LOCAL_FILE_REMOTE_EXISTS
            logger.info("Spreadsheet already exists on Drive")
            logger.info(
                "Updating Raid data in place is not implemented; "
                "sheets will be overwritten"
            )
            spreadsheet_id = stored_id
        else:
            state = SpreadsheetState.LOCAL_FILE_NO_REMOTE
            if stored_id:
                logger.info("Spreadsheet %s does not exist", stored_id)
            else:
                logger.warning("Spreadsheet ID file %s is empty", store.path)
            spreadsheet_id = _create_spreadsheet(service, store, sheets, today)

    for sheet in sheets:
        sheet.add_header_row()

    logger.info("Using spreadsheet %s (%s)", spreadsheet_id, state.value)
    return InitResult(spreadsheet_id=spreadsheet_id, state=state)


def publish(
    service: SheetsService,
    spreadsheet_id: str,
    sheets: Sequence[SheetRows],
    today: Optional[date] = None,
) -> None:
    """Write every collected sheet, format it, and stamp the title with *today*.

    Each sheet is overwritten in full, its header row made bold, and banding
    applied down to its last row. Remote failures propagate; sheets already
    written are left as they are.
    """
    for sheet in sheets:
        sheet.flush(service, spreadsheet_id)
        service.bold_header_row(spreadsheet_id, sheet.sheet_index)
        service.set_banding(
            spreadsheet_id,
            sheet.sheet_index,
            sheet.title,
            BANDING_HEADER_COLOR,
            BANDING_FIRST_BAND_COLOR,
            BANDING_SECOND_BAND_COLOR,
        )
    service.rename(spreadsheet_id, spreadsheet_title(today))
