"""Google Sheets access via gspread.

Handles service-account authentication, spreadsheet creation, existence
checks, value-range writes and appends, and formatting (banding, bold
header, rename). ``SheetsService`` wraps an explicitly passed
``gspread.Client``; no other module talks to gspread directly.

Every method is a direct remote call. Failures propagate as gspread
exceptions and are never retried.
"""

import logging
from pathlib import Path
from typing import Any, Sequence

import gspread
from google.oauth2.service_account import Credentials
from gspread.exceptions import SpreadsheetNotFound

from config import (
    FROZEN_ROW_COUNT,
    SCOPES,
    SERVICE_ACCOUNT_KEY_PATH,
    VALUE_INPUT_OPTION,
)

logger = logging.getLogger(__name__)


def get_sheets_client(key_path: Path = SERVICE_ACCOUNT_KEY_PATH) -> gspread.Client:
    """Authenticate with Google Sheets using the service account key.

    Args:
        key_path: Path to the service account JSON key file.

    Returns:
        An authorized ``gspread.Client``.

    Raises:
        FileNotFoundError: If the service account key file does not exist.
        google.auth.exceptions.DefaultCredentialsError: If the key is invalid.
    """
    if not key_path.is_file():
        raise FileNotFoundError(
            f"Service account key file not found: {key_path}"
        )
    creds = Credentials.from_service_account_file(str(key_path), scopes=SCOPES)
    return gspread.authorize(creds)


class SheetsService:
    """Thin pass-through to the Sheets API for one authorized client.

    Args:
        client: An authorized gspread client, reused for every call.
    """

    def __init__(self, client: gspread.Client) -> None:
        self._client = client

    def _open(self, spreadsheet_id: str) -> gspread.Spreadsheet:
        return self._client.open_by_key(spreadsheet_id)

    # -----------------------------------------------------------------------
    # Spreadsheets
    # -----------------------------------------------------------------------

    def create_spreadsheet(self, title: str, sheet_titles: Sequence[str]) -> str:
        """Create a spreadsheet whose tabs are exactly *sheet_titles*.

        gspread creates spreadsheets with a single default tab, so the first
        tab is renamed and the remaining ones are added in one batch update.
        Every tab gets a frozen header row.

        Args:
            title: The spreadsheet title.
            sheet_titles: Tab titles, in order. Must not be empty.

        Returns:
            The ID assigned to the new spreadsheet.

        Raises:
            ValueError: If *sheet_titles* is empty.
            gspread.exceptions.APIError: If the tab setup fails. The
                spreadsheet already exists at that point and is not deleted;
                its ID is in the log.
        """
        if not sheet_titles:
            raise ValueError("At least one sheet title is required")

        logger.info("Creating spreadsheet %s", title)
        spreadsheet = self._client.create(title)
        logger.info("Created spreadsheet %s, setting up tabs", spreadsheet.id)
        grid_properties = {"frozenRowCount": FROZEN_ROW_COUNT}

        requests: list[dict[str, Any]] = [{
            "updateSheetProperties": {
                "properties": {
                    "sheetId": spreadsheet.sheet1.id,
                    "title": sheet_titles[0],
                    "gridProperties": grid_properties,
                },
                "fields": "title,gridProperties.frozenRowCount",
            },
        }]
        for index, sheet_title in enumerate(sheet_titles[1:], start=1):
            requests.append({
                "addSheet": {
                    "properties": {
                        "title": sheet_title,
                        "index": index,
                        "gridProperties": grid_properties,
                    },
                },
            })

        spreadsheet.batch_update({"requests": requests})
        return spreadsheet.id

    def exists(self, spreadsheet_id: str) -> bool:
        """Check whether a spreadsheet with *spreadsheet_id* still exists.

        Performs a fresh metadata lookup on every call.

        Returns:
            ``False`` if the API reports the spreadsheet as not found.

        Raises:
            gspread.exceptions.APIError: On any other API failure
                (permissions, quota, server errors).
        """
        try:
            self._open(spreadsheet_id)
        except SpreadsheetNotFound:
            return False
        return True

    def get_spreadsheet(self, spreadsheet_id: str) -> dict[str, Any]:
        """Fetch the full spreadsheet metadata (properties, sheets, banded ranges)."""
        return self._open(spreadsheet_id).fetch_sheet_metadata()

    def get_sheet_id(self, spreadsheet_id: str, sheet_index: int) -> int:
        """Return the numeric sheet ID of the tab at *sheet_index*."""
        sheets = self.get_spreadsheet(spreadsheet_id)["sheets"]
        return sheets[sheet_index]["properties"]["sheetId"]

    def get_number_of_rows(self, spreadsheet_id: str, range_ref: str) -> int:
        """Return the number of populated rows in *range_ref*."""
        response = self._open(spreadsheet_id).values_get(range_ref)
        return len(response.get("values", []))

    # -----------------------------------------------------------------------
    # Values
    # -----------------------------------------------------------------------

    def write_range(
        self,
        spreadsheet_id: str,
        range_ref: str,
        rows: list[list[Any]],
    ) -> dict[str, Any]:
        """Overwrite *range_ref* with *rows*, stored literally (no formulas).

        The range is cleared first so rows left by a longer earlier write do
        not remain below the new ones.
        """
        logger.info("Writing %d rows to %s", len(rows), range_ref)
        spreadsheet = self._open(spreadsheet_id)
        spreadsheet.values_clear(range_ref)
        return spreadsheet.values_update(
            range_ref,
            params={"valueInputOption": VALUE_INPUT_OPTION},
            body={"values": rows},
        )

    def append_range(
        self,
        spreadsheet_id: str,
        range_ref: str,
        rows: list[list[Any]],
    ) -> dict[str, Any]:
        """Append *rows* after the existing content of *range_ref*."""
        logger.info("Appending %d rows to %s", len(rows), range_ref)
        return self._open(spreadsheet_id).values_append(
            range_ref,
            params={"valueInputOption": VALUE_INPUT_OPTION},
            body={"values": rows},
        )

    # -----------------------------------------------------------------------
    # Formatting
    # -----------------------------------------------------------------------

    def set_banding(
        self,
        spreadsheet_id: str,
        sheet_index: int,
        range_ref: str,
        header_color: dict[str, float],
        first_band_color: dict[str, float],
        second_band_color: dict[str, float],
    ) -> dict[str, Any]:
        """Apply alternating row colours from the header row down.

        The banded range ends at the current row count of *range_ref*. If the
        sheet already has a banded range, the first one is updated in place;
        otherwise a new one is added.

        Args:
            spreadsheet_id: The target spreadsheet.
            sheet_index: Position of the tab in the spreadsheet.
            range_ref: A1 range used to count populated rows (usually the
                sheet title).
            header_color: Colour of the header row.
            first_band_color: Colour of odd data rows.
            second_band_color: Colour of even data rows.
        """
        metadata = self.get_spreadsheet(spreadsheet_id)
        sheet = metadata["sheets"][sheet_index]
        banded_range: dict[str, Any] = {
            "range": {
                "sheetId": sheet["properties"]["sheetId"],
                "endRowIndex": self.get_number_of_rows(spreadsheet_id, range_ref),
            },
            "rowProperties": {
                "headerColor": header_color,
                "firstBandColor": first_band_color,
                "secondBandColor": second_band_color,
            },
        }

        existing = sheet.get("bandedRanges", [])
        if existing:
            logger.info("Updating banding on sheet %s", range_ref)
            banded_range["bandedRangeId"] = existing[0]["bandedRangeId"]
            request = {
                "updateBanding": {"bandedRange": banded_range, "fields": "*"},
            }
        else:
            logger.info("Adding banding to sheet %s", range_ref)
            request = {"addBanding": {"bandedRange": banded_range}}

        return self._open(spreadsheet_id).batch_update({"requests": [request]})

    def bold_header_row(self, spreadsheet_id: str, sheet_index: int) -> dict[str, Any]:
        """Make the text of row 1 bold on the tab at *sheet_index*.

        Only the first row is formatted, whatever the frozen row count.
        """
        logger.info("Making header row text bold on sheet %d", sheet_index)
        request = {
            "repeatCell": {
                "range": {
                    "sheetId": self.get_sheet_id(spreadsheet_id, sheet_index),
                    "startRowIndex": 0,
                    "endRowIndex": 1,
                },
                "cell": {"userEnteredFormat": {"textFormat": {"bold": True}}},
                "fields": "userEnteredFormat.textFormat.bold",
            },
        }
        return self._open(spreadsheet_id).batch_update({"requests": [request]})

    def rename(self, spreadsheet_id: str, title: str) -> dict[str, Any]:
        """Change the spreadsheet title, leaving every other property untouched."""
        logger.info("Renaming spreadsheet to %s", title)
        request = {
            "updateSpreadsheetProperties": {
                "properties": {"title": title},
                "fields": "title",
            },
        }
        return self._open(spreadsheet_id).batch_update({"requests": [request]})
