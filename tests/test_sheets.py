"""Tests for sheets.py — the gspread-backed Sheets client."""

import logging
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock, patch

import pytest
from gspread.exceptions import SpreadsheetNotFound

from sheets import SheetsService, get_sheets_client


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _metadata(banded_ranges: Optional[list] = None) -> dict:
    """Return spreadsheet metadata with two sheets (IDs 0 and 42)."""
    skills_sheet: dict = {"properties": {"sheetId": 42, "title": "Skills"}}
    if banded_ranges is not None:
        skills_sheet["bandedRanges"] = banded_ranges
    return {
        "properties": {"title": "RSL"},
        "sheets": [
            {"properties": {"sheetId": 0, "title": "Champions"}},
            skills_sheet,
        ],
    }


def _service() -> tuple[SheetsService, MagicMock, MagicMock]:
    client = MagicMock()
    spreadsheet = MagicMock()
    client.open_by_key.return_value = spreadsheet
    return SheetsService(client), client, spreadsheet


# ---------------------------------------------------------------------------
# get_sheets_client
# ---------------------------------------------------------------------------

class TestGetSheetsClient:
    """Tests for get_sheets_client()."""

    def test_missing_key_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Service account key"):
            get_sheets_client(tmp_path / "service_account.json")

    @patch("sheets.gspread.authorize")
    @patch("sheets.Credentials.from_service_account_file")
    def test_authorizes_with_scopes(
        self, mock_creds: MagicMock, mock_authorize: MagicMock, tmp_path: Path,
    ) -> None:
        key = tmp_path / "service_account.json"
        key.write_text("{}", encoding="utf-8")

        client = get_sheets_client(key)

        assert client is mock_authorize.return_value
        _, kwargs = mock_creds.call_args
        assert "https://www.googleapis.com/auth/spreadsheets" in kwargs["scopes"]
        mock_authorize.assert_called_once_with(mock_creds.return_value)


# ---------------------------------------------------------------------------
# create_spreadsheet / exists
# ---------------------------------------------------------------------------

class TestCreateSpreadsheet:
    """Tests for SheetsService.create_spreadsheet()."""

    def test_renames_first_tab_and_adds_the_rest(self) -> None:
        service, client, _ = _service()
        created = client.create.return_value
        created.id = "new-id"
        created.sheet1.id = 0

        result = service.create_spreadsheet("RSL", ["Champions", "Skills"])

        assert result == "new-id"
        client.create.assert_called_once_with("RSL")
        (body,), _ = created.batch_update.call_args
        first, second = body["requests"]
        assert first["updateSheetProperties"]["properties"] == {
            "sheetId": 0,
            "title": "Champions",
            "gridProperties": {"frozenRowCount": 1},
        }
        assert second["addSheet"]["properties"] == {
            "title": "Skills",
            "index": 1,
            "gridProperties": {"frozenRowCount": 1},
        }

    def test_logs_id_before_tab_setup(self, caplog: pytest.LogCaptureFixture) -> None:
        """The new ID is logged even when the tab setup call fails."""
        service, client, _ = _service()
        created = client.create.return_value
        created.id = "orphan-id"
        created.batch_update.side_effect = RuntimeError("quota exceeded")

        with caplog.at_level(logging.INFO, logger="sheets"):
            with pytest.raises(RuntimeError, match="quota exceeded"):
                service.create_spreadsheet("RSL", ["Champions", "Skills"])

        assert "orphan-id" in caplog.text

    def test_requires_a_sheet(self) -> None:
        service, client, _ = _service()

        with pytest.raises(ValueError):
            service.create_spreadsheet("RSL", [])
        client.create.assert_not_called()


class TestExists:
    """Tests for SheetsService.exists()."""

    def test_true_when_spreadsheet_opens(self) -> None:
        service, client, _ = _service()

        assert service.exists("abc") is True
        client.open_by_key.assert_called_once_with("abc")

    def test_false_when_not_found(self) -> None:
        service, client, _ = _service()
        client.open_by_key.side_effect = SpreadsheetNotFound

        assert service.exists("abc") is False

    def test_other_errors_propagate(self) -> None:
        service, client, _ = _service()
        client.open_by_key.side_effect = ConnectionError("network down")

        with pytest.raises(ConnectionError):
            service.exists("abc")

    def test_no_caching(self) -> None:
        service, client, _ = _service()

        service.exists("abc")
        service.exists("abc")

        assert client.open_by_key.call_count == 2


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

class TestValues:
    """Tests for value-range reads and writes."""

    def test_write_range_is_raw_update(self) -> None:
        service, _, spreadsheet = _service()
        rows = [["Name"], ["Kael"]]

        service.write_range("abc", "Champions", rows)

        spreadsheet.values_update.assert_called_once_with(
            "Champions",
            params={"valueInputOption": "RAW"},
            body={"values": rows},
        )

    def test_write_range_clears_before_update(self) -> None:
        """Rows from a longer earlier write are cleared before the new write."""
        service, _, spreadsheet = _service()

        service.write_range("abc", "Champions", [["Name"]])

        names = [c[0] for c in spreadsheet.mock_calls]
        assert names == ["values_clear", "values_update"]
        spreadsheet.values_clear.assert_called_once_with("Champions")

    def test_append_range_is_raw_append(self) -> None:
        service, _, spreadsheet = _service()
        rows = [["Kael"]]

        service.append_range("abc", "Skills", rows)

        spreadsheet.values_append.assert_called_once_with(
            "Skills",
            params={"valueInputOption": "RAW"},
            body={"values": rows},
        )

    def test_number_of_rows_handles_empty_range(self) -> None:
        service, _, spreadsheet = _service()
        spreadsheet.values_get.return_value = {"range": "Skills!A1:Z1000"}

        assert service.get_number_of_rows("abc", "Skills") == 0

    def test_sheet_id_by_index(self) -> None:
        service, _, spreadsheet = _service()
        spreadsheet.fetch_sheet_metadata.return_value = _metadata()

        assert service.get_sheet_id("abc", 1) == 42


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

class TestFormatting:
    """Tests for banding, bold header and rename requests."""

    def test_adds_banding_when_none_exists(self) -> None:
        service, _, spreadsheet = _service()
        spreadsheet.fetch_sheet_metadata.return_value = _metadata()
        spreadsheet.values_get.return_value = {"values": [["a"], ["b"], ["c"]]}
        red, white, grey = {"red": 1.0}, {"red": 1.0, "green": 1.0}, {"blue": 0.5}

        service.set_banding("abc", 1, "Skills", red, white, grey)

        (body,), _ = spreadsheet.batch_update.call_args
        banded = body["requests"][0]["addBanding"]["bandedRange"]
        assert banded["range"] == {"sheetId": 42, "endRowIndex": 3}
        assert banded["rowProperties"] == {
            "headerColor": red,
            "firstBandColor": white,
            "secondBandColor": grey,
        }

    def test_updates_existing_banding(self) -> None:
        service, _, spreadsheet = _service()
        spreadsheet.fetch_sheet_metadata.return_value = _metadata(
            banded_ranges=[{"bandedRangeId": 777}],
        )
        spreadsheet.values_get.return_value = {"values": [["a"]]}

        service.set_banding("abc", 1, "Skills", {}, {}, {})

        (body,), _ = spreadsheet.batch_update.call_args
        update = body["requests"][0]["updateBanding"]
        assert update["bandedRange"]["bandedRangeId"] == 777
        assert update["fields"] == "*"

    def test_bold_header_targets_first_row_only(self) -> None:
        service, _, spreadsheet = _service()
        spreadsheet.fetch_sheet_metadata.return_value = _metadata()

        service.bold_header_row("abc", 0)

        (body,), _ = spreadsheet.batch_update.call_args
        repeat = body["requests"][0]["repeatCell"]
        assert repeat["range"] == {"sheetId": 0, "startRowIndex": 0, "endRowIndex": 1}
        assert repeat["cell"]["userEnteredFormat"]["textFormat"]["bold"] is True

    def test_rename_updates_title_only(self) -> None:
        service, _, spreadsheet = _service()

        service.rename("abc", "New title")

        spreadsheet.batch_update.assert_called_once_with({
            "requests": [{
                "updateSpreadsheetProperties": {
                    "properties": {"title": "New title"},
                    "fields": "title",
                },
            }],
        })
