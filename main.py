"""Entry point and pipeline orchestration for the RAID champion data exporter.

Executes the full run sequence:
1. Load — read champions and skills from the JSON data file.
2. Startup — authenticate, then create or reuse the spreadsheet recorded in
   the local ID file.
3. Collect — build one row per champion and per skill in memory.
4. Publish — overwrite both sheets, format them, and stamp the title with
   today's date.

All errors are fatal. On failure the full traceback is logged and the
process exits with a non-zero code.
"""

import argparse
import logging
import sys
from pathlib import Path

from config import SERVICE_ACCOUNT_KEY_PATH, SPREADSHEET_ID_FILE
from models import load_champions
from raid_data import initialize_spreadsheet, publish
from rows import champion_rows, skill_rows
from sheets import SheetsService, get_sheets_client
from spreadsheet_id import SpreadsheetIdStore

logger = logging.getLogger(__name__)


def run(data_file: Path, key_path: Path, id_file: Path) -> str:
    """Run the full load-and-export pipeline.

    Never interleaves collection and writes: all rows are built in memory
    first, then each sheet is written in a single call.

    Args:
        data_file: JSON file holding the champions and their skills.
        key_path: Service account key file.
        id_file: Local file holding the spreadsheet ID.

    Returns:
        The ID of the spreadsheet that was written.
    """
    champions = load_champions(data_file)

    service = SheetsService(get_sheets_client(key_path))
    champion_sheet = champion_rows()
    skill_sheet = skill_rows()
    sheets = [champion_sheet, skill_sheet]

    result = initialize_spreadsheet(service, SpreadsheetIdStore(id_file), sheets)

    for champion in champions:
        champion_sheet.add_value(champion)
        for skill in champion.skills:
            skill_sheet.add_value(skill)
    logger.info(
        "Collected %d champion rows and %d skill rows",
        len(champion_sheet.values) - 1, len(skill_sheet.values) - 1,
    )

    publish(service, result.spreadsheet_id, sheets)
    return result.spreadsheet_id


def main() -> None:
    """Parse arguments, configure logging, and run the export.

    Raises:
        SystemExit: On any fatal error, after logging the full traceback.
    """
    parser = argparse.ArgumentParser(
        description="Export RAID champion and skill data to Google Sheets.",
    )
    parser.add_argument(
        "data_file",
        type=Path,
        help="JSON file with a 'champions' list (each with its 'skills')",
    )
    parser.add_argument(
        "--credentials",
        type=Path,
        default=SERVICE_ACCOUNT_KEY_PATH,
        help=f"Service account key file (default: {SERVICE_ACCOUNT_KEY_PATH})",
    )
    parser.add_argument(
        "--id-file",
        type=Path,
        default=SPREADSHEET_ID_FILE,
        help=f"Spreadsheet ID file (default: {SPREADSHEET_ID_FILE})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every accepted and skipped record",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        spreadsheet_id = run(args.data_file, args.credentials, args.id_file)
    except Exception:
        logger.exception("Export failed. Operation aborted.")
        sys.exit(1)

    logger.info("Export complete: spreadsheet %s", spreadsheet_id)


if __name__ == "__main__":
    main()
