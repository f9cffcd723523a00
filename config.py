"""Central configuration for the RAID champion data sheet exporter.

This module is the single source of truth for all fixed values: paths, sheet
titles, column headers, API scopes, and formatting colours. Never hardcode
these values elsewhere.
"""

from pathlib import Path
from typing import Final

# ---------------------------------------------------------------------------
# Project paths
# ---------------------------------------------------------------------------

PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent
RESOURCES_DIR: Final[Path] = PROJECT_ROOT / "resources"

# Holds the ID of the spreadsheet created for this installation (one line).
SPREADSHEET_ID_FILE: Final[Path] = RESOURCES_DIR / "spreadsheet_id.txt"

# ---------------------------------------------------------------------------
# Google Sheets — service account
# ---------------------------------------------------------------------------

# Path to the service account JSON key file. Never commit this file.
SERVICE_ACCOUNT_KEY_PATH: Final[Path] = PROJECT_ROOT / "service_account.json"

# Drive access is needed because gspread creates spreadsheets through Drive.
SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive.file",
]

# ---------------------------------------------------------------------------
# Spreadsheet layout
# ---------------------------------------------------------------------------

# Formatted with the run date as YYYY-MM-DD.
SPREADSHEET_TITLE_FORMAT: Final[str] = (
    "RSL - Champions' multipliers (last updated: {date})"
)

SHEET_CHAMPIONS_TITLE: Final[str] = "Champions"
SHEET_SKILLS_TITLE: Final[str] = "Skills"

# Index of each tab, in creation order.
SHEET_CHAMPIONS_INDEX: Final[int] = 0
SHEET_SKILLS_INDEX: Final[int] = 1

FROZEN_ROW_COUNT: Final[int] = 1

# Values are written literally, never parsed as formulas.
VALUE_INPUT_OPTION: Final[str] = "RAW"

# ---------------------------------------------------------------------------
# Column order (strictly enforced, one row per record)
# ---------------------------------------------------------------------------

CHAMPION_COLUMNS: Final[list[str]] = [
    "Name",
    "Faction",
    "Rarity",
    "Affinity",
    "Role",
    "Health",
    "Attack",
    "Defense",
    "Speed",
    "Resistance",
    "Accuracy",
    "Critical Chance",
    "Critical Damage",
    "Critical Heal",
]

SKILL_COLUMNS: Final[list[str]] = [
    "Name",
    "Description",
    "Cooldown",
    "Multiplier",
    "Champion",
]

# ---------------------------------------------------------------------------
# Banding colours (Sheets API Color objects, 0.0-1.0 per channel)
# ---------------------------------------------------------------------------

BANDING_HEADER_COLOR: Final[dict[str, float]] = {
    "red": 0.26, "green": 0.52, "blue": 0.96,
}
BANDING_FIRST_BAND_COLOR: Final[dict[str, float]] = {
    "red": 1.0, "green": 1.0, "blue": 1.0,
}
BANDING_SECOND_BAND_COLOR: Final[dict[str, float]] = {
    "red": 0.91, "green": 0.94, "blue": 0.99,
}
