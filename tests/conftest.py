"""Shared test configuration and fixtures.

Provides ``FakeSheetsService``, an in-memory stand-in for
``sheets.SheetsService`` that records every call, so orchestration can be
tested without a network connection.
"""

from typing import Any, Sequence

import pytest

from models import (
    Champion,
    ChampionAffinity,
    ChampionFaction,
    ChampionRarity,
    ChampionRole,
    Skill,
)


class FakeSheetsService:
    """Records calls made against the SheetsService contract."""

    def __init__(self, existing_ids: Sequence[str] = ()) -> None:
        self.spreadsheets: dict[str, dict[str, Any]] = {
            spreadsheet_id: {"title": "", "sheets": []}
            for spreadsheet_id in existing_ids
        }
        self.created: list[str] = []
        self.calls: list[tuple[Any, ...]] = []

    def create_spreadsheet(self, title: str, sheet_titles: Sequence[str]) -> str:
        spreadsheet_id = f"new-id-{len(self.created) + 1}"
        self.spreadsheets[spreadsheet_id] = {
            "title": title,
            "sheets": [
                {"title": t, "frozenRowCount": 1} for t in sheet_titles
            ],
        }
        self.created.append(spreadsheet_id)
        self.calls.append(("create_spreadsheet", title, list(sheet_titles)))
        return spreadsheet_id

    def exists(self, spreadsheet_id: str) -> bool:
        self.calls.append(("exists", spreadsheet_id))
        return spreadsheet_id in self.spreadsheets

    def write_range(self, spreadsheet_id: str, range_ref: str, rows: list) -> dict:
        self.calls.append(("write_range", spreadsheet_id, range_ref, [list(r) for r in rows]))
        return {"updatedRows": len(rows)}

    def append_range(self, spreadsheet_id: str, range_ref: str, rows: list) -> dict:
        self.calls.append(("append_range", spreadsheet_id, range_ref, [list(r) for r in rows]))
        return {"updates": {"updatedRows": len(rows)}}

    def bold_header_row(self, spreadsheet_id: str, sheet_index: int) -> dict:
        self.calls.append(("bold_header_row", spreadsheet_id, sheet_index))
        return {}

    def set_banding(self, spreadsheet_id: str, sheet_index: int, range_ref: str,
                    header_color: dict, first_band_color: dict,
                    second_band_color: dict) -> dict:
        self.calls.append(("set_banding", spreadsheet_id, sheet_index, range_ref))
        return {}

    def rename(self, spreadsheet_id: str, title: str) -> dict:
        self.spreadsheets[spreadsheet_id]["title"] = title
        self.calls.append(("rename", spreadsheet_id, title))
        return {}

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_service() -> FakeSheetsService:
    return FakeSheetsService()


def make_champion(name: str = "Kael", **overrides: Any) -> Champion:
    fields: dict[str, Any] = {
        "name": name,
        "faction": ChampionFaction.DARK_ELVES,
        "rarity": ChampionRarity.RARE,
        "affinity": ChampionAffinity.MAGIC,
        "role": ChampionRole.ATTACK,
        "health": 13710,
        "attack": 1200,
        "defense": 914,
        "speed": 103,
        "resistance": 30,
        "accuracy": 10,
        "critical_chance": 0.15,
        "critical_damage": 0.57,
        "critical_heal": 0.0,
    }
    fields.update(overrides)
    return Champion(**fields)


def make_skill(
    name: str = "Disintegrate",
    description: str = "Attacks all enemies.",
    multiplier_formula: Any = "3.5*ATK",
    champion: Any = None,
) -> Skill:
    return Skill(
        name=name,
        description=description,
        cooldown=4,
        multiplier_formula=multiplier_formula,
        champion=champion,
    )
