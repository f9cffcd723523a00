"""In-memory row collections for the Champions and Skills sheets.

A ``SheetRows`` holds the header and data rows for one sheet until they are
written in a single call. The two variants differ only in their column
schema, row builder, and acceptance filter; use ``champion_rows()`` and
``skill_rows()`` to build them.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from config import (
    CHAMPION_COLUMNS,
    SHEET_CHAMPIONS_INDEX,
    SHEET_CHAMPIONS_TITLE,
    SHEET_SKILLS_INDEX,
    SHEET_SKILLS_TITLE,
    SKILL_COLUMNS,
)
from models import Champion, Skill
from sheets import SheetsService

logger = logging.getLogger(__name__)


def is_valid_champion(champion: Champion) -> bool:
    """Reject champions with a blank name and the "hero" template entries."""
    name = champion.name
    return bool(name.strip()) and "hero" not in name.lower()


def is_valid_skill(skill: Skill) -> bool:
    """Reject skills with a blank name or description and the "Skill Name" placeholder."""
    name = skill.name.lower()
    if not skill.name.strip() or not skill.description.strip():
        return False
    return not ("skill" in name and "name" in name)


def champion_row(champion: Champion) -> list[Any]:
    return [
        champion.name,
        champion.faction.value,
        champion.rarity.value,
        champion.affinity.value,
        champion.role.value,
        champion.health,
        champion.attack,
        champion.defense,
        champion.speed,
        champion.resistance,
        champion.accuracy,
        champion.critical_chance,
        champion.critical_damage,
        champion.critical_heal,
    ]


def skill_row(skill: Skill) -> list[Any]:
    # An absent formula or owner is written as an empty cell.
    return [
        skill.name,
        skill.description,
        skill.cooldown,
        skill.multiplier_formula or "",
        skill.champion.name if skill.champion is not None else "",
    ]


@dataclass
class SheetRows:
    """Header and data rows destined for one sheet.

    Args:
        title: Sheet title, also used as the A1 range for writes.
        sheet_index: Position of the sheet in the spreadsheet.
        header: Column names, in column order.
        build_row: Converts one record into a row matching *header*.
        accepts: Returns ``False`` for records that must not be written.
    """

    title: str
    sheet_index: int
    header: list[str]
    build_row: Callable[[Any], list[Any]]
    accepts: Callable[[Any], bool]
    values: list[list[Any]] = field(default_factory=list)

    def add_header_row(self) -> None:
        """Append the header row.

        Call before any data rows. Calling twice adds the header twice.
        """
        logger.info("Creating header row for %s sheet...", self.title)
        self.values.append(list(self.header))

    def add_value(self, record: Any) -> bool:
        """Append one row for *record* if it passes the sheet's filter.

        Returns:
            ``True`` if a row was added, ``False`` if *record* was skipped.
        """
        if not self.accepts(record):
            logger.debug("Skipping %s record %r", self.title, record.name)
            return False
        logger.debug("Creating row for %s: %s", self.title, record.name)
        self.values.append(self.build_row(record))
        return True

    def flush(self, service: SheetsService, spreadsheet_id: str) -> dict[str, Any]:
        """Overwrite the whole sheet with the collected rows."""
        logger.info("Populating %s data...", self.title)
        return service.write_range(spreadsheet_id, self.title, self.values)

    def append(self, service: SheetsService, spreadsheet_id: str) -> dict[str, Any]:
        """Append the collected rows after the sheet's existing content."""
        logger.info("Appending %s data...", self.title)
        return service.append_range(spreadsheet_id, self.title, self.values)


def champion_rows() -> SheetRows:
    return SheetRows(
        title=SHEET_CHAMPIONS_TITLE,
        sheet_index=SHEET_CHAMPIONS_INDEX,
        header=CHAMPION_COLUMNS,
        build_row=champion_row,
        accepts=is_valid_champion,
    )


def skill_rows() -> SheetRows:
    return SheetRows(
        title=SHEET_SKILLS_TITLE,
        sheet_index=SHEET_SKILLS_INDEX,
        header=SKILL_COLUMNS,
        build_row=skill_row,
        accepts=is_valid_skill,
    )
