"""Champion and skill records, their category enums, and the JSON data loader.

Records are plain dataclasses. Enum values are the display names shown in
game, which are also the names written to the sheet and the names expected in
the data file.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from exceptions import DataFileError

logger = logging.getLogger(__name__)


class ChampionFaction(Enum):
    BANNER_LORDS = "Banner Lords"
    HIGH_ELVES = "High Elves"
    SACRED_ORDER = "Sacred Order"
    BARBARIANS = "Barbarians"
    OGRYN_TRIBES = "Ogryn Tribes"
    LIZARDMEN = "Lizardmen"
    SKINWALKERS = "Skinwalkers"
    ORCS = "Orcs"
    DEMONSPAWN = "Demonspawn"
    UNDEAD_HORDES = "Undead Hordes"
    DARK_ELVES = "Dark Elves"
    KNIGHTS_REVENANT = "Knights Revenant"
    DWARVES = "Dwarves"
    SHADOWKIN = "Shadowkin"
    SYLVAN_WATCHERS = "Sylvan Watchers"


class ChampionRarity(Enum):
    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"
    MYTHICAL = "Mythical"


class ChampionAffinity(Enum):
    MAGIC = "Magic"
    FORCE = "Force"
    SPIRIT = "Spirit"
    VOID = "Void"


class ChampionRole(Enum):
    ATTACK = "Attack"
    DEFENSE = "Defense"
    HP = "HP"
    SUPPORT = "Support"


@dataclass
class Champion:
    """A playable champion and its base stats."""

    name: str
    faction: ChampionFaction
    rarity: ChampionRarity
    affinity: ChampionAffinity
    role: ChampionRole
    health: int
    attack: int
    defense: int
    speed: int
    resistance: int
    accuracy: int
    critical_chance: float
    critical_damage: float
    critical_heal: float
    skills: list["Skill"] = field(default_factory=list, repr=False)


@dataclass
class Skill:
    """A champion skill.

    ``champion`` is a back-reference used only to display the owner's name;
    it is excluded from equality and repr to avoid recursing through
    ``Champion.skills``.
    """

    name: str
    description: str
    cooldown: int
    multiplier_formula: Optional[str] = None
    champion: Optional[Champion] = field(default=None, repr=False, compare=False)


_STAT_FIELDS: tuple[str, ...] = (
    "health",
    "attack",
    "defense",
    "speed",
    "resistance",
    "accuracy",
    "critical_chance",
    "critical_damage",
    "critical_heal",
)

_CATEGORY_FIELDS: dict[str, type[Enum]] = {
    "faction": ChampionFaction,
    "rarity": ChampionRarity,
    "affinity": ChampionAffinity,
    "role": ChampionRole,
}


def _require(path: Path, data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise DataFileError(path, key, "Field is missing.")
    return data[key]


def _require_str(path: Path, data: dict[str, Any], key: str) -> str:
    value = _require(path, data, key)
    if not isinstance(value, str):
        raise DataFileError(path, key, "Expected a string.")
    return value


def _optional_str(path: Path, data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DataFileError(path, key, "Expected a string.")
    return value


def _parse_category(path: Path, data: dict[str, Any], key: str) -> Enum:
    enum_cls = _CATEGORY_FIELDS[key]
    value = _require(path, data, key)
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise DataFileError(
            path, key, f"Unknown value '{value}'. Choose from: {choices}"
        ) from None


def _parse_skill(path: Path, data: dict[str, Any], champion: Champion) -> Skill:
    return Skill(
        name=_require_str(path, data, "name"),
        description=_require_str(path, data, "description"),
        cooldown=_require(path, data, "cooldown"),
        multiplier_formula=_optional_str(path, data, "multiplier_formula"),
        champion=champion,
    )


def _parse_champion(path: Path, data: dict[str, Any]) -> Champion:
    champion = Champion(
        name=_require_str(path, data, "name"),
        **{key: _parse_category(path, data, key) for key in _CATEGORY_FIELDS},
        **{key: _require(path, data, key) for key in _STAT_FIELDS},
    )
    skills = data.get("skills", [])
    if not isinstance(skills, list):
        raise DataFileError(path, "skills", "Expected a list of skills.")
    champion.skills = [_parse_skill(path, s, champion) for s in skills]
    return champion


def load_champions(path: Path) -> list[Champion]:
    """Load champions and their skills from a JSON data file.

    The file holds a single object with a ``"champions"`` list. Each champion
    object carries its fields, category display names and an optional
    ``"skills"`` list; each skill is linked back to its champion.

    Args:
        path: Path to the JSON data file.

    Returns:
        The champions in file order.

    Raises:
        FileNotFoundError: If *path* does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        DataFileError: If a required field is missing, a text field is not a
            string, or a category name is unknown.
    """
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)

    champions_data = document.get("champions") if isinstance(document, dict) else None
    if not isinstance(champions_data, list):
        raise DataFileError(path, "champions", "Expected a list of champions.")

    champions = [_parse_champion(path, c) for c in champions_data]
    logger.info(
        "Loaded %d champions (%d skills) from %s",
        len(champions), sum(len(c.skills) for c in champions), path,
    )
    return champions
