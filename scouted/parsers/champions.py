"""
Champion parser.

Maps CDragon set champion records to Champion models: filters NPCs,
clamps cost, resolves the ability text and normalizes stats.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from scouted.fetchers.cdragon import asset_url
from scouted.models.champion import Ability, Champion, ChampionStats, StatValue
from scouted.parsers.classifiers import (
    MAX_CHAMPION_COST,
    champion_api_name,
    is_npc,
    raw_cost,
)
from scouted.text.resolver import resolve_description

# CDragon stat key -> ChampionStats field, with default
STAT_FIELDS: dict[str, tuple[str, StatValue]] = {
    "hp": ("hp", 0),
    "mana": ("mana", 0),
    "initialMana": ("initial_mana", 0),
    "armor": ("armor", 0),
    "magicResist": ("magic_resist", 0),
    "damage": ("damage", 0),
    "attackSpeed": ("attack_speed", 0),
    "critChance": ("crit_chance", 0.25),
    "range": ("range", 1),
}

# Ability variable arrays hold one value per star level starting at index 1
# (index 0 is unused). Shorter arrays are already per star level.
STAR_LEVELS = slice(1, 4)


def clamp_cost(cost: float) -> int:
    """Clamp a raw cost into 1..5."""
    return min(max(int(cost), 1), MAX_CHAMPION_COST)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def normalize_stat(value: Any, default: StatValue) -> StatValue:
    """
    Normalize a stat that may be a scalar or one value per star level.

    Lists become tuples of their numeric entries (a one-element list
    collapses to a scalar); anything unusable falls back to the default.
    """
    if _is_number(value):
        return value
    if isinstance(value, list | tuple):
        numbers = tuple(v for v in value if _is_number(v))
        if len(numbers) == 1:
            return numbers[0]
        if numbers:
            return numbers
    return default


def normalize_stats(raw_stats: Mapping[str, Any] | None) -> ChampionStats:
    """Build ChampionStats from a CDragon stats block, tolerating either shape per field."""
    raw_stats = raw_stats or {}
    values = {
        field: normalize_stat(raw_stats.get(key), default)
        for key, (field, default) in STAT_FIELDS.items()
    }
    return ChampionStats(**values)


def star_level_values(value: Any) -> tuple[float, ...]:
    """Per-star-level values from a CDragon ability variable."""
    if _is_number(value):
        return (value,)
    if not isinstance(value, list | tuple):
        return ()
    numbers = tuple(v if _is_number(v) else 0 for v in value)
    if len(numbers) > 3:
        return numbers[STAR_LEVELS]
    return numbers


def normalize_traits(raw_traits: Any) -> tuple[str, ...]:
    """Trait names, non-empty and de-duplicated in order."""
    if not isinstance(raw_traits, list):
        return ()
    seen: dict[str, None] = {}
    for name in raw_traits:
        if isinstance(name, str) and name.strip():
            seen.setdefault(name.strip(), None)
    return tuple(seen)


def parse_ability(raw_ability: Mapping[str, Any] | None, cdragon_base: str | None = None) -> Ability:
    """Build an Ability with its description resolved against its variables."""
    raw_ability = raw_ability or {}
    variables: dict[str, tuple[float, ...]] = {}
    for variable in raw_ability.get("variables") or []:
        if isinstance(variable, dict) and variable.get("name"):
            variables[str(variable["name"])] = star_level_values(variable.get("value"))

    return Ability(
        name=str(raw_ability.get("name") or ""),
        desc=resolve_description(str(raw_ability.get("desc") or ""), variables),
        icon=asset_url(raw_ability.get("icon"), cdragon_base),
        variables=variables,
    )


def parse_champion(raw: Mapping[str, Any], cdragon_base: str | None = None) -> Champion:
    """Map one (already filtered) CDragon champion record to a Champion."""
    return Champion(
        name=str(raw.get("name") or "").strip(),
        champion_id=champion_api_name(raw),
        cost=clamp_cost(raw_cost(raw)),
        traits=normalize_traits(raw.get("traits")),
        ability=parse_ability(raw.get("ability"), cdragon_base),
        stats=normalize_stats(raw.get("stats")),
        icon=asset_url(raw.get("icon"), cdragon_base),
        tile_icon=asset_url(raw.get("tileIcon"), cdragon_base),
        splash_url=asset_url(raw.get("squareIcon"), cdragon_base),
    )


def parse_champions(
    raw_champions: Iterable[Any],
    cdragon_base: str | None = None,
) -> list[Champion]:
    """
    Parse the playable champions of a set.

    Args:
        raw_champions: ``champions`` array of the current set
        cdragon_base: Asset root, defaults to configured cdragon_base

    Returns:
        Champions sorted by cost, then name
    """
    champions = [
        parse_champion(raw, cdragon_base)
        for raw in raw_champions
        if isinstance(raw, dict) and str(raw.get("name") or "").strip() and not is_npc(raw)
    ]
    return sorted(champions, key=lambda c: (c.cost, c.name.casefold(), c.name))
