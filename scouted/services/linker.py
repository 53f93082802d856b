"""
Cross-entity linking.

Runs after every collection is parsed, since it needs the full set:

- champion -> trait membership (``Trait.champions``)
- team-up traits whose members are named in their apiName
- item recipes (component keys -> component Items)

Linking never mutates its inputs; it returns new Trait instances.
Running it again on its own output adds nothing.
"""

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from scouted.models.champion import Champion
from scouted.models.item import Item
from scouted.models.trait import Trait, TraitChampion, TraitType

# "EkkoZilean" -> ["Ekko", "Zilean"]
_CAPITALIZED_WORD_RE = re.compile(r"[A-Z][a-z]+")


def membership_record(champion: Champion) -> TraitChampion:
    """Lightweight membership entry for a champion."""
    return TraitChampion(
        name=champion.name,
        icon=champion.tile_icon or champion.icon,
        champion_id=champion.champion_id,
    )


def find_trait(trait_name: str, traits: Sequence[Trait]) -> int | None:
    """
    Index of the trait a champion's trait name refers to.

    Matches the display name exactly, else the name (spaces removed) as a
    case-insensitive substring of the trait key. First match wins.
    """
    needle = trait_name.lower().replace(" ", "")
    for i, trait in enumerate(traits):
        if trait.name == trait_name or (needle and needle in trait.key.lower()):
            return i
    return None


def teamup_member_names(trait_key: str) -> list[str]:
    """Capitalized name fragments in a team-up key's last segment."""
    suffix = trait_key.split("_")[-1]
    return _CAPITALIZED_WORD_RE.findall(suffix)


def _add_member(members: list[TraitChampion], champion: Champion) -> None:
    if not any(m.name == champion.name for m in members):
        members.append(membership_record(champion))


def link_champions_to_traits(
    champions: Iterable[Champion],
    traits: Sequence[Trait],
) -> list[Trait]:
    """
    Populate trait membership from champions' trait names.

    Team-up traits left without members are then matched by the champion
    names embedded in their key (TFT16_Teamup_EkkoZilean -> Ekko, Zilean).

    Args:
        champions: Parsed champions
        traits: Parsed traits (existing members are kept)

    Returns:
        New traits in the same order, members de-duplicated by name
    """
    champions = list(champions)
    members: list[list[TraitChampion]] = [list(t.champions) for t in traits]

    for champion in champions:
        for trait_name in champion.traits:
            index = find_trait(trait_name, traits)
            if index is not None:
                _add_member(members[index], champion)

    for index, trait in enumerate(traits):
        if trait.type is not TraitType.TEAMUP or members[index]:
            continue
        for partial in teamup_member_names(trait.key):
            match = next((c for c in champions if partial in c.name), None)
            if match is not None:
                _add_member(members[index], match)

    return [
        replace(trait, champions=tuple(found)) for trait, found in zip(traits, members, strict=True)
    ]


# =============================================================================
# ITEM RECIPES
# =============================================================================


def index_items(items: Iterable[Item]) -> dict[str, Item]:
    """Items keyed by unique_id."""
    return {item.unique_id: item for item in items}


def resolve_recipe(item: Item, item_index: Mapping[str, Item]) -> list[Item]:
    """Component Items of a recipe, skipping keys not in the index."""
    return [item_index[key] for key in item.composition if key in item_index]


def builds_into(component_key: str, items: Iterable[Item]) -> list[Item]:
    """Items whose recipe uses the given component."""
    return [item for item in items if component_key in item.composition]
