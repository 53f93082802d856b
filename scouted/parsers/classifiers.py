"""
Entity classifiers.

CDragon does not say which units are playable, what kind of trait a trait
is, which category an item belongs to, or (reliably) an augment's tier.
These predicates reverse-engineer that from naming conventions and numeric
shape. They are heuristics, kept pure and side-effect free so they can be
tuned and tested without touching the parsers.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from scouted.config import DEFAULT_AUGMENT_TIER_TAGS
from scouted.models.augment import DEFAULT_AUGMENT_TIER, MAX_AUGMENT_TIER, MIN_AUGMENT_TIER
from scouted.models.item import ItemCategory
from scouted.models.trait import TraitType

MAX_CHAMPION_COST = 5

# =============================================================================
# NON-PLAYER FILTER
# =============================================================================

# apiName patterns that are never playable champions
NPC_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^TFT_Item",
        r"^TFT\d*_Armory",
        r"^TFT_Assist",
        r"Voidling",
        r"Soldier$",
        r"Invention$",
        r"Dummy",
        r"^TFT_Krug",
        r"^TFT_Elder",
        r"^TFT_BlueGolem",
        r"^TFT\d+_Atakhan",
        r"^TFT\d+_Freljord",
        r"Scuttler",
        r"Minion",
        r"Chest$",
        r"Tibbers",
        r"^TFT5_Emblem",
        r"^TFT\d+_NPC",
        r"Drone",
    )
)


def raw_cost(record: Mapping[str, Any]) -> float:
    """Cost of a raw champion record (``cost``, legacy ``tier``), default 1."""
    for key in ("cost", "tier"):
        value = record.get(key)
        if isinstance(value, int | float) and not isinstance(value, bool):
            return value
    return 1


def champion_api_name(record: Mapping[str, Any]) -> str:
    """Stable identifier of a raw champion record."""
    return str(record.get("apiName") or record.get("character_id") or "")


def is_npc(record: Mapping[str, Any]) -> bool:
    """
    True if a raw champion record is not a playable champion.

    Excludes anything costing more than 5, known neutral/summon/template
    apiNames, and trait-less 1-cost (or cheaper) placeholders.
    """
    cost = raw_cost(record)
    if cost > MAX_CHAMPION_COST:
        return True

    api_name = champion_api_name(record)
    if any(pattern.search(api_name) for pattern in NPC_PATTERNS):
        return True

    traits = record.get("traits")
    trait_count = len(traits) if isinstance(traits, list | tuple) else 0
    return trait_count == 0 and cost <= 1


# =============================================================================
# TRAIT TYPE
# =============================================================================

TEAMUP_MARKER = "Teamup"


def positive_thresholds(min_units: Iterable[int]) -> list[int]:
    """Positive minUnits thresholds, in upstream order."""
    return [n for n in min_units if n > 0]


def classify_trait_type(api_name: str, min_units: Iterable[int]) -> TraitType:
    """
    Infer a trait's type from its apiName and breakpoints.

    Heuristic (CDragon carries no type field):
    - teamup: apiName contains "Teamup" (two-champion synergy)
    - unique: a single breakpoint, at 1 or 2 units
    - origin: lowest breakpoint is 3 or more
    - class: everything else (typically starting at 2, or no breakpoints)
    """
    if TEAMUP_MARKER in api_name:
        return TraitType.TEAMUP

    thresholds = positive_thresholds(min_units)
    if not thresholds:
        return TraitType.CLASS
    if len(thresholds) == 1 and thresholds[0] <= 2:
        return TraitType.UNIQUE
    if min(thresholds) >= 3:
        return TraitType.ORIGIN
    return TraitType.CLASS


# =============================================================================
# ITEM CATEGORY
# =============================================================================

COMPONENT_API_NAMES = frozenset(
    {
        "TFT_Item_BFSword",
        "TFT_Item_RecurveBow",
        "TFT_Item_NeedlesslyLargeRod",
        "TFT_Item_TearOfTheGoddess",
        "TFT_Item_ChainVest",
        "TFT_Item_NegatronCloak",
        "TFT_Item_GiantsBelt",
        "TFT_Item_Spatula",
        "TFT_Item_SparringGloves",
        "TFT_Item_FryingPan",
    }
)

# Authoritative: some support items carry "Radiant" in their apiName
SUPPORT_MARKER = "[Support item]"
EMBLEM_MARKER = "Emblem"
ARTIFACT_MARKER = "Artifact"
RADIANT_PREFIX = "Radiant "


def classify_item_category(
    api_name: str,
    name: str,
    desc: str,
    composition: Iterable[str],
) -> ItemCategory:
    """
    Assign exactly one category to an item.

    Predicates are checked in fixed precedence; several can match the
    same item (a radiant item still has a two-component recipe), so the
    order must not change: component, support, emblem, artifact, radiant,
    completed, other.
    """
    is_component = api_name in COMPONENT_API_NAMES
    if is_component:
        return ItemCategory.COMPONENT
    if SUPPORT_MARKER in desc:
        return ItemCategory.SUPPORT
    if EMBLEM_MARKER in name:
        return ItemCategory.EMBLEM
    if ARTIFACT_MARKER in api_name:
        return ItemCategory.ARTIFACT
    if name.startswith(RADIANT_PREFIX):
        return ItemCategory.RADIANT
    if len(list(composition)) == 2:
        return ItemCategory.COMPLETED
    return ItemCategory.OTHER


# =============================================================================
# AUGMENT TIER
# =============================================================================

# Icon filenames end in -I / -II / -III (e.g. "HealingOrbs-II.TFT_Set13.tex").
# Longest numeral first so "III" is not read as "I".
_ICON_TIER_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"[-_]III[._]", re.IGNORECASE), 3),
    (re.compile(r"[-_]II[._]", re.IGNORECASE), 2),
    (re.compile(r"[-_]I[._]", re.IGNORECASE), 1),
)


def classify_augment_tier(
    tags: Iterable[str],
    icon_path: str,
    tier_tags: Mapping[str, int] | None = None,
) -> int:
    """
    Determine an augment's tier (1 Silver, 2 Gold, 3 Prismatic).

    Args:
        tags: Upstream tag ids of the augment record
        icon_path: Raw icon path (only the filename is inspected)
        tier_tags: Tag id -> tier, defaults to DEFAULT_AUGMENT_TIER_TAGS

    Returns:
        Tier from the first tag mapped to 1..3, else from the icon's
        roman numeral suffix, else 2
    """
    if tier_tags is None:
        tier_tags = DEFAULT_AUGMENT_TIER_TAGS

    for tag in tags:
        tier = tier_tags.get(tag)
        # Out-of-range tag tiers are ignored, not clamped
        if isinstance(tier, bool) or not isinstance(tier, int):
            continue
        if MIN_AUGMENT_TIER <= tier <= MAX_AUGMENT_TIER:
            return tier

    icon_file = icon_path.split("/")[-1]
    for pattern, tier in _ICON_TIER_PATTERNS:
        if pattern.search(icon_file):
            return tier

    return DEFAULT_AUGMENT_TIER
