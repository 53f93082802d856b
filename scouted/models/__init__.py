from scouted.models.augment import (
    DEFAULT_AUGMENT_TIER,
    MAX_AUGMENT_TIER,
    MIN_AUGMENT_TIER,
    Augment,
)
from scouted.models.champion import Ability, Champion, ChampionStats, StatValue
from scouted.models.item import CATEGORY_ORDER, Item, ItemCategory
from scouted.models.scouted_data import BuildInfo, ScoutedData
from scouted.models.trait import (
    TYPE_ORDER,
    Trait,
    TraitChampion,
    TraitDetailRow,
    TraitEffect,
    TraitType,
)

__all__ = [
    "Ability",
    "Augment",
    "BuildInfo",
    "CATEGORY_ORDER",
    "Champion",
    "ChampionStats",
    "DEFAULT_AUGMENT_TIER",
    "Item",
    "ItemCategory",
    "MAX_AUGMENT_TIER",
    "MIN_AUGMENT_TIER",
    "ScoutedData",
    "StatValue",
    "TYPE_ORDER",
    "Trait",
    "TraitChampion",
    "TraitDetailRow",
    "TraitEffect",
    "TraitType",
]
