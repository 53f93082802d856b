from scouted.parsers.augments import parse_augments
from scouted.parsers.champions import normalize_stats, parse_champions
from scouted.parsers.classifiers import (
    classify_augment_tier,
    classify_item_category,
    classify_trait_type,
    is_npc,
)
from scouted.parsers.items import build_item_index, parse_items
from scouted.parsers.set_selector import SetSelection, select_current_set
from scouted.parsers.traits import parse_traits

__all__ = [
    "SetSelection",
    "build_item_index",
    "classify_augment_tier",
    "classify_item_category",
    "classify_trait_type",
    "is_npc",
    "normalize_stats",
    "parse_augments",
    "parse_champions",
    "parse_items",
    "parse_traits",
    "select_current_set",
]
