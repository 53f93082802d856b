"""
Item parser.

Sets list their items as apiName references into the export's global
``items`` table. References are resolved, non-shop entries dropped and
each survivor classified into exactly one category.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from scouted.fetchers.cdragon import asset_url
from scouted.models.item import CATEGORY_ORDER, Item, ItemCategory
from scouted.parsers.classifiers import classify_item_category
from scouted.text.resolver import resolve_effect_description

PLACEHOLDER_NAME_PREFIX = "tft_item_name_"

# apiName fragments of consumables, champion-bound items and armory grants
EXCLUDED_API_FRAGMENTS: tuple[str, ...] = (
    "ChampionItem",
    "Consumable",
    "CypherArmory",
    "Grant",
    "Assist_",
)


def build_item_index(all_items: Iterable[Any]) -> dict[str, dict[str, Any]]:
    """Index the global item table by apiName (first record wins)."""
    index: dict[str, dict[str, Any]] = {}
    for raw in all_items:
        if isinstance(raw, dict) and raw.get("apiName"):
            index.setdefault(str(raw["apiName"]), raw)
    return index


def resolve_references(
    refs: Iterable[str],
    index: Mapping[str, dict[str, Any]],
) -> list[tuple[str, dict[str, Any]]]:
    """
    Resolve apiName references against the item index.

    Duplicates and references missing from the index are skipped.

    Returns:
        (reference, raw record) pairs in reference order
    """
    resolved: list[tuple[str, dict[str, Any]]] = []
    seen: set[str] = set()
    for ref in refs:
        if ref in seen:
            continue
        seen.add(ref)
        raw = index.get(ref)
        if raw is not None:
            resolved.append((ref, raw))
    return resolved


def is_excluded_item(name: str, api_name: str) -> bool:
    """True for unnamed, placeholder, consumable, champion-bound and grant items."""
    if not name.strip() or "@" in name or name.startswith(PLACEHOLDER_NAME_PREFIX):
        return True
    return any(fragment in api_name for fragment in EXCLUDED_API_FRAGMENTS)


def _effects(raw: Any) -> dict[str, float]:
    if not isinstance(raw, dict):
        return {}
    return {
        str(k): v
        for k, v in raw.items()
        if isinstance(v, int | float) and not isinstance(v, bool)
    }


def _item_id(raw: Any) -> int | None:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    return None


def parse_item(ref: str, raw: Mapping[str, Any], cdragon_base: str | None = None) -> Item:
    """Map one global item record to an Item."""
    name = str(raw.get("name") or "").strip()
    api_name = str(raw.get("apiName") or ref)
    raw_desc = str(raw.get("desc") or "")
    composition = tuple(str(c) for c in raw.get("composition") or [] if c)
    effects = _effects(raw.get("effects"))
    category = classify_item_category(api_name, name, raw_desc, composition)
    if category is ItemCategory.COMPONENT:
        # Components are recipe leaves
        composition = ()

    return Item(
        unique_id=api_name,
        name=name,
        category=category,
        item_id=_item_id(raw.get("id")),
        desc=resolve_effect_description(raw_desc, effects),
        icon=asset_url(raw.get("icon"), cdragon_base),
        composition=composition,
        effects=effects,
    )


def parse_items(
    item_refs: Iterable[str],
    index: Mapping[str, dict[str, Any]],
    cdragon_base: str | None = None,
) -> list[Item]:
    """
    Parse the items of a set.

    Args:
        item_refs: apiNames listed by the current set
        index: Global item table from build_item_index
        cdragon_base: Asset root, defaults to configured cdragon_base

    Returns:
        Items sorted by category order, then name
    """
    items: list[Item] = []
    for ref, raw in resolve_references(item_refs, index):
        name = str(raw.get("name") or "")
        api_name = str(raw.get("apiName") or ref)
        if is_excluded_item(name, api_name):
            continue
        items.append(parse_item(ref, raw, cdragon_base))

    return sorted(
        items, key=lambda i: (CATEGORY_ORDER[i.category], i.name.casefold(), i.name)
    )
