"""
Augment parser.

Like items, set augments are apiName references into the global
``items`` table. Tier comes from hashed tag ids when present, else from
the icon filename.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from scouted.fetchers.cdragon import asset_url
from scouted.models.augment import Augment
from scouted.parsers.classifiers import classify_augment_tier
from scouted.parsers.items import resolve_references
from scouted.text.resolver import resolve_effect_description


def parse_augment(
    ref: str,
    raw: Mapping[str, Any],
    tier_tags: Mapping[str, int] | None = None,
    cdragon_base: str | None = None,
) -> Augment:
    """Map one global item record to an Augment."""
    tags = [str(t) for t in raw.get("tags") or []]
    effects = raw.get("effects") if isinstance(raw.get("effects"), dict) else {}
    associated = tuple(str(t) for t in raw.get("associatedTraits") or [] if t)

    return Augment(
        augment_id=str(raw.get("apiName") or ref),
        name=str(raw.get("name") or "").strip(),
        tier=classify_augment_tier(tags, str(raw.get("icon") or ""), tier_tags),
        desc=resolve_effect_description(str(raw.get("desc") or ""), effects),
        icon=asset_url(raw.get("icon"), cdragon_base),
        associated_traits=associated,
    )


def parse_augments(
    augment_refs: Iterable[str],
    index: Mapping[str, dict[str, Any]],
    tier_tags: Mapping[str, int] | None = None,
    cdragon_base: str | None = None,
) -> list[Augment]:
    """
    Parse the augments of a set.

    Args:
        augment_refs: apiNames listed by the current set
        index: Global item table from build_item_index
        tier_tags: Tag id -> tier, defaults to the built-in tags
        cdragon_base: Asset root, defaults to configured cdragon_base

    Returns:
        Named augments sorted by tier, then name
    """
    augments = [
        parse_augment(ref, raw, tier_tags, cdragon_base)
        for ref, raw in resolve_references(augment_refs, index)
        if str(raw.get("name") or "").strip()
    ]
    return sorted(augments, key=lambda a: (a.tier, a.name.casefold(), a.name))
