"""
Trait parser.

Maps CDragon set trait records to Trait models. Membership
(``Trait.champions``) is left empty here; see services.linker.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from scouted.fetchers.cdragon import asset_url
from scouted.models.trait import TYPE_ORDER, Trait, TraitEffect
from scouted.parsers.classifiers import classify_trait_type
from scouted.text.resolver import resolve_trait_description

TEMPLATE_PREFIX = "TFT_Template"
DEFAULT_MAX_UNITS = 999


def _int(value: Any, default: int) -> int:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return int(value)
    return default


def _variables(raw: Any) -> dict[str, float | None]:
    if not isinstance(raw, dict):
        return {}
    return {
        str(name): value
        if isinstance(value, int | float) and not isinstance(value, bool)
        else None
        for name, value in raw.items()
    }


def parse_effect(raw: Mapping[str, Any]) -> TraitEffect:
    """Map one CDragon breakpoint to a TraitEffect."""
    return TraitEffect(
        min_units=_int(raw.get("minUnits"), 0),
        max_units=_int(raw.get("maxUnits"), DEFAULT_MAX_UNITS),
        style=_int(raw.get("style"), 0),
        variables=_variables(raw.get("variables")),
    )


def is_template_trait(raw: Mapping[str, Any]) -> bool:
    """True for unnamed or template/placeholder trait records."""
    name = str(raw.get("name") or "").strip()
    api_name = str(raw.get("apiName") or "")
    return not name or name.startswith(TEMPLATE_PREFIX) or api_name.startswith(TEMPLATE_PREFIX)


def parse_trait(raw: Mapping[str, Any], cdragon_base: str | None = None) -> Trait:
    """Map one CDragon trait record to a Trait."""
    effects = tuple(parse_effect(e) for e in raw.get("effects") or [] if isinstance(e, dict))
    key = str(raw.get("apiName") or raw.get("name") or "")
    resolved = resolve_trait_description(str(raw.get("desc") or ""), effects)

    return Trait(
        key=key,
        name=str(raw.get("name") or "").strip(),
        type=classify_trait_type(key, (e.min_units for e in effects)),
        desc=resolved.summary,
        desc_details=resolved.details,
        icon=asset_url(raw.get("icon"), cdragon_base),
        style=_int(raw.get("style"), 0),
        effects=effects,
    )


def parse_traits(raw_traits: Iterable[Any], cdragon_base: str | None = None) -> list[Trait]:
    """
    Parse the traits of a set.

    Returns:
        Traits sorted origin, class, teamup, unique, then by name
    """
    traits = [
        parse_trait(raw, cdragon_base)
        for raw in raw_traits
        if isinstance(raw, dict) and not is_template_trait(raw)
    ]
    return sorted(traits, key=lambda t: (TYPE_ORDER[t.type], t.name.casefold(), t.name))
