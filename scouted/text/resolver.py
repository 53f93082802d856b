"""
Description resolution.

Turns CDragon templated descriptions into display-ready text:

- ``@Var@`` / ``@Var*100@`` tokens are substituted from variables
- ``@MinUnits@`` / ``@MaxUnits@`` come from the trait breakpoint
- ``@TFTUnitProperty...@`` tokens are runtime-only and dropped
- ``<expandRow>`` templates expand into one detail row per breakpoint
- ``<row>`` lines bind positionally to breakpoints
- ``%i:icon%`` tokens, tags and entities are cleaned up (see markup)

A token that cannot be resolved renders as "?" and never fails the
description.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from scouted.models.trait import TraitDetailRow, TraitEffect
from scouted.text.formatting import MISSING_VALUE, format_num, format_tier_values
from scouted.text.markup import (
    clean_line,
    colorize_text,
    is_garbage_line,
    join_lines,
    split_lines,
    strip_leading_units,
    strip_runtime_properties,
)
from scouted.text.variables import (
    LOOKUP_STRATEGIES,
    LookupStrategy,
    casefold_match,
    exact_match,
    find_variable,
)

RUNTIME_PROPERTY_PREFIX = "TFTUnitProperty"

_TOKEN_RE = re.compile(r"@([^@]+)@")
_MULTIPLY_RE = re.compile(r"^(.+)\*(\d+(?:\.\d+)?)$")
_EXPAND_ROW_RE = re.compile(r"<expandRow>(.*?)</expandRow>", re.IGNORECASE | re.DOTALL)
_ROW_RE = re.compile(r"<row>(.*?)</row>", re.IGNORECASE | re.DOTALL)

# Values are parked as NUL-wrapped indexes while markup is stripped, so
# coloured spans survive clean_line. Digits only: the garbage-line check
# must not mistake a parked value for words.
_VALUE_SLOT_RE = re.compile("\x00(\\d+)\x00")

# Trait variables are authored alongside their templates
TRAIT_LOOKUP_STRATEGIES: tuple[LookupStrategy, ...] = (exact_match, casefold_match)


@dataclass(frozen=True, slots=True)
class ResolvedTraitDescription:
    """A trait description split into summary text and breakpoint rows."""

    summary: str
    details: tuple[TraitDetailRow, ...] = ()


def _split_multiplier(token: str) -> tuple[str, float]:
    match = _MULTIPLY_RE.match(token)
    if match is None:
        return token, 1
    factor = float(match.group(2))
    return match.group(1), int(factor) if factor.is_integer() else factor


def substitute_tokens(text: str, resolve: Callable[[str], str]) -> str:
    """Replace every @token@ using resolve(token)."""
    return _TOKEN_RE.sub(lambda m: resolve(m.group(1)), text)


# =============================================================================
# TRAITS
# =============================================================================


def resolve_trait_token(token: str, effect: TraitEffect) -> str:
    """Resolve one token against a breakpoint's scalar variables."""
    if token == "MinUnits":
        return str(effect.min_units)
    if token == "MaxUnits":
        return str(effect.max_units)
    if token.startswith(RUNTIME_PROPERTY_PREFIX):
        return ""

    name, multiplier = _split_multiplier(token)
    key = find_variable(name, effect.variables, TRAIT_LOOKUP_STRATEGIES)
    value = effect.variables.get(key) if key is not None else None
    if value is None:
        return MISSING_VALUE
    return format_num(value * multiplier if multiplier != 1 else value)


def resolve_trait_text(text: str, effect: TraitEffect) -> str:
    """Substitute a breakpoint's variables into text and clean it."""
    return clean_line(substitute_tokens(text, lambda t: resolve_trait_token(t, effect)))


def _row(template: str, effect: TraitEffect) -> TraitDetailRow | None:
    text = strip_leading_units(resolve_trait_text(template, effect))
    if not text:
        return None
    return TraitDetailRow(min_units=effect.min_units, style=effect.style, text=text)


def resolve_trait_description(
    raw_desc: str,
    effects: Sequence[TraitEffect],
) -> ResolvedTraitDescription:
    """
    Resolve a trait description against its breakpoints.

    Args:
        raw_desc: Templated description from CDragon
        effects: Trait breakpoints in upstream order

    Returns:
        Coloured summary (lines joined by <br>) and per-breakpoint rows.
        When the whole description is rows, the first row doubles as the
        summary so there is always visible text.
    """
    if not raw_desc:
        return ResolvedTraitDescription(summary="")

    desc = strip_runtime_properties(raw_desc)
    details: list[TraitDetailRow] = []
    base_effect = effects[0] if effects else TraitEffect()

    if effects:

        def _expand(match: re.Match[str]) -> str:
            for effect in effects:
                row = _row(match.group(1), effect)
                if row:
                    details.append(row)
            return ""

        desc = _EXPAND_ROW_RE.sub(_expand, desc)

        row_index = 0

        def _positional(match: re.Match[str]) -> str:
            nonlocal row_index
            # Surplus rows bind to the last breakpoint
            effect = effects[min(row_index, len(effects) - 1)]
            row_index += 1
            row = _row(match.group(1), effect)
            if row:
                details.append(row)
            return ""

        desc = _ROW_RE.sub(_positional, desc)

    desc = substitute_tokens(desc, lambda t: resolve_trait_token(t, base_effect))
    lines = [line for line in map(clean_line, split_lines(desc)) if not is_garbage_line(line)]
    summary = join_lines(lines)

    if not summary and details:
        summary = details[0].text

    return ResolvedTraitDescription(summary=colorize_text(summary), details=tuple(details))


# =============================================================================
# ABILITIES, ITEMS, AUGMENTS
# =============================================================================


def resolve_value_token(
    token: str,
    variables: Mapping[str, Sequence[float]],
    strategies: Sequence[LookupStrategy] = LOOKUP_STRATEGIES,
) -> str:
    """
    Resolve one token against per-star-level variables.

    Returns:
        Tier-coloured "a/b/c" (or one bare number when all tiers agree),
        "" for runtime-only properties, "?" when nothing matches
    """
    if token.startswith(RUNTIME_PROPERTY_PREFIX):
        return ""

    name, multiplier = _split_multiplier(token)
    key = find_variable(name, variables, strategies)
    if key is None:
        return MISSING_VALUE
    return format_tier_values(variables[key], multiplier)


def resolve_description(
    raw_desc: str,
    variables: Mapping[str, Sequence[float]],
    strategies: Sequence[LookupStrategy] = LOOKUP_STRATEGIES,
) -> str:
    """
    Resolve an ability/item/augment description.

    Args:
        raw_desc: Templated description from CDragon
        variables: Variable name -> one value per star level
        strategies: Variable lookup strategies, in order

    Returns:
        Cleaned, coloured text with lines joined by <br>
    """
    if not raw_desc:
        return ""

    values: list[str] = []

    def _park(token: str) -> str:
        values.append(resolve_value_token(token, variables, strategies))
        return f"\x00{len(values) - 1}\x00"

    desc = substitute_tokens(strip_runtime_properties(raw_desc), _park)
    lines = [line for line in map(clean_line, split_lines(desc)) if line]
    text = join_lines(lines)
    text = _VALUE_SLOT_RE.sub(lambda m: values[int(m.group(1))], text)
    # Dropped values can leave "()" or doubled spaces behind
    text = re.sub(r"\(\s*\)", "", text)
    text = re.sub(r" {2,}", " ", text).strip()
    return colorize_text(text)


def resolve_effect_description(raw_desc: str, effects: Mapping[str, object]) -> str:
    """Resolve an item or augment description against its scalar effects."""
    variables = {
        name: (value,)
        for name, value in effects.items()
        if isinstance(value, int | float) and not isinstance(value, bool)
    }
    return resolve_description(raw_desc, variables)
