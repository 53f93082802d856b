"""
Description text resolution.

Variable substitution, markup cleanup and colouring for CDragon
ability, trait, item and augment descriptions.
"""

from scouted.text.formatting import format_num, format_tier_values
from scouted.text.markup import clean_line, colorize_text, is_garbage_line
from scouted.text.resolver import (
    ResolvedTraitDescription,
    resolve_description,
    resolve_effect_description,
    resolve_trait_description,
)
from scouted.text.variables import LOOKUP_STRATEGIES, find_variable

__all__ = [
    "LOOKUP_STRATEGIES",
    "ResolvedTraitDescription",
    "clean_line",
    "colorize_text",
    "find_variable",
    "format_num",
    "format_tier_values",
    "is_garbage_line",
    "resolve_description",
    "resolve_effect_description",
    "resolve_trait_description",
]
