"""
Ability variable lookup.

Ability templates and their variable tables are authored separately
upstream and frequently disagree on names: the template says
``@ModifiedDamage@`` while the variable is ``Damage``, or ``@TotalAPDamage@``
against ``APDamage``, or ``@Damage_AP@`` against ``APDamage``.

Lookup runs an ordered list of named strategies; the first one that
returns a key wins. Each strategy is a plain function so it can be tested
on its own, and new strategies are appended to ``LOOKUP_STRATEGIES``
without disturbing earlier ones. Everything after exact and
case-insensitive matching is best-effort string matching, not a contract.
"""

import re
from collections.abc import Callable, Mapping, Sequence

# Only the keys matter for lookup
Variables = Mapping[str, object]
LookupStrategy = Callable[[str, Variables], str | None]

# Prefixes the templates add on top of the stored variable name
MODIFIER_PREFIXES: tuple[str, ...] = (
    "Modified",
    "Total",
    "Reduced",
    "Bonus",
    "First",
    "Second",
    "Third",
    "Fourth",
    "Final",
)

# Stat-type prefixes the stored names carry but templates often omit
STAT_PREFIXES: tuple[str, ...] = ("AP", "AD", "Flat", "Base", "Percent")

# Containment matches shorter than this are too ambiguous to trust
MIN_CONTAINMENT_LENGTH = 3
MIN_SHARED_WORDS = 2

_CAMEL_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")
_MODIFIER_RE = re.compile(rf"^(?:{'|'.join(MODIFIER_PREFIXES)})+")


def strip_modifiers(token: str) -> str:
    """Remove leading modifier prefixes ("ModifiedTotalDamage" -> "Damage")."""
    stripped = _MODIFIER_RE.sub("", token)
    return stripped or token


def _find_exact(name: str, variables: Variables) -> str | None:
    return name if name in variables else None


def _find_casefold(name: str, variables: Variables) -> str | None:
    folded = name.casefold()
    for key in variables:
        if key.casefold() == folded:
            return key
    return None


def _find_either(name: str, variables: Variables) -> str | None:
    return _find_exact(name, variables) or _find_casefold(name, variables)


def camel_words(name: str) -> list[str]:
    """Lower-cased camel-case / underscore segments ("QMagicDamage" -> [q, magic, damage])."""
    return [w.lower() for part in name.split("_") for w in _CAMEL_WORD_RE.findall(part)]


# =============================================================================
# STRATEGIES (in lookup order)
# =============================================================================


def exact_match(token: str, variables: Variables) -> str | None:
    """The token is the variable name."""
    return _find_exact(token, variables)


def casefold_match(token: str, variables: Variables) -> str | None:
    """Same name, different case."""
    return _find_casefold(token, variables)


def modifier_stripped_match(token: str, variables: Variables) -> str | None:
    """Drop Modified/Total/Reduced/Bonus/ordinal prefixes, then match."""
    stripped = strip_modifiers(token)
    if stripped == token:
        return None
    return _find_either(stripped, variables)


def stat_prefix_match(token: str, variables: Variables) -> str | None:
    """Prepend a stat-type prefix ("Damage" -> "APDamage")."""
    stripped = strip_modifiers(token)
    for prefix in STAT_PREFIXES:
        key = _find_either(f"{prefix}{stripped}", variables)
        if key:
            return key
    return None


def damage_infix_match(token: str, variables: Variables) -> str | None:
    """Insert a stat-type prefix before a trailing "Damage" ("SpearDamage" -> "SpearAPDamage")."""
    stripped = strip_modifiers(token)
    if not stripped.endswith("Damage") or stripped == "Damage":
        return None
    head = stripped[: -len("Damage")]
    for prefix in STAT_PREFIXES:
        key = _find_either(f"{head}{prefix}Damage", variables)
        if key:
            return key
    return None


def suffix_swap_match(token: str, variables: Variables) -> str | None:
    """Reorder a trailing "_Suffix" ("Damage_AP" -> "APDamage" / "AP_Damage")."""
    stripped = strip_modifiers(token)
    head, sep, tail = stripped.rpartition("_")
    if not sep or not head or not tail:
        return None
    for candidate in (f"{tail}{head}", f"{tail}_{head}", f"{head}{tail}"):
        key = _find_either(candidate, variables)
        if key:
            return key
    return None


def affix_containment_match(token: str, variables: Variables) -> str | None:
    """A variable name starts or ends with the token, or the reverse."""
    stripped = strip_modifiers(token).casefold()
    for key in variables:
        folded = key.casefold()
        shorter = min(len(folded), len(stripped))
        if shorter < MIN_CONTAINMENT_LENGTH:
            continue
        if (
            folded.endswith(stripped)
            or folded.startswith(stripped)
            or stripped.endswith(folded)
            or stripped.startswith(folded)
        ):
            return key
    return None


def longest_substring_match(token: str, variables: Variables) -> str | None:
    """The longest variable name contained in the token, or containing it."""
    stripped = strip_modifiers(token).casefold()
    best: str | None = None
    for key in variables:
        folded = key.casefold()
        if min(len(folded), len(stripped)) < MIN_CONTAINMENT_LENGTH:
            continue
        if (folded in stripped or stripped in folded) and (best is None or len(key) > len(best)):
            best = key
    return best


def word_overlap_match(token: str, variables: Variables) -> str | None:
    """
    The variable sharing the most camel-case words with the token.

    Needs at least two shared words. Heuristic: unverified against real
    data gaps, kept as a last resort.
    """
    token_words = set(camel_words(strip_modifiers(token)))
    best: str | None = None
    best_shared = MIN_SHARED_WORDS - 1
    for key in variables:
        shared = len(token_words & set(camel_words(key)))
        if shared > best_shared:
            best, best_shared = key, shared
    return best


LOOKUP_STRATEGIES: tuple[LookupStrategy, ...] = (
    exact_match,
    casefold_match,
    modifier_stripped_match,
    stat_prefix_match,
    damage_infix_match,
    suffix_swap_match,
    affix_containment_match,
    longest_substring_match,
    word_overlap_match,
)


def find_variable(
    token: str,
    variables: Variables,
    strategies: Sequence[LookupStrategy] = LOOKUP_STRATEGIES,
) -> str | None:
    """
    Resolve a template token to a variable name.

    Args:
        token: Token text between the @ signs (multiplier already removed)
        variables: Available variables
        strategies: Ordered strategies to try

    Returns:
        Matching variable name, or None if every strategy fails
    """
    if not token or not variables:
        return None
    for strategy in strategies:
        key = strategy(token, variables)
        if key is not None:
            return key
    return None
