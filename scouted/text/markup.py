"""
Markup cleanup and colouring for TFT description text.

CDragon descriptions mix League tooltip tags (<magicDamage>, <rules>,
<TFTBonus>, ...), stat icon tokens (%i:scaleAP%), HTML entities and
formatting leftovers from runtime-only values. Everything here works on
already-substituted text.
"""

import re

from scouted.text.formatting import TIER_SEPARATOR, colorize_tier

# %i:icon% tokens -> readable stat labels
ICON_LABELS: dict[str, str] = {
    "scaleAD": "AD",
    "scaleAP": "AP",
    "scaleAS": "Attack Speed",
    "scaleArmor": "Armor",
    "scaleCrit": "Crit Chance",
    "scaleCritMult": "Crit Damage",
    "scaleDA": "Damage Amp",
    "scaleDR": "Damage Reduction",
    "scaleHealth": "Health",
    "scaleMR": "Magic Resist",
    "scaleSV": "Omnivamp",
    "scaleMana": "Mana",
}

_ICON_RE = re.compile(r"%i:([^%]+)%")
_TAG_RE = re.compile(r"<[^>]*>")
_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

# Runtime-only @TFTUnitProperty...@ tokens track in-game state and can't be
# resolved at build time; drop them along with their label and <rules> wrapper
_RUNTIME_RULES_RE = re.compile(r"<rules>[^<]*@TFTUnitProperty[^<]*</rules>", re.IGNORECASE)
_RUNTIME_LINE_RE = re.compile(r"[^<>\n]*@TFTUnitProperty[^@]*@[^<\n]*", re.IGNORECASE)
_RUNTIME_LABEL_RE = re.compile(r"Current (?:Bonus Stats|Stats|Serpents)\s*:?", re.IGNORECASE)

_LEADING_UNITS_RE = re.compile(r"^\(\d+\)\s*")
_BARE_LABEL_RE = re.compile(r"^[^:]+:\s*[^a-zA-Z]*$")
_ALPHA_RE = re.compile(r"[a-zA-Z]")


def icon_label(icon: str) -> str:
    """Readable label for a stat icon key, "" for unknown keys."""
    return ICON_LABELS.get(icon, "")


def clean_line(text: str) -> str:
    """
    Clean one line of resolved text.

    Replaces icon tokens with labels, strips tags and &nbsp;, removes
    empty or "(?)" parentheses, and normalizes whitespace.
    """
    text = _ICON_RE.sub(lambda m: icon_label(m.group(1)), text)
    text = text.replace("&nbsp;", " ")
    text = _TAG_RE.sub("", text)
    text = text.replace("(?)", "")
    text = re.sub(r"\(\s*\)", "", text)
    text = re.sub(r"\s+,", ",", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def split_lines(text: str) -> list[str]:
    """Split on <br> tags; newlines are ordinary whitespace."""
    return _BREAK_RE.split(text)


def is_garbage_line(text: str) -> bool:
    """
    True for lines left meaningless after substitution.

    Empty lines, bare labels ("Bonus Armor: 20%"-style lines whose values
    vanished, leaving "Bonus Armor: %"), and lines with no letters unless
    they start with "(".
    """
    if not text:
        return True
    if _BARE_LABEL_RE.match(text):
        return True
    return not _ALPHA_RE.search(text) and not text.startswith("(")


def strip_runtime_properties(text: str) -> str:
    """Remove runtime-only unit property tokens and their surrounding labels."""
    text = _RUNTIME_RULES_RE.sub("", text)
    text = _RUNTIME_LINE_RE.sub("", text)
    return _RUNTIME_LABEL_RE.sub("", text)


def strip_leading_units(text: str) -> str:
    """Drop a leading "(3) " units prefix; the breakpoint badge shows it."""
    text = _LEADING_UNITS_RE.sub("", text)
    text = re.sub(r"^,\s*", "", text)
    return text.strip()


def join_lines(lines: list[str]) -> str:
    """Join cleaned lines with <br>, collapsing long runs of breaks."""
    joined = "<br>".join(lines)
    joined = re.sub(r"(<br\s*/?>\s*){3,}", "<br><br>", joined, flags=re.IGNORECASE)
    joined = re.sub(r"^(<br\s*/?>\s*)+", "", joined, flags=re.IGNORECASE)
    joined = re.sub(r"(<br\s*/?>\s*)+$", "", joined, flags=re.IGNORECASE)
    return joined.strip()


# =============================================================================
# COLOURING
# =============================================================================

# 350/600/2000 or 20%/30%/40%: up to four star levels
_SLASH_RUN_RE = re.compile(r"\b(\d+(?:\.\d+)?%?)((?:/\d+(?:\.\d+)?%?){1,3})(?!\.?\d)")

# League tooltip colours. Longer phrases come first so "Critical Strike
# Damage" is coloured whole rather than as "Critical Strike" + "Damage".
STAT_KEYWORDS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b(max(?:imum)?\s+Health)\b", re.IGNORECASE), "#2dd4bf"),
    (re.compile(r"\b(Critical Strike Chance)\b", re.IGNORECASE), "#f87171"),
    (re.compile(r"\b(Critical Strike Damage)\b", re.IGNORECASE), "#f87171"),
    (re.compile(r"\b(Critical Strike)\b", re.IGNORECASE), "#f87171"),
    (re.compile(r"\b(Damage Reduction)\b", re.IGNORECASE), "#eab308"),
    (re.compile(r"\b(Magic Resist)\b", re.IGNORECASE), "#818cf8"),
    (re.compile(r"\b(Attack Damage)\b", re.IGNORECASE), "#fb923c"),
    (re.compile(r"\b(Ability Power)\b", re.IGNORECASE), "#c084fc"),
    (re.compile(r"\b(Attack Speed)\b", re.IGNORECASE), "#a3e635"),
    (re.compile(r"\b(Mana Regen)\b", re.IGNORECASE), "#60a5fa"),
    (re.compile(r"\b(Crit Chance)\b", re.IGNORECASE), "#f87171"),
    (re.compile(r"\b(Crit Damage)\b", re.IGNORECASE), "#f87171"),
    (re.compile(r"\b(Magic Damage)\b", re.IGNORECASE), "#a78bfa"),
    (re.compile(r"\b(Damage Amp)\b", re.IGNORECASE), "#a78bfa"),
    (re.compile(r"\b(Omnivamp)\b", re.IGNORECASE), "#fb7185"),
    (re.compile(r"\b(Durability)\b", re.IGNORECASE), "#eab308"),
    (re.compile(r"\b(Health)\b", re.IGNORECASE), "#2dd4bf"),
    (re.compile(r"\b(Armor)\b", re.IGNORECASE), "#eab308"),
    (re.compile(r"\b(Shield)\b", re.IGNORECASE), "#fbbf24"),
    (re.compile(r"\b(Mana)\b"), "#60a5fa"),
    (re.compile(r"\b(AD)\b"), "#fb923c"),
    (re.compile(r"\b(AP)\b"), "#c084fc"),
)

_PLACEHOLDER_RE = re.compile("\x00SPAN(\\d+)\x00")
_SPAN_RE = re.compile(r"<span\b[^>]*>.*?</span>", re.IGNORECASE)


class _Placeholders:
    """Parks finished markup behind NUL-delimited tokens so later patterns skip it."""

    def __init__(self) -> None:
        self._spans: list[str] = []

    def park(self, markup: str) -> str:
        self._spans.append(markup)
        return f"\x00SPAN{len(self._spans) - 1}\x00"

    def restore(self, text: str) -> str:
        # Parked markup may itself contain tokens parked earlier
        while _PLACEHOLDER_RE.search(text):
            text = _PLACEHOLDER_RE.sub(lambda m: self._spans[int(m.group(1))], text)
        return text


def colorize_slash_runs(text: str, placeholders: _Placeholders | None = None) -> str:
    """Colour each value of "a/b/c" runs by star level."""

    def _replace(match: re.Match[str]) -> str:
        parts = match.group(0).split("/")
        markup = TIER_SEPARATOR.join(colorize_tier(p, i) for i, p in enumerate(parts))
        return placeholders.park(markup) if placeholders else markup

    return _SLASH_RUN_RE.sub(_replace, text)


def colorize_text(text: str) -> str:
    """
    Apply star-level and stat-keyword colouring to resolved text.

    Spans already present (tier-coloured values) and spans produced here
    are parked behind placeholders, so no pattern ever matches inside
    previously coloured markup.
    """
    placeholders = _Placeholders()
    text = _SPAN_RE.sub(lambda m: placeholders.park(m.group(0)), text)
    text = colorize_slash_runs(text, placeholders)

    for pattern, color in STAT_KEYWORDS:
        text = pattern.sub(
            lambda m, c=color: placeholders.park(f'<span style="color:{c}">{m.group(0)}</span>'),
            text,
        )

    return placeholders.restore(text)
