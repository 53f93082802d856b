"""Number formatting for resolved descriptions."""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

_HUNDREDTHS = Decimal("0.01")

MISSING_VALUE = "?"

# Star level colours: 1-star bronze, 2-star silver, 3-star gold, 4-star red
TIER_COLORS: tuple[str, ...] = ("#a67c52", "#94a3b8", "#e6a030", "#e84e4e")

TIER_SEPARATOR = '<span style="color:var(--muted)">/</span>'


def format_num(value: float | None) -> str:
    """
    Format a number for display.

    Integers render bare; anything else is rounded half up to two
    decimals (0.125 -> "0.13") with trailing zeros dropped. None renders
    as "?".
    """
    if value is None:
        return MISSING_VALUE
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not math.isfinite(value):
        return MISSING_VALUE
    # str() first so 0.125 is rounded as written, not as its binary approximation
    rounded = Decimal(str(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return format(rounded.normalize(), "f")


def tier_color(index: int) -> str:
    """Colour for the value at a star-level index; extra tiers reuse the last."""
    return TIER_COLORS[min(index, len(TIER_COLORS) - 1)]


def colorize_tier(text: str, index: int) -> str:
    """Wrap one tier's value in its star-level colour."""
    return f'<span style="color:{tier_color(index)};font-weight:600">{text}</span>'


def format_tier_values(values: Sequence[float], multiplier: float = 1) -> str:
    """
    Format per-star-level values as "a/b/c" with coloured tiers.

    Identical values collapse to a single uncoloured number.

    Args:
        values: One value per star level
        multiplier: Applied to every value first (for @Var*100@ tokens)

    Returns:
        Display string, "?" if there are no values
    """
    if not values:
        return MISSING_VALUE

    scaled = [v * multiplier if multiplier != 1 else v for v in values]
    formatted = [format_num(v) for v in scaled]
    if len(set(formatted)) == 1:
        return formatted[0]
    return TIER_SEPARATOR.join(colorize_tier(text, i) for i, text in enumerate(formatted))
