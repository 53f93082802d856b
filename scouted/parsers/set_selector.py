"""
Current set detection.

CDragon exposes every set it knows about, including special-mode variants
of the live set (TFTSet15_Turbo, TFTSet15_PAIRS, ...). This module is the
only place that cares whether sets arrive as a list or as a mapping keyed
by set id; everything downstream receives one set record.

Selection rules:
1. Take the highest set ``number``.
2. Among sets sharing it, prefer the standard variant (mutator without an
   underscore suffix, or exactly ``TFTSet{N}``); otherwise the first one.
3. With no set numbers at all (legacy shape), order by the digits embedded
   in the set keys and take the last.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

UNKNOWN_SET_LABEL = "Unknown"

_DIGITS_RE = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class SetSelection:
    """
    The chosen set.

    Attributes:
        data: Raw set record (champions, traits, item and augment refs)
        label: Display label (e.g. "Set 15")
        mutator: Variant tag, "" when absent
        number: Set number, if known
    """

    data: dict[str, Any]
    label: str
    mutator: str = ""
    number: int | None = None


def _digits(value: str) -> int:
    """Integer made of all digits in value, 0 if there are none."""
    digits = _DIGITS_RE.sub("", value)
    return int(digits) if digits else 0


def _set_number(candidate: Mapping[str, Any]) -> int | None:
    number = candidate.get("number")
    if isinstance(number, bool) or not isinstance(number, int | float):
        return None
    return int(number)


def is_standard_variant(mutator: str, number: int) -> bool:
    """True if the mutator names the default game mode for a set."""
    return "_" not in mutator or mutator == f"TFTSet{number}"


def _candidates(set_data: Any) -> list[tuple[str, dict[str, Any]]]:
    """Normalize list- or mapping-shaped set containers to (key, record) pairs."""
    if isinstance(set_data, list):
        return [
            (str(s.get("mutator") or ""), s) for s in set_data if isinstance(s, dict)
        ]
    if isinstance(set_data, Mapping):
        return [(str(k), v) for k, v in set_data.items() if isinstance(v, dict)]
    return []


def _pick(candidates: list[tuple[str, dict[str, Any]]]) -> dict[str, Any]:
    numbers = [n for _, c in candidates if (n := _set_number(c)) is not None]

    if not numbers:
        # Legacy shape: no set numbers, order by digits in the keys.
        # Among equal digits the later key wins.
        ordered = sorted(candidates, key=lambda pair: _digits(pair[0]))
        return ordered[-1][1]

    max_number = max(numbers)
    top = [c for _, c in candidates if _set_number(c) == max_number]

    for candidate in top:
        if is_standard_variant(str(candidate.get("mutator") or ""), max_number):
            return candidate
    return top[0]


def set_display_label(current_set: Mapping[str, Any]) -> str:
    """
    Human-readable label for a set.

    Prefers the set number, then digits in the mutator, then the set's
    declared name, else "Unknown".
    """
    number = _set_number(current_set)
    if number is None:
        number = _digits(str(current_set.get("mutator") or "")) or None
    if number:
        return f"Set {number}"

    name = current_set.get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return UNKNOWN_SET_LABEL


def select_current_set(set_data: Any) -> SetSelection | None:
    """
    Pick exactly one current set.

    Args:
        set_data: ``setData`` (or legacy ``sets``) from the TFT export,
            either a list of set records or a mapping of set id -> record

    Returns:
        The selected set, or None when there are no candidates (callers
        should produce empty collections)
    """
    candidates = _candidates(set_data)
    if not candidates:
        return None

    chosen = _pick(candidates)
    return SetSelection(
        data=chosen,
        label=set_display_label(chosen),
        mutator=str(chosen.get("mutator") or ""),
        number=_set_number(chosen),
    )
