"""
Trait Models.

Trait membership (``champions``) is not part of the upstream trait record;
it is filled in by the linker after all champions and traits are parsed.
"""

from dataclasses import dataclass, field
from enum import Enum


class TraitType(str, Enum):
    """Inferred trait type."""

    ORIGIN = "origin"
    CLASS = "class"
    UNIQUE = "unique"
    TEAMUP = "teamup"


# Origins first, then classes, then team-ups and unique traits
TYPE_ORDER: dict[TraitType, int] = {
    TraitType.ORIGIN: 0,
    TraitType.CLASS: 1,
    TraitType.TEAMUP: 2,
    TraitType.UNIQUE: 3,
}


@dataclass(frozen=True, slots=True)
class TraitEffect:
    """A single activation breakpoint."""

    min_units: int = 0
    max_units: int = 999
    style: int = 0
    variables: dict[str, float | None] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TraitDetailRow:
    """One resolved description line bound to a breakpoint."""

    min_units: int
    style: int
    text: str


@dataclass(frozen=True, slots=True)
class TraitChampion:
    """Lightweight membership record for a champion carrying a trait."""

    name: str
    icon: str
    champion_id: str


@dataclass(frozen=True, slots=True)
class Trait:
    """
    A team synergy trait.

    Attributes:
        key: Upstream apiName (e.g. "TFT15_Sorcerer")
        name: Display name
        desc: Resolved summary text
        desc_details: Per-breakpoint resolved rows
        icon: Icon URL
        type: Inferred TraitType
        style: Upstream base style
        effects: Breakpoints in upstream order
        champions: Members, populated by the linker
    """

    key: str
    name: str
    type: TraitType
    desc: str = ""
    desc_details: tuple[TraitDetailRow, ...] = ()
    icon: str = ""
    style: int = 0
    effects: tuple[TraitEffect, ...] = ()
    champions: tuple[TraitChampion, ...] = ()
