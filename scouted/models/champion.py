"""
Champion Models.

INVARIANTS:
- cost is always within 1..5 (clamped at parse time)
- name is never empty
- All models are frozen (immutable after construction)
"""

from dataclasses import dataclass, field

# A stat is either a single value or one value per star level
StatValue = float | tuple[float, ...]


@dataclass(frozen=True, slots=True)
class Ability:
    """
    A champion's active ability.

    Attributes:
        name: Ability display name
        desc: Resolved, display-ready description
        icon: Absolute icon URL (empty if none)
        variables: Variable name -> per-star-level values
    """

    name: str = ""
    desc: str = ""
    icon: str = ""
    variables: dict[str, tuple[float, ...]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ChampionStats:
    """
    Base combat stats.

    Health and damage are usually per star level; the rest are scalars,
    but any field may take either shape depending on the data revision.
    """

    hp: StatValue = 0
    mana: StatValue = 0
    initial_mana: StatValue = 0
    armor: StatValue = 0
    magic_resist: StatValue = 0
    damage: StatValue = 0
    attack_speed: StatValue = 0
    crit_chance: StatValue = 0.25
    range: StatValue = 1


@dataclass(frozen=True, slots=True)
class Champion:
    """
    A playable champion.

    Attributes:
        name: Display name
        champion_id: Upstream apiName (e.g. "TFT15_Ahri")
        cost: Shop cost, 1-5
        traits: Trait display names (membership, not ownership)
        ability: Resolved ability
        stats: Base stats
        icon: Portrait URL
        tile_icon: Square tile URL
        splash_url: Splash art URL
    """

    name: str
    champion_id: str
    cost: int
    traits: tuple[str, ...] = ()
    ability: Ability = field(default_factory=Ability)
    stats: ChampionStats = field(default_factory=ChampionStats)
    icon: str = ""
    tile_icon: str = ""
    splash_url: str = ""
