from dataclasses import dataclass

# Silver, Gold, Prismatic
MIN_AUGMENT_TIER = 1
MAX_AUGMENT_TIER = 3
DEFAULT_AUGMENT_TIER = 2


@dataclass(frozen=True, slots=True)
class Augment:
    """
    A run-modifying augment.

    Attributes:
        augment_id: Upstream apiName
        name: Display name
        desc: Resolved description
        icon: Icon URL
        tier: 1 (Silver), 2 (Gold) or 3 (Prismatic)
        associated_traits: Trait apiNames the augment relates to
    """

    augment_id: str
    name: str
    tier: int = DEFAULT_AUGMENT_TIER
    desc: str = ""
    icon: str = ""
    associated_traits: tuple[str, ...] = ()
