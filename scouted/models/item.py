from dataclasses import dataclass, field
from enum import Enum


class ItemCategory(str, Enum):
    """Closed set of item categories, in display order."""

    COMPONENT = "component"
    COMPLETED = "completed"
    EMBLEM = "emblem"
    ARTIFACT = "artifact"
    RADIANT = "radiant"
    SUPPORT = "support"
    OTHER = "other"


# Display order for sorting
CATEGORY_ORDER: dict[ItemCategory, int] = {
    ItemCategory.COMPONENT: 0,
    ItemCategory.COMPLETED: 1,
    ItemCategory.EMBLEM: 2,
    ItemCategory.ARTIFACT: 3,
    ItemCategory.RADIANT: 4,
    ItemCategory.SUPPORT: 5,
    ItemCategory.OTHER: 9,
}


@dataclass(frozen=True, slots=True)
class Item:
    """
    An item available in the current set.

    Attributes:
        item_id: Numeric upstream id, if any
        unique_id: Upstream apiName (stable key)
        name: Display name
        desc: Resolved description
        icon: Icon URL
        category: Exactly one ItemCategory
        composition: Component apiNames making up the recipe (empty for components)
        effects: Numeric effect values keyed by name or hashed tag
    """

    unique_id: str
    name: str
    category: ItemCategory
    item_id: int | None = None
    desc: str = ""
    icon: str = ""
    composition: tuple[str, ...] = ()
    effects: dict[str, float] = field(default_factory=dict)
