from dataclasses import dataclass

from scouted.models.augment import Augment
from scouted.models.champion import Champion
from scouted.models.item import Item
from scouted.models.trait import Trait


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """
    Provenance of a generated envelope.

    Attributes:
        generated_at: ISO-8601 UTC timestamp
        patch: Latest game patch (e.g. "15.4.1"), "unknown" if unavailable
        set: Display label of the detected set (e.g. "Set 15")
    """

    generated_at: str
    patch: str
    set: str


@dataclass(frozen=True, slots=True)
class ScoutedData:
    """Everything produced by one pipeline run."""

    build_info: BuildInfo
    champions: tuple[Champion, ...] = ()
    items: tuple[Item, ...] = ()
    traits: tuple[Trait, ...] = ()
    augments: tuple[Augment, ...] = ()

    def counts(self) -> dict[str, int]:
        """Entity counts by collection."""
        return {
            "champions": len(self.champions),
            "items": len(self.items),
            "traits": len(self.traits),
            "augments": len(self.augments),
        }


