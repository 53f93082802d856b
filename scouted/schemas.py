"""
Wire format of the Scouted envelope.

Mirrors the frozen dataclasses in scouted.models with camelCase JSON
keys, the shape the page templates consume. Build with
``ScoutedDataResponse.from_data(data)``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scouted.models.item import ItemCategory
from scouted.models.scouted_data import ScoutedData
from scouted.models.trait import TraitType

Number = int | float
StatField = Number | list[Number]


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class AbilitySchema(_Schema):
    name: str
    desc: str
    icon: str
    variables: dict[str, list[Number]] = Field(default_factory=dict)


class ChampionStatsSchema(_Schema):
    hp: StatField
    mana: StatField
    initial_mana: StatField
    armor: StatField
    magic_resist: StatField
    damage: StatField
    attack_speed: StatField
    crit_chance: StatField
    range: StatField


class ChampionSchema(_Schema):
    name: str
    champion_id: str
    cost: int = Field(ge=1, le=5)
    traits: list[str]
    ability: AbilitySchema
    stats: ChampionStatsSchema
    icon: str
    tile_icon: str
    splash_url: str


class ItemSchema(_Schema):
    item_id: int | None = Field(default=None, alias="id")
    unique_id: str
    name: str
    desc: str
    icon: str
    category: ItemCategory
    composition: list[str] = Field(default_factory=list, alias="from")
    effects: dict[str, Number] = Field(default_factory=dict)


class TraitEffectSchema(_Schema):
    min_units: int
    max_units: int
    style: int
    variables: dict[str, Number | None] = Field(default_factory=dict)


class TraitDetailRowSchema(_Schema):
    min_units: int
    style: int
    text: str


class TraitChampionSchema(_Schema):
    name: str
    icon: str
    champion_id: str = Field(alias="id")


class TraitSchema(_Schema):
    key: str
    name: str
    desc: str
    desc_details: list[TraitDetailRowSchema]
    icon: str
    type: TraitType
    style: int
    effects: list[TraitEffectSchema]
    champions: list[TraitChampionSchema]


class AugmentSchema(_Schema):
    augment_id: str = Field(alias="id")
    name: str
    desc: str
    icon: str
    tier: int = Field(ge=1, le=3)
    associated_traits: list[str] = Field(default_factory=list)


class BuildInfoSchema(_Schema):
    generated_at: str
    patch: str
    set: str


class ScoutedDataResponse(_Schema):
    """The full envelope handed to the rendering stage."""

    champions: list[ChampionSchema]
    items: list[ItemSchema]
    traits: list[TraitSchema]
    augments: list[AugmentSchema]
    build_info: BuildInfoSchema

    @classmethod
    def from_data(cls, data: ScoutedData) -> "ScoutedDataResponse":
        """Build the wire envelope from a pipeline result."""
        return cls.model_validate(data, from_attributes=True)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
