"""Tests for the item parser."""

from typing import Any

import pytest

from scouted.models.item import ItemCategory
from scouted.parsers.items import (
    build_item_index,
    is_excluded_item,
    parse_item,
    parse_items,
    resolve_references,
)

BASE = "https://cdn.test"


@pytest.fixture
def item_index(tft_data: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Global item table of the sample export."""
    return build_item_index(tft_data["items"])


class TestItemIndex:
    """Tests for indexing and reference resolution."""

    def test_first_record_wins(self) -> None:
        """Duplicate apiNames keep the first record."""
        index = build_item_index(
            [{"apiName": "A", "name": "first"}, {"apiName": "A", "name": "second"}, {"name": "anon"}]
        )

        assert list(index) == ["A"]
        assert index["A"]["name"] == "first"

    def test_references_skip_duplicates_and_missing(self, item_index: dict) -> None:
        """Each reference resolves once; unknown references are dropped."""
        refs = ["TFT_Item_BFSword", "TFT_Item_Missing", "TFT_Item_BFSword", "TFT_Item_RecurveBow"]
        resolved = resolve_references(refs, item_index)

        assert [ref for ref, _ in resolved] == ["TFT_Item_BFSword", "TFT_Item_RecurveBow"]


class TestExclusion:
    """Tests for non-shop item filtering."""

    @pytest.mark.parametrize(
        ("name", "api_name"),
        [
            ("", "TFT_Item_Thing"),
            ("@TFTItemName@", "TFT_Item_Thing"),
            ("tft_item_name_Thing", "TFT_Item_Thing"),
            ("Neeko's Help", "TFT_Consumable_NeekosHelp"),
            ("Ahri's Orb", "TFT15_ChampionItem_Ahri"),
            ("Armory", "TFT_Item_CypherArmoryItem"),
            ("Free Item", "TFT_Item_GrantOrnnItem"),
            ("Assist", "TFT_Assist_ItemsTargetDummy"),
        ],
    )
    def test_excluded(self, name: str, api_name: str) -> None:
        """Placeholders, consumables, champion items and grants are excluded."""
        assert is_excluded_item(name, api_name)

    def test_regular_item_kept(self) -> None:
        """Ordinary shop items are kept."""
        assert not is_excluded_item("B.F. Sword", "TFT_Item_BFSword")


class TestParseItem:
    """Tests for mapping a single item record."""

    def test_component(self, item_index: dict) -> None:
        """Components have no recipe and a resolved description."""
        item = parse_item("TFT_Item_BFSword", item_index["TFT_Item_BFSword"], BASE)

        assert item.category is ItemCategory.COMPONENT
        assert item.item_id == 1
        assert item.composition == ()
        assert item.effects == {"AD": 0.1}
        assert "10%" in item.desc
        assert "@" not in item.desc
        assert item.icon.endswith("/tft_item_bfsword.tft_set13.png")

    def test_component_recipe_is_cleared(self) -> None:
        """A component listing a composition is still a recipe leaf."""
        raw = {"apiName": "TFT_Item_Spatula", "name": "Spatula", "composition": ["X", "Y"]}
        assert parse_item("TFT_Item_Spatula", raw).composition == ()

    def test_completed(self, item_index: dict) -> None:
        """A two-component item is completed and keeps its recipe."""
        item = parse_item("TFT_Item_GuinsoosRageblade", item_index["TFT_Item_GuinsoosRageblade"], BASE)

        assert item.category is ItemCategory.COMPLETED
        assert item.composition == ("TFT_Item_RecurveBow", "TFT_Item_NeedlesslyLargeRod")

    def test_emblem_without_numeric_id(self, item_index: dict) -> None:
        """Emblems win over completed; a null id stays None."""
        ref = "TFT15_Item_StarGuardianEmblemItem"
        item = parse_item(ref, item_index[ref], BASE)

        assert item.category is ItemCategory.EMBLEM
        assert item.item_id is None

    def test_non_numeric_effects_dropped(self) -> None:
        """Only numeric effects are kept."""
        raw = {"apiName": "TFT_Item_X", "name": "X", "effects": {"AD": 10, "Tag": "x", "On": True}}
        assert parse_item("TFT_Item_X", raw).effects == {"AD": 10}


class TestParseItems:
    """Tests for parsing a set's items."""

    def test_set_items(self, tft_data: dict[str, Any], item_index: dict) -> None:
        """References resolve, exclusions drop, order is category then name."""
        refs = tft_data["setData"][1]["items"]
        items = parse_items(refs, item_index, BASE)

        assert [(i.name, i.category) for i in items] == [
            ("B.F. Sword", ItemCategory.COMPONENT),
            ("Recurve Bow", ItemCategory.COMPONENT),
            ("Guinsoo's Rageblade", ItemCategory.COMPLETED),
            ("Star Guardian Emblem", ItemCategory.EMBLEM),
        ]

    def test_no_references(self, item_index: dict) -> None:
        """A set listing no items has none."""
        assert parse_items([], item_index, BASE) == []
