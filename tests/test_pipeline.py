"""Tests for the end-to-end data pipeline."""

from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import httpx
import pytest
import respx

from scouted.fetchers.cdragon import tft_data_url, versions_url
from scouted.models.item import ItemCategory
from scouted.models.trait import TraitType
from scouted.schemas import ScoutedDataResponse
from scouted.services.pipeline import (
    PayloadShapeError,
    build_scouted_data,
    fetch_all_data,
    format_timestamp,
    reference_list,
)

GENERATED_AT = datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=UTC)


class TestFormatTimestamp:
    """Tests for build timestamps."""

    def test_utc_with_milliseconds(self) -> None:
        """Timestamps are UTC ISO-8601 with milliseconds and a Z suffix."""
        assert format_timestamp(GENERATED_AT) == "2025-03-04T05:06:07.890Z"

    def test_converts_to_utc(self) -> None:
        """Offset timestamps are converted to UTC."""
        moment = datetime(2025, 3, 4, 7, 6, 7, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2025-03-04T05:06:07.000Z"


class TestReferenceList:
    """Tests for set reference lists."""

    def test_string_references(self) -> None:
        """Lists of apiName strings are used."""
        assert reference_list(["A", "B"]) == ["A", "B"]

    @pytest.mark.parametrize("value", [None, [], [{"apiName": "A"}], "A"])
    def test_other_shapes_ignored(self, value: Any) -> None:
        """Embedded records and other shapes yield no references."""
        assert reference_list(value) == []


class TestBuildScoutedData:
    """Tests for transforming a TFT export."""

    def test_full_build(self, tft_data: dict[str, Any]) -> None:
        """A complete export produces every collection."""
        data = build_scouted_data(tft_data, "15.4.1", generated_at=GENERATED_AT)

        assert data.build_info.patch == "15.4.1"
        assert data.build_info.set == "Set 15"
        assert data.build_info.generated_at == "2025-03-04T05:06:07.890Z"
        assert [c.name for c in data.champions] == ["Ekko", "Zilean", "Ahri"]
        assert [t.name for t in data.traits] == ["Star Guardian", "Sorcerer", "Time Travelers"]
        assert [i.category for i in data.items] == [
            ItemCategory.COMPONENT,
            ItemCategory.COMPONENT,
            ItemCategory.COMPLETED,
            ItemCategory.EMBLEM,
        ]
        assert [a.name for a in data.augments] == ["Sorcerer Crest", "Cybernetic Implants"]

    def test_uses_standard_variant(self, tft_data: dict[str, Any]) -> None:
        """The standard set wins over a special mode with the same number."""
        data = build_scouted_data(tft_data, generated_at=GENERATED_AT)
        assert len(data.champions) == 3

    def test_trait_membership(self, tft_data: dict[str, Any]) -> None:
        """Champions are linked into their traits, team-ups included."""
        traits = {t.name: t for t in build_scouted_data(tft_data).traits}

        assert [m.name for m in traits["Star Guardian"].champions] == ["Ahri"]
        assert [m.name for m in traits["Sorcerer"].champions] == ["Ekko", "Ahri"]
        assert traits["Time Travelers"].type is TraitType.TEAMUP
        assert [m.name for m in traits["Time Travelers"].champions] == ["Ekko", "Zilean"]

    def test_trait_types(self, tft_data: dict[str, Any]) -> None:
        """Trait types are inferred from breakpoints."""
        types = {t.name: t.type for t in build_scouted_data(tft_data).traits}

        assert types["Star Guardian"] is TraitType.ORIGIN
        assert types["Sorcerer"] is TraitType.CLASS

    def test_legacy_sets_key(self, tft_data: dict[str, Any]) -> None:
        """Older exports keep sets under "sets"."""
        tft_data["sets"] = tft_data.pop("setData")
        data = build_scouted_data(tft_data)

        assert data.build_info.set == "Set 15"
        assert len(data.champions) == 3

    def test_embedded_item_records_ignored(self, tft_data: dict[str, Any]) -> None:
        """Sets listing full item records instead of apiNames yield no items."""
        tft_data["setData"][1]["items"] = [{"apiName": "TFT_Item_BFSword"}]
        assert build_scouted_data(tft_data).items == ()

    def test_missing_payload(self) -> None:
        """No export yields empty collections, never an error."""
        data = build_scouted_data(None, "15.4.1", generated_at=GENERATED_AT)

        assert data.build_info.set == "Unknown"
        assert data.build_info.patch == "15.4.1"
        assert data.counts() == {"champions": 0, "items": 0, "traits": 0, "augments": 0}

    def test_no_sets(self) -> None:
        """An export without sets yields empty collections."""
        data = build_scouted_data({"items": []})

        assert data.build_info.set == "Unknown"
        assert data.champions == ()

    @pytest.mark.parametrize("payload", [[], "text", 42])
    def test_wrong_payload_shape(self, payload: Any) -> None:
        """A payload that is not a JSON object is a caller error."""
        with pytest.raises(PayloadShapeError, match="JSON object"):
            build_scouted_data(payload)

    def test_patch_defaults_to_unknown(self, tft_data: dict[str, Any]) -> None:
        """Without a patch the envelope says "unknown"."""
        assert build_scouted_data(tft_data).build_info.patch == "unknown"

    def test_asset_root(self, tft_data: dict[str, Any]) -> None:
        """Asset URLs use the given root."""
        data = build_scouted_data(tft_data, cdragon_base="https://cdn.test")
        assert data.champions[-1].icon.startswith("https://cdn.test/game/")

    def test_deterministic(self, tft_data: dict[str, Any]) -> None:
        """The same snapshot always produces the same envelope."""
        first = build_scouted_data(tft_data, "15.4.1", generated_at=GENERATED_AT)
        second = build_scouted_data(tft_data, "15.4.1", generated_at=GENERATED_AT)

        assert first == second


class TestFetchAllData:
    """Tests for fetching and building in one step."""

    @respx.mock
    async def test_fetches_and_builds(self, tft_data: dict[str, Any]) -> None:
        """The export and patch are fetched and transformed."""
        respx.get(versions_url()).mock(return_value=httpx.Response(200, json=["15.4.1"]))
        respx.get(tft_data_url()).mock(return_value=httpx.Response(200, json=tft_data))

        async with httpx.AsyncClient() as client:
            data = await fetch_all_data(client)

        assert data.build_info.patch == "15.4.1"
        assert data.build_info.set == "Set 15"
        assert len(data.champions) == 3

    @respx.mock
    async def test_upstream_down(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An unreachable upstream yields an empty envelope."""
        monkeypatch.setattr("scouted.config.settings.fetch_retries", 0)
        respx.get(versions_url()).mock(return_value=httpx.Response(503))
        respx.get(tft_data_url()).mock(return_value=httpx.Response(503))

        data = await fetch_all_data()

        assert data.build_info.patch == "unknown"
        assert data.build_info.set == "Unknown"
        assert data.counts()["champions"] == 0


class TestAugmentTierTags:
    """Tests for configured augment tier tags."""

    def test_out_of_range_tag_degrades(self, tft_data: dict[str, Any]) -> None:
        """A bad tier tag falls back to the icon and still serializes."""
        data = build_scouted_data(tft_data, tier_tags={"{ce1fd21c}": 4})
        tiers = {a.augment_id: a.tier for a in data.augments}

        assert tiers["TFT15_Augment_CyberneticImplants"] == 2
        wire = ScoutedDataResponse.from_data(data).model_dump()
        assert [a["tier"] for a in wire["augments"]] == [1, 2]
