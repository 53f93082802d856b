from typing import Any

import pytest


@pytest.fixture
def raw_champion() -> dict[str, Any]:
    """A playable CDragon champion record."""
    return {
        "apiName": "TFT15_Ahri",
        "name": "Ahri",
        "cost": 3,
        "traits": ["Star Guardian", "Sorcerer"],
        "icon": "ASSETS/Characters/TFT15_Ahri/HUD/TFT15_Ahri_Square.TFT_Set15.tex",
        "tileIcon": "ASSETS/Characters/TFT15_Ahri/Skins/Base/Images/TFT15_Ahri_Mobile.TFT_Set15.dds",
        "squareIcon": "ASSETS/Characters/TFT15_Ahri/HUD/TFT15_Ahri_Splash.TFT_Set15.tex",
        "ability": {
            "name": "Spirit Orb",
            "desc": "Deal <magicDamage>@ModifiedDamage@ magic damage</magicDamage> to the target.",
            "icon": "ASSETS/Characters/TFT15_Ahri/HUD/Icons2D/Ahri_Q.TFT_Set15.tex",
            "variables": [
                {"name": "Damage", "value": [0, 200, 300, 450, 0, 0, 0]},
                {"name": "ManaReave", "value": [0, 10, 10, 10, 10, 10, 10]},
            ],
        },
        "stats": {
            "hp": 700,
            "mana": 60,
            "initialMana": 20,
            "armor": 25,
            "magicResist": 25,
            "damage": 40,
            "attackSpeed": 0.75,
            "critChance": 0.25,
            "range": 4,
        },
    }


@pytest.fixture
def tft_data(raw_champion: dict[str, Any]) -> dict[str, Any]:
    """Miniature CDragon TFT export with a live set and a special-mode variant."""
    return {
        "items": [
            {
                "apiName": "TFT_Item_BFSword",
                "id": 1,
                "name": "B.F. Sword",
                "desc": "%i:scaleAD% @AD*100@% Attack Damage",
                "icon": "ASSETS/Maps/TFT/Icons/Items/Hexcore/TFT_Item_BFSword.TFT_Set13.tex",
                "composition": [],
                "effects": {"AD": 0.1},
            },
            {
                "apiName": "TFT_Item_RecurveBow",
                "id": 2,
                "name": "Recurve Bow",
                "desc": "@AS@% Attack Speed",
                "icon": "ASSETS/Maps/TFT/Icons/Items/Hexcore/TFT_Item_RecurveBow.TFT_Set13.tex",
                "composition": [],
                "effects": {"AS": 10},
            },
            {
                "apiName": "TFT_Item_GuinsoosRageblade",
                "id": 3,
                "name": "Guinsoo's Rageblade",
                "desc": "Attacks grant @AttackSpeedPerStack@% Attack Speed.",
                "icon": "ASSETS/Maps/TFT/Icons/Items/Hexcore/TFT_Item_GuinsoosRageblade.TFT_Set13.tex",
                "composition": ["TFT_Item_RecurveBow", "TFT_Item_NeedlesslyLargeRod"],
                "effects": {"AttackSpeedPerStack": 5},
            },
            {
                "apiName": "TFT15_Item_StarGuardianEmblemItem",
                "id": None,
                "name": "Star Guardian Emblem",
                "desc": "The holder gains the Star Guardian trait.",
                "icon": "ASSETS/Maps/TFT/Icons/Items/Hexcore/TFT15_Emblem_StarGuardian.TFT_Set15.tex",
                "composition": ["TFT_Item_Spatula", "TFT_Item_RecurveBow"],
                "effects": {},
            },
            {
                "apiName": "TFT_Consumable_NeekosHelp",
                "name": "Neeko's Help",
                "desc": "Create a copy of a champion.",
                "composition": [],
                "effects": {},
            },
            {
                "apiName": "TFT15_Augment_CyberneticImplants",
                "name": "Cybernetic Implants",
                "desc": "Your champions holding items gain @Health@ Health.",
                "icon": "ASSETS/Maps/TFT/Icons/Augments/Hexcore/Cybernetic-Implants-II.TFT_Set13.tex",
                "tags": ["{ce1fd21c}"],
                "effects": {"Health": 200},
                "associatedTraits": [],
            },
            {
                "apiName": "TFT15_Augment_SorcererCrest",
                "name": "Sorcerer Crest",
                "desc": "Gain a Sorcerer Emblem.",
                "icon": "ASSETS/Maps/TFT/Icons/Augments/Hexcore/Sorcerer-Crest-I.TFT_Set15.tex",
                "tags": [],
                "effects": {},
                "associatedTraits": ["TFT15_Sorcerer"],
            },
        ],
        "setData": [
            {
                "number": 15,
                "mutator": "TFTSet15_Turbo",
                "name": "Hyper Roll",
                "champions": [],
                "traits": [],
                "items": [],
                "augments": [],
            },
            {
                "number": 15,
                "mutator": "TFTSet15",
                "name": "K.O. Coliseum",
                "champions": [
                    raw_champion,
                    {
                        "apiName": "TFT15_Ekko",
                        "name": "Ekko",
                        "cost": 1,
                        "traits": ["Sorcerer"],
                        "ability": {},
                        "stats": {},
                    },
                    {
                        "apiName": "TFT15_Zilean",
                        "name": "Zilean",
                        "cost": 2,
                        "traits": [],
                        "ability": {},
                        "stats": {},
                    },
                    {
                        "apiName": "TFT_BlueGolem",
                        "name": "Blue Golem",
                        "cost": 1,
                        "traits": [],
                    },
                    {
                        "apiName": "TFT15_Training_Dummy",
                        "name": "Training Dummy",
                        "cost": 8,
                        "traits": [],
                    },
                ],
                "traits": [
                    {
                        "apiName": "TFT15_StarGuardian",
                        "name": "Star Guardian",
                        "desc": "Star Guardians gain Ability Power.<br><br>"
                        "<expandRow>(@MinUnits@) @AP@ Ability Power</expandRow>",
                        "icon": "ASSETS/UX/TraitIcons/Trait_Icon_15_StarGuardian.TFT_Set15.tex",
                        "effects": [
                            {"minUnits": 3, "maxUnits": 4, "style": 1, "variables": {"AP": 20}},
                            {"minUnits": 5, "maxUnits": 25000, "style": 4, "variables": {"AP": 40}},
                        ],
                    },
                    {
                        "apiName": "TFT15_Sorcerer",
                        "name": "Sorcerer",
                        "desc": "<row>(@MinUnits@) Mana Regen +@ManaRegen@</row>"
                        "<row>(@MinUnits@) Mana Regen +@ManaRegen@</row>",
                        "icon": "ASSETS/UX/TraitIcons/Trait_Icon_15_Sorcerer.TFT_Set15.tex",
                        "effects": [
                            {"minUnits": 2, "maxUnits": 3, "style": 1, "variables": {"ManaRegen": 2}},
                            {"minUnits": 4, "maxUnits": 25000, "style": 3, "variables": {"ManaRegen": 5}},
                        ],
                    },
                    {
                        "apiName": "TFT15_Teamup_EkkoZilean",
                        "name": "Time Travelers",
                        "desc": "Ekko and Zilean rewind time.",
                        "effects": [{"minUnits": 2, "maxUnits": 2, "style": 4, "variables": {}}],
                    },
                    {
                        "apiName": "TFT_Template_Trait",
                        "name": "TFT_Template_Trait",
                        "desc": "",
                        "effects": [],
                    },
                ],
                "items": [
                    "TFT_Item_BFSword",
                    "TFT_Item_RecurveBow",
                    "TFT_Item_GuinsoosRageblade",
                    "TFT_Item_GuinsoosRageblade",
                    "TFT15_Item_StarGuardianEmblemItem",
                    "TFT_Consumable_NeekosHelp",
                    "TFT_Item_DoesNotExist",
                ],
                "augments": [
                    "TFT15_Augment_CyberneticImplants",
                    "TFT15_Augment_SorcererCrest",
                ],
            },
            {
                "number": 14,
                "mutator": "TFTSet14",
                "name": "Cyber City",
                "champions": [],
                "traits": [],
                "items": [],
                "augments": [],
            },
        ],
    }
