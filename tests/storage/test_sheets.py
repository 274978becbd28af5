"""Tests for the singleton character sheet."""

import pytest

from campaign_store import storage
from campaign_store.errors import InvalidInput, NotFound


# ── create / get ────────────────────────────────────────


def test_new_sheet_structure():
    sheet = storage.new_sheet()
    assert sheet["name"] == ""
    assert sheet["class"] == ""
    assert sheet["abilities"] == {"STR": 0, "DEX": 0, "CON": 0, "INT": 0, "WIS": 0, "CHA": 0}
    assert sheet["proficiencies"] == {
        "armor": [], "weapons": [], "saving_throws": [], "skills": [], "expertise": [],
    }
    assert sheet["features"] == {}
    assert sheet["equipment"] == []
    assert sheet["misc"] == {"wealth": {"gold": 0}, "titles": [], "achievements": []}


def test_get_without_sheet():
    with pytest.raises(NotFound):
        storage.sheet().get()


def test_create_and_get():
    created = storage.sheet().create()
    assert storage.sheet().get() == created == storage.new_sheet()


def test_create_replaces_existing():
    storage.sheet().create()
    storage.sheet().patch({"misc": {"titles": ["Hero"]}, "xp": 900})
    storage.sheet().create()
    assert storage.sheet().get() == storage.new_sheet()


def test_create_with_seed():
    sheet = storage.sheet().create({"name": "Aldric", "class": "Wizard", "level": "3",
                                    "race": None, "hp": 10})
    assert sheet["name"] == "Aldric"
    assert sheet["class"] == "Wizard"
    assert sheet["level"] == 3
    assert sheet["race"] == ""
    assert "hp" not in sheet


def test_create_leaves_collections_alone():
    storage.scenes().add({"title": "Arrival", "description": "Rain"})
    storage.sheet().create()
    assert storage.scenes().list() == ["Arrival"]


# ── patch ───────────────────────────────────────────────


def test_patch_gold_keeps_siblings():
    storage.sheet().create()
    storage.sheet().patch({"misc": {"wealth": {"gold": 50}}})
    sheet = storage.sheet().get()
    assert sheet["misc"]["wealth"]["gold"] == 50
    assert sheet["misc"]["titles"] == []


def test_patch_replaces_lists():
    storage.sheet().create()
    storage.sheet().patch({"equipment": ["rope", "torch"]})
    storage.sheet().patch({"equipment": ["sword"]})
    assert storage.sheet().get()["equipment"] == ["sword"]


def test_patch_without_sheet():
    with pytest.raises(NotFound):
        storage.sheet().patch({"xp": 10})


@pytest.mark.parametrize("updates", [["xp"], "xp", 5, None])
def test_patch_rejects_non_mapping(updates):
    storage.sheet().create()
    with pytest.raises(InvalidInput):
        storage.sheet().patch(updates)


def test_patch_rejects_non_finite_numbers():
    storage.sheet().create()
    before = storage.document_store().load()
    with pytest.raises(InvalidInput):
        storage.sheet().patch({"misc": {"wealth": {"gold": float("nan")}}})
    assert storage.document_store().load() == before


# ── remove_field ────────────────────────────────────────


def test_remove_value_from_list():
    storage.sheet().create()
    storage.sheet().patch({"misc": {"titles": ["Hero", "Sage"]}})
    result = storage.sheet().remove_field("misc.titles", "Hero")
    assert result.success is True
    assert result.sheet["misc"]["titles"] == ["Sage"]
    assert storage.sheet().get()["misc"]["titles"] == ["Sage"]


def test_remove_value_removes_every_occurrence():
    storage.sheet().create()
    storage.sheet().patch({"equipment": ["torch", "rope", "torch"]})
    result = storage.sheet().remove_field("equipment", "torch")
    assert result.sheet["equipment"] == ["rope"]


def test_remove_last_value_keeps_field():
    storage.sheet().create()
    storage.sheet().patch({"misc": {"titles": ["Hero"]}})
    result = storage.sheet().remove_field("misc.titles", "Hero")
    assert result.sheet["misc"]["titles"] == []


def test_remove_absent_value_is_success():
    storage.sheet().create()
    result = storage.sheet().remove_field("misc.titles", "Hero")
    assert result.success is True
    assert result.sheet["misc"]["titles"] == []


def test_remove_field_entirely():
    storage.sheet().create()
    result = storage.sheet().remove_field("misc.wealth.gold")
    assert result.success is True
    assert storage.sheet().get()["misc"]["wealth"] == {}


def test_remove_list_without_value_deletes_field():
    storage.sheet().create()
    storage.sheet().remove_field("misc.titles")
    assert "titles" not in storage.sheet().get()["misc"]


def test_remove_scalar_with_value_deletes_field():
    storage.sheet().create()
    storage.sheet().remove_field("xp", 0)
    assert "xp" not in storage.sheet().get()


def test_remove_list_slot():
    storage.sheet().create()
    storage.sheet().patch({"equipment": ["rope", "torch"]})
    storage.sheet().remove_field("equipment.0")
    assert storage.sheet().get()["equipment"] == ["torch"]


def test_remove_none_value_from_list():
    storage.sheet().create()
    storage.sheet().patch({"equipment": ["rope", None]})
    result = storage.sheet().remove_field("equipment", None)
    assert result.sheet["equipment"] == ["rope"]


@pytest.mark.parametrize("path", ["", None, 5, ["misc"]])
def test_remove_rejects_bad_path(path):
    storage.sheet().create()
    result = storage.sheet().remove_field(path)
    assert result.success is False
    assert result.reason == "invalid_input"


def test_remove_without_sheet():
    result = storage.sheet().remove_field("misc.titles", "Hero")
    assert result.success is False
    assert result.reason == "not_found"


def test_remove_unresolvable_path():
    storage.sheet().create()
    result = storage.sheet().remove_field("spells.cantrips")
    assert result.success is False
    assert result.reason == "invalid_path"


def test_remove_missing_key():
    storage.sheet().create()
    before = storage.document_store().load()
    result = storage.sheet().remove_field("misc.wealth.platinum")
    assert result.success is False
    assert result.reason == "invalid_path"
    assert storage.document_store().load() == before


def test_removal_result_to_dict():
    result = storage.sheet().remove_field("misc")
    assert result.to_dict() == {
        "success": False,
        "error": "Character sheet not found",
        "sheet": None,
    }
