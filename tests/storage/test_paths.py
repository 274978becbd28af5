"""Tests for dotted-path resolution."""

import pytest

from campaign_store.errors import InvalidPath
from campaign_store.storage import has_key, new_sheet, resolve_path


def test_resolve_nested_returns_parent_and_key():
    sheet = new_sheet()
    parent, key = resolve_path(sheet, "misc.wealth.gold")
    assert parent is sheet["misc"]["wealth"]
    assert key == "gold"


def test_resolve_ignores_unrelated_siblings():
    sheet = new_sheet()
    sheet["misc"]["titles"] = ["Hero"]
    sheet["extra"] = {"gold": 1}
    parent, key = resolve_path(sheet, "misc.wealth.gold")
    assert parent is sheet["misc"]["wealth"]
    assert key == "gold"


def test_resolve_top_level():
    sheet = new_sheet()
    parent, key = resolve_path(sheet, "equipment")
    assert parent is sheet
    assert key == "equipment"


def test_resolve_missing_leaf_is_found_but_absent():
    sheet = new_sheet()
    parent, key = resolve_path(sheet, "misc.wealth.platinum")
    assert parent is sheet["misc"]["wealth"]
    assert not has_key(parent, key)


def test_resolve_missing_intermediate_raises():
    with pytest.raises(InvalidPath):
        resolve_path(new_sheet(), "misc.bank.gold")


def test_resolve_does_not_create_intermediates():
    sheet = new_sheet()
    with pytest.raises(InvalidPath):
        resolve_path(sheet, "spells.cantrips.light")
    assert "spells" not in sheet


def test_resolve_through_scalar_raises():
    with pytest.raises(InvalidPath):
        resolve_path(new_sheet(), "level.value")


def test_resolve_through_none_raises():
    with pytest.raises(InvalidPath):
        resolve_path({"features": None}, "features.rage")


def test_resolve_list_index():
    doc = {"equipment": [{"name": "rope"}, {"name": "torch"}]}
    parent, key = resolve_path(doc, "equipment.1.name")
    assert parent is doc["equipment"][1]
    assert key == "name"

    parent, key = resolve_path(doc, "equipment.0")
    assert parent is doc["equipment"]
    assert key == 0
    assert has_key(parent, key)
    assert not has_key(parent, 5)


def test_resolve_list_with_name_segment_raises():
    with pytest.raises(InvalidPath):
        resolve_path({"equipment": ["rope"]}, "equipment.rope")


@pytest.mark.parametrize("path", ["", "misc..gold", ".misc", "misc."])
def test_resolve_malformed_paths(path):
    with pytest.raises(InvalidPath):
        resolve_path(new_sheet(), path)
