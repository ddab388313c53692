from __future__ import annotations

import json

import pytest

from core.catalog import MealCatalog
from core.models.meal import SLOT_ORDER, MealSlot
from conftest import FIXTURE_MEALS


def test_templates_for_slot_keeps_declaration_order(catalog):
    names = [m.name for m in catalog.templates_for_slot("breakfast")]
    assert names == ["Egg Toast", "Oats", "Soy Oats"]
    assert [m.name for m in catalog.templates_for_slot(MealSlot.snack)] == ["Yogurt Honey", "Apple"]


def test_unknown_slot_rejected(catalog):
    with pytest.raises(ValueError):
        catalog.templates_for_slot("brunch")


def test_missing_slot_is_empty():
    only_snacks = MealCatalog(m for m in FIXTURE_MEALS if m.slot is MealSlot.snack)
    assert only_snacks.templates_for_slot("dinner") == []
    assert only_snacks.slots() == [MealSlot.snack]


def test_empty_catalog():
    empty = MealCatalog([])
    assert len(empty) == 0
    assert empty.templates_for_slot("lunch") == []


def test_default_catalog_covers_every_slot():
    default = MealCatalog.default()
    assert default.slots() == list(SLOT_ORDER)
    for slot in SLOT_ORDER:
        for meal in default.templates_for_slot(slot):
            assert meal.slot is slot
            assert meal.nutrition.calories > 0
            assert meal.prep_time >= 0


def test_from_json_roundtrip(tmp_path, catalog):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([m.to_dict() for m in catalog]), encoding="utf-8")

    loaded = MealCatalog.from_json(path)
    assert list(loaded) == list(catalog)


def test_from_json_rejects_non_list(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"name": "Oats"}), encoding="utf-8")
    with pytest.raises(ValueError):
        MealCatalog.from_json(path)


def test_from_json_rejects_malformed_template(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"meal_type": "lunch"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        MealCatalog.from_json(path)


@pytest.mark.parametrize(
    "entry",
    [
        "Oats",
        ["breakfast", "Oats"],
        {"name": "Oats", "meal_type": "breakfast", "nutrition": {"calories": -10}},
        {"name": "Oats", "meal_type": "breakfast", "nutrition": {"protein": "lots"}},
        {"name": "Oats", "meal_type": "breakfast", "nutrition": [400]},
        {"name": "Oats", "meal_type": "breakfast", "prep_time": -5},
    ],
)
def test_from_json_rejects_invalid_entries(tmp_path, entry):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([entry]), encoding="utf-8")
    with pytest.raises(ValueError):
        MealCatalog.from_json(path)
