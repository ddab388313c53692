"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
Read-only catalog of meal templates.

The catalog keeps the templates in declaration order and indexes them in a
pandas DataFrame (one row per template) so the selector can filter with
boolean masks.  Nothing mutates either structure after construction, so a
single instance is safely shared between requests.

Sources
-------
*   `MealCatalog.default()`      – built-in English catalog below
*   `MealCatalog.from_json(p)`   – JSON list with the same schema
*   `MealCatalog(templates)`     – any iterable of `MealTemplate`
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List

import pandas as pd

from core.models.meal import MealSlot, MealTemplate

_LOG = logging.getLogger(__name__)

# ────────────────────────────────────────────────────────────────────
_DEFAULT_MEALS: List[dict[str, Any]] = [
    # breakfast
    {
        "name": "Oatmeal with Berries",
        "meal_type": "breakfast",
        "ingredients": ["rolled oats", "milk", "blueberries", "strawberries", "honey"],
        "nutrition": {"calories": 350, "protein": 12, "carbs": 65, "fat": 8, "fiber": 8},
        "prep_time": 10,
        "instructions": [
            "Simmer the oats in the milk",
            "Top with the fresh berries",
            "Drizzle with honey",
        ],
    },
    {
        "name": "Whole Wheat Toast with Egg",
        "meal_type": "breakfast",
        "ingredients": ["whole wheat bread", "egg", "avocado", "tomato"],
        "nutrition": {"calories": 400, "protein": 18, "carbs": 35, "fat": 22, "fiber": 6},
        "prep_time": 15,
        "instructions": [
            "Fry the egg",
            "Toast the bread",
            "Slice the avocado and tomato",
            "Assemble on a plate",
        ],
    },
    {
        "name": "Tofu Scramble with Spinach",
        "meal_type": "breakfast",
        "ingredients": ["firm tofu", "spinach", "onion", "turmeric", "olive oil"],
        "nutrition": {"calories": 320, "protein": 20, "carbs": 12, "fat": 20, "fiber": 5},
        "prep_time": 15,
        "instructions": [
            "Soften the onion in olive oil",
            "Crumble in the tofu with the turmeric",
            "Fold in the spinach until wilted",
        ],
    },
    # lunch
    {
        "name": "Chicken Breast Salad",
        "meal_type": "lunch",
        "ingredients": ["chicken breast", "mixed greens", "tomato", "cucumber", "olive oil"],
        "nutrition": {"calories": 450, "protein": 35, "carbs": 15, "fat": 25, "fiber": 5},
        "prep_time": 20,
        "instructions": [
            "Grill the chicken breast",
            "Prepare the vegetables",
            "Whisk the dressing",
            "Toss everything into a salad",
        ],
    },
    {
        "name": "Salmon with Brown Rice",
        "meal_type": "lunch",
        "ingredients": ["salmon", "brown rice", "broccoli", "carrot"],
        "nutrition": {"calories": 500, "protein": 30, "carbs": 45, "fat": 18, "fiber": 6},
        "prep_time": 25,
        "instructions": [
            "Cook the brown rice",
            "Roast the salmon",
            "Steam the vegetables",
            "Plate together",
        ],
    },
    {
        "name": "Chickpea Quinoa Bowl",
        "meal_type": "lunch",
        "ingredients": ["chickpeas", "quinoa", "cucumber", "tomato", "lemon juice", "olive oil"],
        "nutrition": {"calories": 520, "protein": 19, "carbs": 70, "fat": 16, "fiber": 12},
        "prep_time": 20,
        "instructions": [
            "Cook the quinoa and let it cool",
            "Chop the cucumber and tomato",
            "Combine with the chickpeas",
            "Dress with lemon juice and olive oil",
        ],
    },
    # dinner
    {
        "name": "Vegetable Stir-Fried Noodles",
        "meal_type": "dinner",
        "ingredients": ["whole wheat noodles", "bell pepper", "onion", "tofu", "soy sauce"],
        "nutrition": {"calories": 420, "protein": 16, "carbs": 65, "fat": 12, "fiber": 8},
        "prep_time": 20,
        "instructions": [
            "Boil the noodles",
            "Stir-fry the vegetables and tofu",
            "Season and toss with the noodles",
            "Serve",
        ],
    },
    {
        "name": "Lentil Curry with Brown Rice",
        "meal_type": "dinner",
        "ingredients": ["red lentils", "brown rice", "coconut milk", "onion", "tomato", "curry powder"],
        "nutrition": {"calories": 610, "protein": 24, "carbs": 92, "fat": 15, "fiber": 16},
        "prep_time": 35,
        "instructions": [
            "Cook the brown rice",
            "Sweat the onion with the curry powder",
            "Add lentils, tomato and coconut milk and simmer until soft",
            "Serve over the rice",
        ],
    },
    # snack
    {
        "name": "Nut Yogurt",
        "meal_type": "snack",
        "ingredients": ["greek yogurt", "mixed nuts", "honey"],
        "nutrition": {"calories": 200, "protein": 10, "carbs": 15, "fat": 12, "fiber": 3},
        "prep_time": 5,
        "instructions": ["Stir the nuts into the yogurt", "Drizzle with a little honey"],
    },
    {
        "name": "Apple with Peanut Butter",
        "meal_type": "snack",
        "ingredients": ["apple", "peanut butter"],
        "nutrition": {"calories": 190, "protein": 4, "carbs": 25, "fat": 8, "fiber": 4},
        "prep_time": 5,
        "instructions": ["Slice the apple", "Serve with the peanut butter"],
    },
]


class MealCatalog:
    def __init__(self, templates: Iterable[MealTemplate]) -> None:
        self._templates: tuple[MealTemplate, ...] = tuple(templates)
        self._df = pd.DataFrame(
            {
                "name": [t.name for t in self._templates],
                "meal_slot": [t.slot.value for t in self._templates],
                "calories": [t.nutrition.calories for t in self._templates],
                "ingredients": [t.ingredients for t in self._templates],
                "template": list(self._templates),
            },
            columns=["name", "meal_slot", "calories", "ingredients", "template"],
        )
        _LOG.debug("catalog loaded (templates=%d)", len(self._templates))

    # ─────────────────────────────── sources ──────────────────────── #
    @classmethod
    def default(cls) -> "MealCatalog":
        return cls(MealTemplate.from_dict(m) for m in _DEFAULT_MEALS)

    @classmethod
    def from_json(cls, path: str | Path) -> "MealCatalog":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("catalog JSON must contain a list of meal templates")
        try:
            templates = [MealTemplate.from_dict(m) for m in data]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"malformed meal template in {path}: {exc}") from exc
        return cls(templates)

    # ─────────────────────────────── lookup ───────────────────────── #
    def frame(self, slot: MealSlot | str) -> pd.DataFrame:
        """Rows of one slot, index = declaration position."""
        slot = MealSlot(slot)
        return self._df[self._df["meal_slot"] == slot.value]

    def templates_for_slot(self, slot: MealSlot | str) -> list[MealTemplate]:
        return self.frame(slot)["template"].tolist()

    def slots(self) -> list[MealSlot]:
        present = set(self._df["meal_slot"])
        return [s for s in MealSlot if s.value in present]

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[MealTemplate]:
        return iter(self._templates)
