"""Shared fixtures: a small catalog and a couple of profiles."""

from __future__ import annotations

import pytest

from core.catalog import MealCatalog
from core.day_planner import DayPlanComposer
from core.meal_selector import MealSelector
from core.models.meal import MealSlot, MealTemplate, NutritionInfo
from core.models.profile import UserProfile
from core.nutrition_advisor import NutritionAdvisor


def _meal(name, slot, ingredients, kcal, protein, carbs, fat, fiber) -> MealTemplate:
    return MealTemplate(
        name=name,
        slot=MealSlot(slot),
        ingredients=tuple(ingredients),
        nutrition=NutritionInfo(kcal, protein, carbs, fat, fiber),
        prep_time=10,
        instructions=("Cook", "Serve"),
    )


# --- catalogue of 9 dummy meals, two or three per slot ----------------
FIXTURE_MEALS = [
    _meal("Egg Toast", "breakfast", ["egg", "toast"], 300, 20, 20, 15, 2),
    _meal("Oats", "breakfast", ["oats", "milk"], 400, 12, 60, 8, 8),
    _meal("Soy Oats", "breakfast", ["oats", "soy milk"], 400, 14, 58, 9, 7),
    _meal("Chicken Rice", "lunch", ["chicken breast", "rice"], 600, 45, 50, 20, 4),
    _meal("Bean Bowl", "lunch", ["black beans", "rice"], 700, 30, 100, 15, 18),
    _meal("Salmon Potatoes", "dinner", ["salmon", "potato"], 650, 40, 40, 30, 5),
    _meal("Tofu Eggplant", "dinner", ["tofu", "eggplant"], 500, 25, 45, 20, 9),
    _meal("Yogurt Honey", "snack", ["greek yogurt", "honey"], 150, 12, 15, 4, 0),
    _meal("Apple", "snack", ["apple"], 100, 0.5, 25, 0.3, 4),
]

MALE_70KG = UserProfile(
    age=30,
    gender="male",
    weight=70,
    height=175,
    activity_level="moderate",
)

FEMALE_65KG = UserProfile(
    age=30,
    gender="female",
    weight=65,
    height=165,
    activity_level="moderate",
    dietary_restrictions=frozenset({"vegan"}),
    health_goals=frozenset({"lose weight"}),
)


@pytest.fixture
def catalog() -> MealCatalog:
    return MealCatalog(FIXTURE_MEALS)


@pytest.fixture
def selector(catalog) -> MealSelector:
    return MealSelector(catalog)


@pytest.fixture
def composer(selector) -> DayPlanComposer:
    return DayPlanComposer(selector, NutritionAdvisor())
