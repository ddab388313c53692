"""
End-to-end (no store) – compose single days from the fixture catalogue.
"""
from __future__ import annotations

import dataclasses
from datetime import date

from core.day_planner import SLOT_SHARES, slot_budgets
from core.meal_selector import FALLBACK_NAME
from core.models.meal import SLOT_ORDER, MealSlot
from conftest import FEMALE_65KG, MALE_70KG

DAY = date(2025, 1, 6)


# ── budgets ──────────────────────────────────────────────────────────
def test_slot_shares_sum_to_one():
    assert abs(sum(SLOT_SHARES.values()) - 1.0) < 1e-12


def test_slot_budgets():
    assert slot_budgets(2000) == {
        MealSlot.breakfast: 500,
        MealSlot.lunch: 700,
        MealSlot.dinner: 600,
        MealSlot.snack: 200,
    }
    # 0.25 × 2627 = 656.75, 0.35 × 2627 = 919.45, 0.30 × 2627 = 788.1, 0.10 × 2627 = 262.7
    assert list(slot_budgets(2627).values()) == [657, 919, 788, 263]


def test_slot_budgets_sum_within_rounding_slack():
    for kcal in range(0, 6000, 7):
        assert abs(sum(slot_budgets(kcal).values()) - kcal) <= 3


# ── compose_day ──────────────────────────────────────────────────────
def test_compose_day_picks_closest_per_slot(composer):
    plan = composer.compose_day(2000, MALE_70KG, DAY)

    assert plan.date == DAY
    assert [m.name for m in plan.meals] == ["Oats", "Bean Bowl", "Salmon Potatoes", "Yogurt Honey"]
    assert [m.slot for m in plan.meals] == list(SLOT_ORDER)
    assert plan.total_nutrition.calories == 1900
    assert plan.total_nutrition.protein == 94
    assert plan.total_nutrition.fiber == 31
    assert plan.notes == ()


def test_total_is_sum_of_meals(composer):
    plan = composer.compose_day(2627, FEMALE_65KG, DAY)
    for field in ("calories", "protein", "carbs", "fat", "fiber"):
        expected = sum(getattr(m.nutrition, field) for m in plan.meals)
        assert getattr(plan.total_nutrition, field) == expected


def test_compose_day_respects_restrictions(composer):
    plan = composer.compose_day(2000, FEMALE_65KG, DAY)     # vegan
    assert [m.name for m in plan.meals] == ["Soy Oats", "Bean Bowl", "Tofu Eggplant", "Apple"]


def test_over_restrictive_slot_falls_back(composer):
    p = dataclasses.replace(MALE_70KG, allergies=frozenset({"rice"}))
    plan = composer.compose_day(2000, p, DAY)

    lunch = plan.meals[1]
    assert lunch.name == FALLBACK_NAME
    assert lunch.nutrition.calories == 700
    assert plan.total_nutrition.calories == 400 + 700 + 650 + 150


def test_compose_day_is_idempotent(composer):
    first = composer.compose_day(2345, FEMALE_65KG, DAY)
    second = composer.compose_day(2345, FEMALE_65KG, DAY)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_low_intake_day_gets_notes(composer):
    plan = composer.compose_day(800, MALE_70KG, DAY)
    # 200 / 280 / 240 / 80 → Egg Toast, Chicken Rice, Tofu Eggplant, Apple = 1500 kcal
    assert plan.total_nutrition.calories == 1500
    assert len(plan.notes) == 1          # fiber 2 + 4 + 9 + 4 = 19 g
