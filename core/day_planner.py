"""
core/day_planner.py
────────────────────────────────────────────────────────────────────────
One day of meals: split the daily kcal across the four slots, pick the
closest catalog meal per slot, sum the nutrition and attach advice.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import reduce
from operator import add
from typing import Dict

from core.meal_selector import MealSelector
from core.models.meal import SLOT_ORDER, MealSlot, NutritionInfo, round_half_up
from core.models.plan import DayPlan
from core.models.profile import UserProfile
from core.nutrition_advisor import NutritionAdvisor

_LOG = logging.getLogger(__name__)

# share of the daily kcal per slot (sums to 1.0)
SLOT_SHARES: Dict[MealSlot, float] = {
    MealSlot.breakfast: 0.25,
    MealSlot.lunch: 0.35,
    MealSlot.dinner: 0.30,
    MealSlot.snack: 0.10,
}


def slot_budgets(daily_calories: float) -> Dict[MealSlot, int]:
    """Each slot is rounded on its own, so the sum may drift from the total by up to 3 kcal."""
    return {slot: round_half_up(SLOT_SHARES[slot] * daily_calories) for slot in SLOT_ORDER}


class DayPlanComposer:
    def __init__(
        self,
        selector: MealSelector,
        advisor: NutritionAdvisor | None = None,
    ) -> None:
        self._selector = selector
        self._advisor = advisor or NutritionAdvisor()

    def compose_day(self, daily_calories: float, profile: UserProfile, day: date) -> DayPlan:
        budgets = slot_budgets(daily_calories)

        meals = []
        for slot in SLOT_ORDER:
            candidates = self._selector.filter_candidates(
                slot, profile.dietary_restrictions, profile.allergies
            )
            meals.append(self._selector.select_closest(candidates, budgets[slot]))

        total = reduce(add, (m.nutrition for m in meals), NutritionInfo.zero())
        notes = self._advisor.advise(total, profile)
        _LOG.debug("%s: %s kcal planned (target %s)", day, total.calories, daily_calories)

        return DayPlan(
            date=day,
            meals=tuple(meals),
            total_nutrition=total,
            notes=tuple(notes),
        )
