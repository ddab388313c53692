"""
core/meal_selector.py
────────────────────────────────────────────────────────────────────────
Per-slot meal selection.

Responsibilities
----------------
1.   `filter_candidates()` – drop catalog meals that conflict with the
     user's allergies or dietary restriction classes.
2.   `select_closest()` – pick the candidate whose calories are nearest to
     the slot budget, or synthesise a placeholder meal when nothing is left.
3.   `suggest()` – both steps for a single slot.

Allergy matching is a case-insensitive *substring* search over ingredient
names: allergy "milk" excludes "milk powder" but also "coconut milk", and
"egg" excludes "eggplant".
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from core.catalog import MealCatalog
from core.models.meal import MealSlot, MealTemplate, NutritionInfo, round_half_up
from core.restrictions import RestrictionVocabulary

_LOG = logging.getLogger(__name__)

FALLBACK_NAME = "Custom meal"
FALLBACK_FIBER_G = 25


class MealSelector:
    def __init__(
        self,
        catalog: MealCatalog,
        vocabulary: RestrictionVocabulary | None = None,
    ) -> None:
        self._catalog = catalog
        self._vocab = vocabulary or RestrictionVocabulary()

    # ─────────────────────────────── filter ───────────────────────── #
    def filter_candidates(
        self,
        slot: MealSlot | str,
        restrictions: Iterable[str] = (),
        allergies: Iterable[str] = (),
    ) -> List[MealTemplate]:
        df = self._catalog.frame(slot)

        tokens = [a.strip().lower() for a in allergies if a and a.strip()]
        if tokens and not df.empty:
            hit = df["ingredients"].apply(_has_allergen, args=(tokens,)).astype(bool)
            df = df[~hit]

        excluded = self._vocab.excluded_ingredients(restrictions)
        if excluded and not df.empty:
            hit = df["ingredients"].apply(_has_excluded, args=(excluded,)).astype(bool)
            df = df[~hit]

        return df["template"].tolist()

    # ──────────────────────────── selection ───────────────────────── #
    def select_closest(
        self, candidates: Sequence[MealTemplate], target_calories: float
    ) -> MealTemplate:
        if not candidates:
            _LOG.warning("no candidates left – using fallback meal (%s kcal)", target_calories)
            return fallback_meal(target_calories)

        best = candidates[0]
        best_diff = abs(best.nutrition.calories - target_calories)
        for meal in candidates[1:]:
            diff = abs(meal.nutrition.calories - target_calories)
            if diff < best_diff:          # first minimiser wins ties
                best, best_diff = meal, diff
        return best

    # ──────────────────────────── wrapper ─────────────────────────── #
    def suggest(
        self,
        slot: MealSlot | str,
        target_calories: float,
        restrictions: Iterable[str] = (),
        allergies: Iterable[str] = (),
    ) -> MealTemplate:
        candidates = self.filter_candidates(slot, restrictions, allergies)
        meal = self.select_closest(candidates, target_calories)
        _LOG.debug(
            "%s: %d candidates, target=%s → %s",
            MealSlot(slot).value, len(candidates), target_calories, meal.name,
        )
        return meal


# ──────────────────────────────── Helpers ────────────────────────────────

def fallback_meal(target_calories: float) -> MealTemplate:
    """Placeholder used when filtering leaves a slot empty."""
    t = target_calories
    return MealTemplate(
        name=FALLBACK_NAME,
        slot=MealSlot.breakfast,
        ingredients=("Prepare a meal yourself that fits your restrictions",),
        nutrition=NutritionInfo(
            calories=t,
            protein=round_half_up(0.15 * t / 4),
            carbs=round_half_up(0.55 * t / 4),
            fat=round_half_up(0.30 * t / 9),
            fiber=FALLBACK_FIBER_G,
        ),
        prep_time=0,
        instructions=("Prepare a meal that matches your nutritional needs",),
    )


def _has_allergen(ingredients: Sequence[str], tokens: List[str]) -> bool:
    return any(tok in ing.lower() for ing in ingredients for tok in tokens)


def _has_excluded(ingredients: Sequence[str], excluded: frozenset[str]) -> bool:
    return any(ing.strip().casefold() in excluded for ing in ingredients)

