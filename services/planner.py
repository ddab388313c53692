"""
services/planner.py
────────────────────────────────────────────────────────────────────────
Builds the shared planning objects from settings once per process.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from config import settings
from core.catalog import MealCatalog
from core.day_planner import DayPlanComposer
from core.diet_planner import MultiDayPlanner
from core.energy_calc import EnergyRequirementCalculator
from core.meal_selector import MealSelector
from core.nutrition_advisor import NutritionAdvisor
from core.restrictions import RestrictionVocabulary

_LOG = logging.getLogger(__name__)


def load_catalog(path: str | None = None) -> MealCatalog:
    path = path or settings.catalog_path
    if path:
        _LOG.info("loading meal catalog from %s", path)
        return MealCatalog.from_json(path)
    return MealCatalog.default()


def build_planner(catalog: MealCatalog) -> MultiDayPlanner:
    selector = MealSelector(catalog, RestrictionVocabulary(settings.restriction_aliases))
    composer = DayPlanComposer(selector, NutritionAdvisor())
    return MultiDayPlanner(composer, EnergyRequirementCalculator())


@lru_cache
def get_catalog() -> MealCatalog:
    return load_catalog()


@lru_cache
def get_selector() -> MealSelector:
    return MealSelector(get_catalog(), RestrictionVocabulary(settings.restriction_aliases))


@lru_cache
def get_planner() -> MultiDayPlanner:
    return build_planner(get_catalog())


@lru_cache
def get_calculator() -> EnergyRequirementCalculator:
    return EnergyRequirementCalculator()
