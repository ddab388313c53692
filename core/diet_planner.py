"""
core/diet_planner.py
────────────────────────────────────────────────────────────────────────
Multi-day plans.  Daily kcal is computed once from the profile; every day
is then composed independently, so day N never depends on day N-1.

Persisting the result is the caller's job (see `services.store`).
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List

from core.day_planner import DayPlanComposer
from core.energy_calc import EnergyRequirementCalculator
from core.errors import MissingProfileError, ValidationError
from core.models.plan import DayPlan
from core.models.profile import UserProfile

_LOG = logging.getLogger(__name__)


class MultiDayPlanner:
    def __init__(
        self,
        composer: DayPlanComposer,
        calc: EnergyRequirementCalculator | None = None,
    ) -> None:
        self._composer = composer
        self._calc = calc or EnergyRequirementCalculator()

    def plan(
        self,
        user_id: str,
        days: int,
        start_date: date,
        profile: UserProfile | None,
    ) -> List[DayPlan]:
        if profile is None:
            raise MissingProfileError(user_id)
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise ValidationError("days", f"must be an integer >= 1, got {days!r}")

        daily = self._calc.calculate(profile).total_calories_needed
        _LOG.debug("user %s: %d kcal/day for %d day(s) from %s", user_id, daily, days, start_date)

        return [
            self._composer.compose_day(daily, profile, start_date + timedelta(days=i))
            for i in range(days)
        ]
