"""
core/energy_calc.py
────────────────────────────────────────────────────────────────────────
Daily energy requirement of a user:

1. BMR  (revised Harris–Benedict, 1984)
2. TDEE (BMR × activity multiplier)

Both values are rounded half-up to whole kcal on the way out.  The TDEE is
computed from the *unrounded* BMR.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any

from core.errors import ValidationError
from core.models.meal import round_half_up
from core.models.profile import ActivityLevel, Gender, UserProfile

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyRequirement:
    bmr: int
    total_calories_needed: int

    def to_dict(self) -> dict[str, int]:
        return {"bmr": self.bmr, "total_calories_needed": self.total_calories_needed}


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class EnergyRequirementCalculator:
    """Source-of-truth for BMR and daily kcal."""

    ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
        ActivityLevel.sedentary: 1.2,
        ActivityLevel.light: 1.375,
        ActivityLevel.moderate: 1.55,
        ActivityLevel.very_active: 1.725,
        ActivityLevel.extra_active: 1.9,
    }

    # (constant, per-kg, per-cm, per-year)
    _HARRIS_BENEDICT: dict[Gender, tuple[float, float, float, float]] = {
        Gender.male: (88.362, 13.397, 4.799, 5.677),
        Gender.female: (447.593, 9.247, 3.098, 4.330),
    }

    # --------------- public entrypoint --------------------------------
    def calculate(self, p: UserProfile) -> EnergyRequirement:
        bmr = self.bmr(p)
        tdee = self.tdee(p)
        _LOG.debug("bmr=%.3f tdee=%.3f", bmr, tdee)
        if not (math.isfinite(bmr) and math.isfinite(tdee)):
            raise ValidationError("profile", "biometrics give a non-finite energy requirement")
        return EnergyRequirement(
            bmr=round_half_up(bmr),
            total_calories_needed=round_half_up(tdee),
        )

    # --------------- BMR / TDEE -------------------------------------
    def bmr(self, p: UserProfile) -> float:
        gender, weight, height, age = _validated_biometrics(p)
        base, per_kg, per_cm, per_year = self._HARRIS_BENEDICT[gender]
        terms = {"weight": per_kg * weight, "height": per_cm * height, "age": per_year * age}
        for name, term in terms.items():
            if not math.isfinite(term):
                raise ValidationError(name, "is out of range")
        return base + terms["weight"] + terms["height"] - terms["age"]

    def tdee(self, p: UserProfile) -> float:
        level = _choice(ActivityLevel, p.activity_level, "activity_level")
        return self.bmr(p) * self.ACTIVITY_MULTIPLIERS[level]


# ──────────────────────────────────────────────────────────────────────
#  Validation helpers
# ──────────────────────────────────────────────────────────────────────
def _validated_biometrics(p: UserProfile) -> tuple[Gender, float, float, float]:
    # activity level is checked up front as well, so a bad profile never
    # yields a BMR it could not also turn into a TDEE
    _choice(ActivityLevel, p.activity_level, "activity_level")
    gender = _choice(Gender, p.gender, "gender")
    return (
        gender,
        _positive(p.weight, "weight"),
        _positive(p.height, "height"),
        _whole_years(p.age),
    )


def _positive(value: Any, name: str) -> float:
    if value is None:
        raise ValidationError(name, "is required")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(name, f"must be a number, got {value!r}")
    if not value > 0:
        raise ValidationError(name, f"must be > 0, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise ValidationError(name, "is out of range") from None
    if not math.isfinite(as_float):
        raise ValidationError(name, f"must be finite, got {value!r}")
    return as_float


def _whole_years(value: Any) -> float:
    age = _positive(value, "age")
    if not age.is_integer():
        raise ValidationError("age", f"must be a whole number of years, got {value!r}")
    return age


def _choice(enum_cls: type, value: Any, name: str) -> Any:
    if value is None:
        raise ValidationError(name, "is required")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(name, f"{value!r} is not one of: {allowed}") from None
