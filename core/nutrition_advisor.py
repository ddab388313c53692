from __future__ import annotations

from typing import List

from core.models.meal import NutritionInfo
from core.models.profile import UserProfile

PROTEIN_NOTE = (
    "Consider eating more protein: aim for at least 0.8-1.2 g per kg of body weight."
)
FIBER_NOTE = "Consider eating more dietary fiber: adults need 25-35 g per day."
LOW_CALORIE_NOTE = (
    "Warning: calorie intake is low, make sure you are getting enough nutrients."
)


class NutritionAdvisor:
    """Advisory notes for a day's total nutrition, in a fixed order."""

    MIN_PROTEIN_G_PER_KG = 0.8
    MIN_FIBER_G = 25
    MIN_CALORIES = 1200

    def advise(self, total: NutritionInfo, profile: UserProfile) -> List[str]:
        notes: List[str] = []
        if total.protein / profile.weight < self.MIN_PROTEIN_G_PER_KG:
            notes.append(PROTEIN_NOTE)
        if total.fiber < self.MIN_FIBER_G:
            notes.append(FIBER_NOTE)
        if total.calories < self.MIN_CALORIES:
            notes.append(LOW_CALORIE_NOTE)
        return notes
