"""Re-export individual schema modules for easy imports."""

from .profile import Biometrics, EnergyOut, ProfileIn, ProfileOut
from .meal import MealOut, MealSuggestIn, NutritionOut
from .plan import DayPlanOut, PlanRequest, PlanResponse

__all__ = [
    "Biometrics",
    "EnergyOut",
    "ProfileIn",
    "ProfileOut",
    "MealOut",
    "MealSuggestIn",
    "NutritionOut",
    "DayPlanOut",
    "PlanRequest",
    "PlanResponse",
]
