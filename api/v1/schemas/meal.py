from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field

from core.models.meal import MealSlot, MealTemplate


class NutritionOut(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


class MealOut(BaseModel):
    name: str
    meal_type: MealSlot
    ingredients: List[str]
    nutrition: NutritionOut
    prep_time: int
    instructions: List[str]

    @classmethod
    def from_template(cls, meal: MealTemplate) -> "MealOut":
        return cls.model_validate(meal.to_dict())


class MealSuggestIn(BaseModel):
    meal_type: MealSlot
    calories: float = Field(..., ge=0)
    dietary_restrictions: List[str] = []
    allergies: List[str] = []
