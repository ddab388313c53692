# api/v1/schemas/plan.py
from __future__ import annotations
import datetime as dt
from typing import List

from pydantic import BaseModel, Field

from core.models.plan import DayPlan
from .meal import MealOut, NutritionOut


class PlanRequest(BaseModel):
    user_id: str
    days: int | None = Field(None, ge=1, description="defaults to DEFAULT_PLAN_DAYS")
    start_date: dt.date | None = Field(None, description="defaults to today")


class DayPlanOut(BaseModel):
    date: dt.date
    meals: List[MealOut]          # breakfast, lunch, dinner, snack
    total_nutrition: NutritionOut
    notes: List[str]

    @classmethod
    def from_day(cls, day: DayPlan) -> "DayPlanOut":
        return cls.model_validate(day.to_dict())


class PlanResponse(BaseModel):
    user_id: str
    plans: List[DayPlanOut]
