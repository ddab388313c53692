# api/v1/meals.py
from __future__ import annotations
from fastapi import APIRouter, Depends, status

from core.meal_selector import MealSelector
from services.planner import get_selector
from api.v1.schemas import MealOut, MealSuggestIn

router = APIRouter()


@router.post(
    "/suggest",
    response_model=MealOut,
    status_code=status.HTTP_200_OK,
    summary="Closest catalog meal for one slot and calorie budget",
)
async def suggest_meal(
    body: MealSuggestIn,
    selector: MealSelector = Depends(get_selector),
) -> MealOut:
    """
    Falls back to a placeholder "Custom meal" carrying exactly the requested
    calories when restrictions/allergies rule out every catalog meal.
    """
    meal = selector.suggest(
        body.meal_type, body.calories, body.dietary_restrictions, body.allergies
    )
    return MealOut.from_template(meal)
