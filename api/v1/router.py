# api/v1/router.py
from fastapi import APIRouter

from . import energy, meals, plans, profiles

api_router = APIRouter()

api_router.include_router(energy.router, prefix="/energy", tags=["Energy"])
api_router.include_router(meals.router, prefix="/meals", tags=["Meals"])
api_router.include_router(plans.router, prefix="/plans", tags=["Plans"])

# profiles live *under* the user resource
api_router.include_router(
    profiles.router,
    prefix="/users",          # results in /users/{user_id}/profile
    tags=["Profiles"],
)
