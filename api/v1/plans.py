# api/v1/plans.py
from __future__ import annotations
import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from config import settings
from core.diet_planner import MultiDayPlanner
from core.errors import MissingProfileError, ValidationError
from services.planner import get_planner
from services.store import PlanStore, ProfileStore, get_plan_store, get_profile_store
from api.v1.schemas import DayPlanOut, PlanRequest, PlanResponse

router = APIRouter()
_LOG = logging.getLogger(__name__)


@router.post("", response_model=PlanResponse, status_code=status.HTTP_200_OK)
async def generate_plan(
    body: PlanRequest,
    profiles: ProfileStore = Depends(get_profile_store),
    plans: PlanStore = Depends(get_plan_store),
    planner: MultiDayPlanner = Depends(get_planner),
) -> PlanResponse:
    days = body.days or settings.default_plan_days
    if days > settings.max_plan_days:
        raise HTTPException(422, f"days must be <= {settings.max_plan_days}")
    start = body.start_date or date.today()

    # 1) Load profile
    profile = await profiles.get(body.user_id)

    # 2) Run the planner
    try:
        result = planner.plan(body.user_id, days, start, profile)
    except MissingProfileError:
        raise HTTPException(404, "set your preferences first") from None
    except ValidationError as exc:
        raise HTTPException(422, str(exc)) from None

    # 3) Persist + return
    await plans.put(body.user_id, result)
    _LOG.info("plan generated for user %s (%d days from %s)", body.user_id, days, start)
    return PlanResponse(
        user_id=body.user_id,
        plans=[DayPlanOut.from_day(d) for d in result],
    )


@router.get("/{user_id}", response_model=PlanResponse)
async def fetch_plan(
    user_id: str,
    plans: PlanStore = Depends(get_plan_store),
) -> PlanResponse:
    stored = await plans.get(user_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="No plan found for this user")
    return PlanResponse(user_id=user_id, plans=[DayPlanOut.from_day(d) for d in stored])
