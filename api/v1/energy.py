# api/v1/energy.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.energy_calc import EnergyRequirementCalculator
from core.errors import ValidationError
from services.planner import get_calculator
from api.v1.schemas import Biometrics, EnergyOut

router = APIRouter()


@router.post(
    "",
    response_model=EnergyOut,
    status_code=status.HTTP_200_OK,
    summary="BMR and daily calorie need for a set of biometrics",
)
async def calculate_energy(
    body: Biometrics,
    calc: EnergyRequirementCalculator = Depends(get_calculator),
) -> EnergyOut:
    try:
        req = calc.calculate(body.to_profile())
    except ValidationError as exc:
        raise HTTPException(422, str(exc)) from None
    return EnergyOut(**req.to_dict())
