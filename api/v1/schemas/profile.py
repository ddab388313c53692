from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field

from core.models.profile import ActivityLevel, Gender, UserProfile


class Biometrics(BaseModel):
    age: int = Field(..., gt=0, examples=[30])
    gender: Gender = Field(..., description="male or female")
    weight: float = Field(..., gt=0, description="kg")
    height: float = Field(..., gt=0, description="cm")
    activity_level: ActivityLevel

    def to_profile(self) -> UserProfile:
        return UserProfile.from_dict(self.model_dump(mode="json"))


class ProfileIn(Biometrics):
    dietary_restrictions: List[str] = Field([], examples=[["vegetarian"]])
    health_goals: List[str] = []
    allergies: List[str] = Field([], examples=[["peanut"]])


class ProfileOut(ProfileIn):
    user_id: str

    @classmethod
    def from_profile(cls, user_id: str, profile: UserProfile) -> "ProfileOut":
        return cls(user_id=user_id, **profile.to_dict())


class EnergyOut(BaseModel):
    bmr: int
    total_calories_needed: int
