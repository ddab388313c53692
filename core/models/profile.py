from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    very_active = "very_active"
    extra_active = "extra_active"


# ──────────────────────────────────────────────────────────────────────
#  Profile dataclass
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class UserProfile:
    # biometrics – left loosely typed so stored records with gaps still
    # load; EnergyRequirementCalculator does the validation
    age: Any
    gender: Any            # "male" | "female"
    weight: Any            # kg
    height: Any            # cm
    activity_level: Any    # see ActivityLevel
    # preferences
    dietary_restrictions: frozenset[str] = field(default_factory=frozenset)
    health_goals: frozenset[str] = field(default_factory=frozenset)   # advisory only
    allergies: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserProfile":
        return cls(
            age=data.get("age"),
            gender=_enum_value(data.get("gender")),
            weight=data.get("weight"),
            height=data.get("height"),
            activity_level=_enum_value(data.get("activity_level")),
            dietary_restrictions=_tags(data.get("dietary_restrictions")),
            health_goals=_tags(data.get("health_goals")),
            allergies=_tags(data.get("allergies")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "age": self.age,
            "gender": _enum_value(self.gender),
            "weight": self.weight,
            "height": self.height,
            "activity_level": _enum_value(self.activity_level),
            "dietary_restrictions": sorted(self.dietary_restrictions),
            "health_goals": sorted(self.health_goals),
            "allergies": sorted(self.allergies),
        }


def _enum_value(v: Any) -> Any:
    return v.value if isinstance(v, Enum) else v


def _tags(values: Iterable[str] | None) -> frozenset[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(str(v) for v in values)
