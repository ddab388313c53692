from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

from core.models.meal import MealTemplate, NutritionInfo


@dataclass(frozen=True)
class DayPlan:
    date: date
    meals: tuple[MealTemplate, ...]          # breakfast → lunch → dinner → snack
    total_nutrition: NutritionInfo
    notes: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "meals": [m.to_dict() for m in self.meals],
            "total_nutrition": self.total_nutrition.to_dict(),
            "notes": list(self.notes),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DayPlan":
        return cls(
            date=date.fromisoformat(data["date"]),
            meals=tuple(MealTemplate.from_dict(m) for m in data["meals"]),
            total_nutrition=NutritionInfo.from_dict(data["total_nutrition"]),
            notes=tuple(data.get("notes", ())),
        )
