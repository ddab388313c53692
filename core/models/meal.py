from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


class MealSlot(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


# fixed order a day is composed in
SLOT_ORDER: tuple[MealSlot, ...] = (
    MealSlot.breakfast,
    MealSlot.lunch,
    MealSlot.dinner,
    MealSlot.snack,
)


@dataclass(frozen=True)
class NutritionInfo:
    calories: float = 0
    protein: float = 0   # g
    carbs: float = 0     # g
    fat: float = 0       # g
    fiber: float = 0     # g

    @classmethod
    def zero(cls) -> "NutritionInfo":
        return cls()

    def __add__(self, other: "NutritionInfo") -> "NutritionInfo":
        if not isinstance(other, NutritionInfo):
            return NotImplemented
        return NutritionInfo(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
        )

    def to_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NutritionInfo":
        if not isinstance(data, Mapping):
            raise ValueError(f"nutrition must be an object, got {data!r}")
        values = {f.name: data.get(f.name, 0) for f in fields(cls)}
        for name, value in values.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"nutrition.{name} must be a number, got {value!r}")
            if not value >= 0:
                raise ValueError(f"nutrition.{name} must be >= 0, got {value!r}")
        return cls(**values)


@dataclass(frozen=True)
class MealTemplate:
    name: str
    slot: MealSlot
    ingredients: tuple[str, ...]
    nutrition: NutritionInfo
    prep_time: int = 0                       # minutes
    instructions: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "meal_type": self.slot.value,
            "ingredients": list(self.ingredients),
            "nutrition": self.nutrition.to_dict(),
            "prep_time": self.prep_time,
            "instructions": list(self.instructions),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MealTemplate":
        """Accepts both `meal_type` and `slot` for the slot key."""
        if not isinstance(data, Mapping):
            raise ValueError(f"meal template must be an object, got {data!r}")
        prep = data.get("prep_time", 0)
        if prep < 0:
            raise ValueError(f"{data.get('name')!r}: prep_time must be >= 0")
        return cls(
            name=data["name"],
            slot=MealSlot(data.get("meal_type", data.get("slot"))),
            ingredients=tuple(data.get("ingredients", ())),
            nutrition=NutritionInfo.from_dict(data.get("nutrition", {})),
            prep_time=prep,
            instructions=tuple(data.get("instructions", ())),
        )
