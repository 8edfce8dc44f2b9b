"""Domain models for logged intake and meal plans."""

from dataclasses import dataclass
from datetime import datetime

from sugar_tracker.domain.foods import FoodItem


@dataclass(frozen=True)
class SugarEntry:
    """Immutable snapshot of one submitted daily intake."""

    id: str
    date: datetime
    foods: tuple[FoodItem, ...]
    total_sugar: float


@dataclass(frozen=True)
class MealPlan:
    """Named, reusable bundle of foods."""

    id: str
    name: str
    foods: tuple[FoodItem, ...]
    total_sugar: float
    date: datetime
