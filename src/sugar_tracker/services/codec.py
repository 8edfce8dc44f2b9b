"""Conversion between domain models and stored rows."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar

from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.domain.models import UserRecord
from sugar_tracker.domain.records import MealPlan, SugarEntry

T = TypeVar("T")

_logger = logging.getLogger(__name__)


def food_to_row(food: FoodItem) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "sugarContent": food.sugar_content,
        "isHealthy": food.is_healthy,
    }


def parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a stored food row into a domain model."""
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        sugar_content=float(row.get("sugarContent", 0.0)),
        is_healthy=bool(row.get("isHealthy", False)),
    )


def entry_to_row(entry: SugarEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "foods": [food_to_row(food) for food in entry.foods],
        "totalSugar": entry.total_sugar,
    }


def parse_entry(row: dict[str, object]) -> SugarEntry:
    """Parse a stored ledger row, keeping its stored total as-is."""
    return SugarEntry(
        id=str(row["id"]),
        date=_parse_timestamp(row["date"]),
        foods=tuple(parse_food(food) for food in row.get("foods", [])),
        total_sugar=float(row.get("totalSugar", 0.0)),
    )


def plan_to_row(plan: MealPlan) -> dict[str, object]:
    return {
        "id": plan.id,
        "name": plan.name,
        "foods": [food_to_row(food) for food in plan.foods],
        "totalSugar": plan.total_sugar,
        "date": plan.date.isoformat(),
    }


def parse_plan(row: dict[str, object]) -> MealPlan:
    """Parse a stored meal plan row."""
    return MealPlan(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        foods=tuple(parse_food(food) for food in row.get("foods", [])),
        total_sugar=float(row.get("totalSugar", 0.0)),
        date=_parse_timestamp(row["date"]),
    )


def user_to_row(user: UserRecord) -> dict[str, object]:
    return {"id": user.id, "username": user.username, "email": user.email}


def parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=str(row["id"]),
        username=str(row.get("username", "")),
        email=str(row.get("email", "")),
    )


def parse_rows(
    rows: object, parser: Callable[[dict[str, object]], T], key: str
) -> list[T]:
    """Parse a stored list, skipping rows that do not match the expected shape."""
    if not isinstance(rows, list):
        _logger.warning("Ignoring non-list value for key=%s", key)
        return []
    parsed: list[T] = []
    for row in rows:
        try:
            parsed.append(parser(row))
        except (AttributeError, KeyError, TypeError, ValueError):
            _logger.warning("Skipping malformed row for key=%s: %r", key, row)
    return parsed


def _parse_timestamp(value: object) -> datetime:
    parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
