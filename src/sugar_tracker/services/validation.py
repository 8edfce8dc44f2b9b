"""Input validation shared by the tracker services."""

import math
from collections.abc import Iterable

from sugar_tracker.domain.errors import InvalidInputError
from sugar_tracker.domain.foods import FoodItem


def require_text(value: str | None, field: str, message: str) -> str:
    """Return the trimmed value, rejecting blank input."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidInputError(message, field=field)
    return cleaned


def require_foods(foods: Iterable[FoodItem], message: str) -> tuple[FoodItem, ...]:
    """Snapshot a food selection, rejecting an empty one."""
    snapshot = tuple(foods)
    if not snapshot:
        raise InvalidInputError(message, field="foods")
    return snapshot


def validate_sugar(value: float) -> float:
    if (
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or not math.isfinite(value)
        or value < 0
    ):
        raise InvalidInputError(
            "Sugar content must be a non-negative number", field="sugar_content"
        )
    return float(value)


def parse_sugar(text: str | None) -> float:
    """Parse user-entered sugar grams."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidInputError("Please fill in all fields", field="sugar_content")
    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidInputError(
            "Sugar content must be a number", field="sugar_content"
        ) from None
    return validate_sugar(value)


def validate_limit(value: float) -> float:
    if (
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise InvalidInputError(
            "Please enter a valid number greater than 0", field="limit"
        )
    return float(value)


def parse_limit(text: str | None) -> float:
    """Parse a user-entered daily limit."""
    try:
        value = float((text or "").strip())
    except ValueError:
        raise InvalidInputError(
            "Please enter a valid number greater than 0", field="limit"
        ) from None
    return validate_limit(value)
