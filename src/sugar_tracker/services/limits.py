"""Daily limit and sugar aggregation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.domain.limits import (
    DEFAULT_DAILY_LIMIT,
    AdditionCheck,
    SugarStatus,
    SugarSummary,
)
from sugar_tracker.domain.models import MutationResult
from sugar_tracker.services.storage import LIMIT_KEY, PersistentStore
from sugar_tracker.services.validation import validate_limit

UNDER_LIMIT_RATIO = 0.5

_logger = logging.getLogger(__name__)


def total_sugar(foods: Iterable[FoodItem]) -> float:
    """Return the summed sugar content of the foods."""
    return float(sum(food.sugar_content for food in foods))


def percentage(total: float, limit: float) -> float:
    """Return the share of the limit used, clamped to [0, 100]."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    return max(0.0, min(total / limit * 100, 100.0))


def classify(total: float, limit: float) -> SugarStatus:
    """Place a total in the under/good/over band for the limit."""
    if total > limit:
        return SugarStatus.OVER
    if total < limit * UNDER_LIMIT_RATIO:
        return SugarStatus.UNDER
    return SugarStatus.GOOD


def would_exceed(current_total: float, candidate_sugar: float, limit: float) -> bool:
    return current_total + candidate_sugar > limit


def should_warn(current_total: float, food: FoodItem, limit: float) -> bool:
    """Return True when adding an unhealthy food would go over the limit."""
    if food.is_healthy:
        return False
    return would_exceed(current_total, food.sugar_content, limit)


def summarize(total: float, limit: float) -> SugarSummary:
    return SugarSummary(
        total=total,
        limit=limit,
        percentage=percentage(total, limit),
        status=classify(total, limit),
    )


def check_addition(current_total: float, food: FoodItem, limit: float) -> AdditionCheck:
    """Evaluate the advisory warning for adding a food to a selection."""
    return AdditionCheck(
        current_total=current_total,
        projected_total=current_total + food.sugar_content,
        would_exceed=would_exceed(current_total, food.sugar_content, limit),
        warn=should_warn(current_total, food, limit),
    )


@dataclass
class LimitService:
    """Holds the current daily limit and classifies totals against it."""

    store: PersistentStore
    default_limit: float = DEFAULT_DAILY_LIMIT
    loading: bool = field(default=True, init=False)
    _limit: float = field(default=DEFAULT_DAILY_LIMIT, init=False)

    def __post_init__(self) -> None:
        self._limit = validate_limit(self.default_limit)

    async def load(self) -> None:
        """Load the persisted limit, keeping the default when unusable."""
        try:
            stored = await self.store.load(LIMIT_KEY)
            if stored is None:
                return
            try:
                if isinstance(stored, str):
                    stored = float(stored)
                self._limit = validate_limit(stored)
            except (TypeError, ValueError):
                _logger.warning("Ignoring invalid stored daily limit: %r", stored)
        finally:
            self.loading = False

    def get_limit(self) -> float:
        return self._limit

    def apply_limit(self, value: float) -> float:
        """Validate and set the limit in memory."""
        self._limit = validate_limit(value)
        return self._limit

    async def persist(self) -> bool:
        return await self.store.save(LIMIT_KEY, self._limit)

    async def set_limit(self, value: float) -> MutationResult[float]:
        """Set the daily limit and persist it."""
        limit = self.apply_limit(value)
        persisted = await self.persist()
        if not persisted:
            _logger.warning("Daily limit %s kept in memory only", limit)
        return MutationResult(value=limit, persisted=persisted)

    def summarize(self, total: float) -> SugarSummary:
        """Summarize a total against the current limit."""
        return summarize(total, self._limit)

    def check_addition(self, current_total: float, food: FoodItem) -> AdditionCheck:
        return check_addition(current_total, food, self._limit)
