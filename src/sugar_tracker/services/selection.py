"""In-progress food selection for an intake entry or a meal plan."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.domain.limits import AdditionCheck
from sugar_tracker.domain.models import MutationResult
from sugar_tracker.domain.records import MealPlan, SugarEntry
from sugar_tracker.services.ledger import IntakeLedgerService
from sugar_tracker.services.limits import check_addition, total_sugar
from sugar_tracker.services.plans import MealPlanService

_logger = logging.getLogger(__name__)


class SelectionState(StrEnum):
    """State of a selection being composed."""

    EMPTY = "empty"
    COMPOSING = "composing"


@dataclass
class FoodSelection:
    """Foods picked so far, in the order they were added.

    Submitting a selection creates an immutable ledger entry or meal plan and
    resets the selection to empty. A rejected submission leaves it untouched.
    """

    _foods: list[FoodItem] = field(default_factory=list)

    @property
    def state(self) -> SelectionState:
        if self._foods:
            return SelectionState.COMPOSING
        return SelectionState.EMPTY

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        return tuple(self._foods)

    @property
    def total(self) -> float:
        return total_sugar(self._foods)

    def evaluate(self, food: FoodItem, limit: float) -> AdditionCheck:
        """Evaluate the advisory warning for adding a food."""
        return check_addition(self.total, food, limit)

    def add(
        self, food: FoodItem, limit: float | None = None, *, confirm: bool = False
    ) -> bool:
        """Add a food, returning False when it was held back by the warning.

        Without a limit the food is always added. With a limit, an unhealthy
        food that would exceed it is only added when ``confirm`` is set.
        """
        if limit is not None and not confirm and self.evaluate(food, limit).warn:
            _logger.info("Held back %s: would exceed limit %s", food.name, limit)
            return False
        self._foods.append(food)
        return True

    def remove(self, index: int) -> FoodItem:
        """Remove the food at a position; duplicates are removed one at a time."""
        return self._foods.pop(index)

    def clear(self) -> None:
        self._foods.clear()

    async def submit_entry(
        self, ledger: IntakeLedgerService
    ) -> MutationResult[SugarEntry]:
        """Record the selection as today's intake."""
        entry = ledger.apply_entry(self._foods)
        self.clear()
        persisted = await ledger.persist()
        if not persisted:
            _logger.warning("Sugar entry %s kept in memory only", entry.id)
        return MutationResult(value=entry, persisted=persisted)

    async def submit_plan(
        self, plans: MealPlanService, name: str | None
    ) -> MutationResult[MealPlan]:
        """Save the selection as a named meal plan."""
        plan = plans.apply_plan(name, self._foods)
        self.clear()
        persisted = await plans.persist()
        if not persisted:
            _logger.warning("Meal plan %s kept in memory only", plan.id)
        return MutationResult(value=plan, persisted=persisted)
