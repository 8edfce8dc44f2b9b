"""Meal plan service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.domain.models import MutationResult
from sugar_tracker.domain.records import MealPlan
from sugar_tracker.services.clock import utc_now
from sugar_tracker.services.codec import parse_plan, parse_rows, plan_to_row
from sugar_tracker.services.ids import new_id
from sugar_tracker.services.limits import total_sugar
from sugar_tracker.services.storage import PLANS_KEY, PersistentStore
from sugar_tracker.services.validation import require_foods, require_text

_logger = logging.getLogger(__name__)


@dataclass
class MealPlanService:
    """Collection of named meal plans, independent of the ledger."""

    store: PersistentStore
    id_factory: Callable[[], str] = new_id
    clock: Callable[[], datetime] = utc_now
    loading: bool = field(default=True, init=False)
    _plans: list[MealPlan] = field(default_factory=list, init=False)

    async def load(self) -> None:
        try:
            rows = await self.store.load(PLANS_KEY)
            if rows is not None:
                self._plans = parse_rows(rows, parse_plan, PLANS_KEY)
        finally:
            self.loading = False

    def list(self) -> list[MealPlan]:
        return list(self._plans)

    def get(self, plan_id: str) -> MealPlan | None:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def apply_plan(self, name: str | None, foods: Iterable[FoodItem]) -> MealPlan:
        """Validate and append a plan in memory."""
        snapshot = require_foods(
            foods, "Please add at least one food item to your meal"
        )
        cleaned_name = require_text(
            name, "name", "Please enter a name for your meal plan"
        )
        plan = MealPlan(
            id=self.id_factory(),
            name=cleaned_name,
            foods=snapshot,
            total_sugar=total_sugar(snapshot),
            date=self.clock(),
        )
        self._plans.append(plan)
        return plan

    async def persist(self) -> bool:
        return await self.store.save(
            PLANS_KEY, [plan_to_row(plan) for plan in self._plans]
        )

    async def add_plan(
        self, name: str | None, foods: Iterable[FoodItem]
    ) -> MutationResult[MealPlan]:
        """Save a meal plan and persist the collection."""
        plan = self.apply_plan(name, foods)
        persisted = await self.persist()
        if not persisted:
            _logger.warning("Meal plan %s kept in memory only", plan.id)
        return MutationResult(value=plan, persisted=persisted)
