"""Food catalog service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from sugar_tracker.domain.foods import SEED_FOODS, FoodCandidate, FoodItem
from sugar_tracker.domain.limits import HEALTHY_SUGAR_THRESHOLD
from sugar_tracker.domain.models import MutationResult
from sugar_tracker.services.codec import food_to_row, parse_food, parse_rows
from sugar_tracker.services.ids import new_id
from sugar_tracker.services.storage import CATALOG_KEY, PersistentStore
from sugar_tracker.services.validation import parse_sugar, require_text, validate_sugar

_logger = logging.getLogger(__name__)


def filter_healthy(foods: Iterable[FoodItem]) -> list[FoodItem]:
    return [food for food in foods if food.is_healthy]


@dataclass
class FoodCatalogService:
    """Application service for the shared food catalog.

    The catalog starts out as the built-in seed list and only grows: there is
    no update or delete. The in-memory list is authoritative for the process;
    storage is written after every addition.
    """

    store: PersistentStore
    healthy_threshold: float = HEALTHY_SUGAR_THRESHOLD
    id_factory: Callable[[], str] = new_id
    loading: bool = field(default=True, init=False)
    _foods: list[FoodItem] = field(
        default_factory=lambda: list(SEED_FOODS), init=False
    )

    async def load(self) -> None:
        """Load the catalog, seeding storage on first run."""
        try:
            seed = [food_to_row(food) for food in SEED_FOODS]
            rows = await self.store.load_or_seed(CATALOG_KEY, seed)
            foods = parse_rows(rows, parse_food, CATALOG_KEY)
            if not foods and rows != []:
                _logger.warning("Stored catalog unusable; using the seed list")
                foods = list(SEED_FOODS)
            self._foods = foods
        finally:
            self.loading = False

    def list(self) -> list[FoodItem]:
        """Return the catalog in insertion order."""
        return list(self._foods)

    def find(self, food_id: str) -> FoodItem | None:
        for food in self._foods:
            if food.id == food_id:
                return food
        return None

    def search(self, query: str | None, healthy_only: bool = False) -> list[FoodItem]:
        """Return foods whose name contains the query, ignoring case."""
        needle = (query or "").strip().lower()
        matches = [food for food in self._foods if needle in food.name.lower()]
        if healthy_only:
            return filter_healthy(matches)
        return matches

    def apply_food(self, candidate: FoodCandidate) -> FoodItem:
        """Validate a candidate and append it to the in-memory catalog."""
        name = require_text(candidate.name, "name", "Please enter a food name")
        sugar = validate_sugar(candidate.sugar_content)
        food = FoodItem(
            id=self.id_factory(),
            name=name,
            sugar_content=sugar,
            is_healthy=bool(candidate.is_healthy),
        )
        self._foods.append(food)
        return food

    async def persist(self) -> bool:
        return await self.store.save(
            CATALOG_KEY, [food_to_row(food) for food in self._foods]
        )

    async def add(self, candidate: FoodCandidate) -> MutationResult[FoodItem]:
        """Add a food to the catalog and persist the whole collection."""
        food = self.apply_food(candidate)
        persisted = await self.persist()
        if not persisted:
            _logger.warning("Catalog food %s kept in memory only", food.id)
        return MutationResult(value=food, persisted=persisted)

    def create_inline_food(self, name: str | None, sugar_text: str | None) -> FoodItem:
        """Build an ad-hoc food for a selection without adding it to the catalog.

        Healthiness is derived from the sugar content.
        """
        cleaned_name = require_text(name, "name", "Please fill in all fields")
        sugar = parse_sugar(sugar_text)
        return FoodItem(
            id=self.id_factory(),
            name=cleaned_name,
            sugar_content=sugar,
            is_healthy=sugar <= self.healthy_threshold,
        )
