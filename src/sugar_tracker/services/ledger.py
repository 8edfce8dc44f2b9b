"""Intake ledger service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.domain.models import MutationResult
from sugar_tracker.domain.records import SugarEntry
from sugar_tracker.services.clock import utc_now
from sugar_tracker.services.codec import entry_to_row, parse_entry, parse_rows
from sugar_tracker.services.ids import new_id
from sugar_tracker.services.limits import total_sugar
from sugar_tracker.services.storage import ENTRIES_KEY, PersistentStore
from sugar_tracker.services.validation import require_foods

_logger = logging.getLogger(__name__)


@dataclass
class IntakeLedgerService:
    """Append-only log of submitted daily intake."""

    store: PersistentStore
    id_factory: Callable[[], str] = new_id
    clock: Callable[[], datetime] = utc_now
    loading: bool = field(default=True, init=False)
    _entries: list[SugarEntry] = field(default_factory=list, init=False)

    async def load(self) -> None:
        """Load persisted entries; missing data means an empty ledger."""
        try:
            rows = await self.store.load(ENTRIES_KEY)
            if rows is not None:
                self._entries = parse_rows(rows, parse_entry, ENTRIES_KEY)
        finally:
            self.loading = False

    def list(self) -> list[SugarEntry]:
        """Return entries in the order they were submitted."""
        return list(self._entries)

    def list_recent(self) -> list[SugarEntry]:
        """Return entries newest first; equal dates keep submission order."""
        return sorted(self._entries, key=lambda entry: entry.date, reverse=True)

    def get(self, entry_id: str) -> SugarEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def apply_entry(self, foods: Iterable[FoodItem]) -> SugarEntry:
        """Snapshot the foods into a new entry and append it in memory."""
        snapshot = require_foods(foods, "Please add at least one food item")
        entry = SugarEntry(
            id=self.id_factory(),
            date=self.clock(),
            foods=snapshot,
            total_sugar=total_sugar(snapshot),
        )
        self._entries.append(entry)
        return entry

    async def persist(self) -> bool:
        return await self.store.save(
            ENTRIES_KEY, [entry_to_row(entry) for entry in self._entries]
        )

    async def add_entry(self, foods: Iterable[FoodItem]) -> MutationResult[SugarEntry]:
        """Record today's intake and persist the ledger."""
        entry = self.apply_entry(foods)
        persisted = await self.persist()
        if not persisted:
            _logger.warning("Sugar entry %s kept in memory only", entry.id)
        return MutationResult(value=entry, persisted=persisted)
