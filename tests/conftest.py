"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from sugar_tracker.adapters.memory_store import InMemoryKeyValueBackend
from sugar_tracker.config import Settings
from sugar_tracker.containers import AppContainer, build_container
from sugar_tracker.domain.foods import FoodItem
from sugar_tracker.services.storage import KeyValueBackend, PersistentStore

APPLE = FoodItem(id="1", name="Apple", sugar_content=10, is_healthy=True)
BANANA = FoodItem(id="2", name="Banana", sugar_content=14, is_healthy=True)
SODA = FoodItem(id="5", name="Soda (330ml)", sugar_content=35, is_healthy=False)
CARROT = FoodItem(id="8", name="Carrot", sugar_content=3, is_healthy=True)


@dataclass
class FailingBackend(KeyValueBackend):
    """Backend that raises on reads and/or writes."""

    fail_reads: bool = False
    fail_writes: bool = True
    items: dict[str, str] = field(default_factory=dict)

    async def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage unavailable")
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("storage unavailable")
        self.items.pop(key, None)


@dataclass
class SteppingClock:
    """Clock that moves forward by a fixed step on every call."""

    start: datetime = datetime(2024, 5, 1, 8, 0, tzinfo=UTC)
    step: timedelta = timedelta(minutes=1)
    calls: int = 0

    def __call__(self) -> datetime:
        value = self.start + self.step * self.calls
        self.calls += 1
        return value


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def backend() -> InMemoryKeyValueBackend:
    return InMemoryKeyValueBackend()


@pytest.fixture
def store(backend: InMemoryKeyValueBackend) -> PersistentStore:
    return PersistentStore(backend)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def container(
    settings: Settings, backend: InMemoryKeyValueBackend
) -> AppContainer:
    return build_container(settings, backend=backend)
