"""Dependency container wiring for the application."""

import asyncio
from dataclasses import dataclass

from supabase import create_client

from sugar_tracker.adapters.file_store import JsonFileKeyValueBackend
from sugar_tracker.adapters.memory_store import InMemoryKeyValueBackend
from sugar_tracker.adapters.supabase_store import SupabaseKeyValueBackend
from sugar_tracker.config import Settings
from sugar_tracker.services.catalog import FoodCatalogService
from sugar_tracker.services.ledger import IntakeLedgerService
from sugar_tracker.services.limits import LimitService
from sugar_tracker.services.plans import MealPlanService
from sugar_tracker.services.sessions import SessionService
from sugar_tracker.services.storage import KeyValueBackend, PersistentStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: PersistentStore
    session_service: SessionService
    limit_service: LimitService
    catalog_service: FoodCatalogService
    ledger_service: IntakeLedgerService
    plan_service: MealPlanService

    async def load(self) -> None:
        """Load every component from storage."""
        await asyncio.gather(
            self.session_service.load(),
            self.limit_service.load(),
            self.catalog_service.load(),
            self.ledger_service.load(),
            self.plan_service.load(),
        )

    @property
    def loading(self) -> bool:
        return any(
            service.loading
            for service in (
                self.session_service,
                self.limit_service,
                self.catalog_service,
                self.ledger_service,
                self.plan_service,
            )
        )


def build_backend(settings: Settings) -> KeyValueBackend:
    """Create the storage backend selected in settings."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueBackend()
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required for Supabase"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueBackend(client, table=settings.supabase_table)
    return JsonFileKeyValueBackend(settings.data_dir)


def build_container(
    settings: Settings | None = None, backend: KeyValueBackend | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = PersistentStore(backend or build_backend(resolved_settings))
    return AppContainer(
        settings=resolved_settings,
        store=store,
        session_service=SessionService(store),
        limit_service=LimitService(
            store, default_limit=resolved_settings.default_daily_limit
        ),
        catalog_service=FoodCatalogService(
            store, healthy_threshold=resolved_settings.healthy_sugar_threshold
        ),
        ledger_service=IntakeLedgerService(store),
        plan_service=MealPlanService(store),
    )
