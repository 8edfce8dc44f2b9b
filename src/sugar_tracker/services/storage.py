"""Key/value persistence for the tracker's entity collections."""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Protocol

SESSION_KEY = "session/current-user"
LIMIT_KEY = "sugar/daily-limit"
ENTRIES_KEY = "sugar/entries"
CATALOG_KEY = "sugar/food-catalog"
PLANS_KEY = "sugar/meal-plans"

_logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """Raw string storage keyed by name."""

    async def get_item(self, key: str) -> str | None:
        """Return the stored text for a key, if present."""

    async def set_item(self, key: str, value: str) -> None:
        """Store text under a key, replacing any previous value."""

    async def remove_item(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class PersistentStore:
    """JSON persistence over a key/value backend.

    Every key is encoded independently and there is no cross-key transaction.
    Failures never propagate: loads degrade to ``None`` (or a default) and
    writes report ``False``. Writes to the same key are applied in call order.
    """

    backend: KeyValueBackend
    _write_locks: dict[str, asyncio.Lock] = field(
        default_factory=dict, init=False, repr=False
    )

    async def load(self, key: str) -> object | None:
        """Return the decoded value for a key, or None when absent or unreadable."""
        try:
            raw = await self.backend.get_item(key)
        except Exception:
            _logger.exception("Failed to load key=%s", key)
            return None
        if raw is None:
            return None
        return _decode(key, raw)

    async def load_or_seed(self, key: str, default: object) -> object:
        """Return the stored value, persisting ``default`` if the key is absent.

        A failing backend or corrupt stored text yields ``default`` without
        overwriting what is stored.
        """
        try:
            raw = await self.backend.get_item(key)
        except Exception:
            _logger.exception("Failed to load key=%s", key)
            return default
        if raw is None:
            _logger.info("Seeding key=%s", key)
            await self.save(key, default)
            return default
        value = _decode(key, raw)
        return default if value is None else value

    async def save(self, key: str, value: object) -> bool:
        """Encode and store a value. Returns False when the write failed."""
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError):
            _logger.exception("Failed to serialize key=%s", key)
            return False
        lock = self._write_locks.setdefault(key, asyncio.Lock())
        async with lock:
            try:
                await self.backend.set_item(key, raw)
            except Exception:
                _logger.exception("Failed to save key=%s", key)
                return False
        return True

    async def remove(self, key: str) -> bool:
        """Remove a key. Returns False when the backend failed."""
        lock = self._write_locks.setdefault(key, asyncio.Lock())
        async with lock:
            try:
                await self.backend.remove_item(key)
            except Exception:
                _logger.exception("Failed to remove key=%s", key)
                return False
        return True


def _decode(key: str, raw: str) -> object | None:
    try:
        return json.loads(raw)
    except ValueError:
        _logger.warning("Ignoring undecodable value for key=%s", key)
        return None
