"""In-memory key/value backend."""

from dataclasses import dataclass, field

from sugar_tracker.services.storage import KeyValueBackend


@dataclass
class InMemoryKeyValueBackend(KeyValueBackend):
    """Dictionary-backed storage; contents are lost with the process."""

    items: dict[str, str] = field(default_factory=dict)

    async def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
