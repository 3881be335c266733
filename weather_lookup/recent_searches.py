# ABOUTME: Locally persisted list of the last few distinct city searches, most recent first.
# ABOUTME: Backed by a JSON-file key-value store that mirrors browser localStorage semantics.

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

STORAGE_KEY = "recentSearches"
MAX_RECENT_SEARCHES = 5


class LocalStorage:
    """String key-value store persisted as a single JSON object on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")


class RecentSearches:
    """Up to `limit` distinct city strings, deduplicated by exact (case-sensitive) match."""

    def __init__(self, storage: LocalStorage, limit: int = MAX_RECENT_SEARCHES):
        self.storage = storage
        self.limit = limit
        self._items = self._load()

    def _load(self) -> list[str]:
        raw = self.storage.get_item(STORAGE_KEY)
        if raw is None:
            return []
        try:
            entries = json.loads(raw)
        except ValueError:
            logger.warning("Discarding malformed %s entry", STORAGE_KEY)
            return []
        if not isinstance(entries, list):
            return []

        items: list[str] = []
        for entry in entries:
            if isinstance(entry, str) and entry not in items:
                items.append(entry)
        return items[: self.limit]

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, city: str) -> bool:
        return city in self._items

    def add(self, city: str) -> bool:
        """Prepend a city unless already present. Returns True if the list changed."""
        if city in self._items:
            return False
        self._items = [city, *self._items][: self.limit]
        self.storage.set_item(STORAGE_KEY, json.dumps(self._items))
        return True
