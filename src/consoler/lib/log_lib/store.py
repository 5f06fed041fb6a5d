"""
Persisted verbose state.

The enabled categories live in a key-value substrate under a single key
("verbose") as a comma-joined uppercase string, e.g. ``"WARN,ERROR"``.
There is no versioning and no de-duplication.

Two substrates are provided:
    MemoryStore    — process-local dict, for tests and embedding
    JsonFileStore  — a JSON object on disk (default ~/.consoler/state.json)

Any object with get/set/remove works; see KeyValueStore.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from .categories import normalize


VERBOSE_KEY = 'verbose'


class KeyValueStore(Protocol):
    """The persistence substrate consumed by VerbosityStore."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed substrate. Lives as long as the object does."""

    def __init__(self, initial: Dict[str, str] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


def get_default_state_path() -> Path:
    """Return the default state file (~/.consoler/state.json)."""
    return Path.home() / ".consoler" / "state.json"


class JsonFileStore:
    """Substrate backed by a flat JSON object on disk.

    The file is read on every get() so that writes from another process
    are picked up. A file that is missing, unreadable or not a JSON object
    reads as empty. Each write rewrites the whole file; concurrent writers
    race, last write wins.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else get_default_state_path()

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class VerbosityStore:
    """Reads and writes the set of enabled categories.

    Absence of a persisted value is a normal state meaning nothing is
    enabled; it is never an error.

    Note that contains() is a substring test on the persisted string, not
    a token comparison: with ``"ERROR"`` stored, ``contains("ROR")`` is
    True. Callers rely on this, so it is kept as is.
    """

    def __init__(self, backend: KeyValueStore, key: str = VERBOSE_KEY):
        self.backend = backend
        self.key = key
        self._written = False

    def raw(self) -> Optional[str]:
        """The persisted string, uppercased, or None when unset/empty."""
        value = self.backend.get(self.key)
        if not value:
            return None
        return normalize(value)

    def get(self) -> Optional[List[str]]:
        """The enabled categories in persisted order, or None."""
        value = self.raw()
        if value is None:
            return None
        return value.split(',')

    def set(self, categories: Iterable[str]) -> None:
        """Replace the persisted set (never merged with the old one)."""
        self.backend.set(self.key, ','.join(normalize(c) for c in categories))
        self._written = True

    def clear(self) -> None:
        """Remove the persisted set entirely."""
        self.backend.remove(self.key)
        self._written = False

    def contains(self, category: str) -> bool:
        """True when the category occurs anywhere in the persisted string."""
        value = self.raw()
        if value is None:
            return False
        return normalize(category) in value

    @property
    def debug_enabled(self) -> bool:
        """True while a verbose set is persisted, or once one was written here.

        Read from the backend each time, so a clear from another process
        is seen. An empty set written through set() still counts.
        """
        return self._written or self.raw() is not None
