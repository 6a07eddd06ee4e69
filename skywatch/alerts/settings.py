"""Key-value settings stores backing the alert opt-in flags."""

import sqlite3
from typing import Protocol

from skywatch.storage import settings_repo


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def exists(self, key: str) -> bool: ...


class SqliteKeyValueStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, key: str) -> str | None:
        return settings_repo.get_setting(self.conn, key)

    def set(self, key: str, value: str) -> None:
        settings_repo.set_setting(self.conn, key, value)

    def exists(self, key: str) -> bool:
        return settings_repo.has_setting(self.conn, key)


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def exists(self, key: str) -> bool:
        return key in self._data


class AlertFlags:
    """Typed view over the persisted alert flags."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    @property
    def enabled(self) -> bool:
        return self.store.get(settings_repo.ALERTS_ENABLED) == "1"

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.store.set(settings_repo.ALERTS_ENABLED, "1" if value else "0")

    @property
    def prompted(self) -> bool:
        return self.store.get(settings_repo.ALERTS_PROMPTED) == "1"

    def mark_prompted(self) -> None:
        self.store.set(settings_repo.ALERTS_PROMPTED, "1")
