"""Once-per-day alert dedup keyed by (alert type, city, day)."""

import sqlite3
from typing import Protocol

from skywatch.models.alert import AlertType, DedupKey
from skywatch.storage import dedup_repo


def make_city_key(name: str | None, country: str | None) -> str:
    """Case-insensitive city identity. Empty name and country share one bucket."""
    return f"{name or ''}|{country or ''}".lower()


def make_dedup_key(alert_type: AlertType, city_key: str, day_iso: str) -> DedupKey:
    return DedupKey(AlertType(alert_type), city_key, day_iso)


class DedupStore(Protocol):
    def should_send(self, key: DedupKey) -> bool: ...


class SqliteDedupStore:
    """Persists sent markers so restarts never re-fire an alert for the same day."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def should_send(self, key: DedupKey) -> bool:
        return dedup_repo.mark_sent(self.conn, key)

    def was_sent(self, key: DedupKey) -> bool:
        return dedup_repo.was_sent(self.conn, key)


class MemoryDedupStore:
    def __init__(self) -> None:
        self._sent: dict[DedupKey, bool] = {}

    def should_send(self, key: DedupKey) -> bool:
        if self._sent.get(key):
            return False
        self._sent[key] = True
        return True

    def was_sent(self, key: DedupKey) -> bool:
        return self._sent.get(key, False)
