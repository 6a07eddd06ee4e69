"""Repository for per-(alert type, city, day) sent markers."""

import sqlite3

from skywatch.models.alert import AlertType, DedupKey


def mark_sent(conn: sqlite3.Connection, key: DedupKey) -> bool:
    """Record the key as sent. Returns True only if it was not already present.

    Check and mark happen in one INSERT OR IGNORE statement.
    """
    cursor = conn.execute(
        "INSERT OR IGNORE INTO alert_dedup (alert_type, city_key, day_iso) "
        "VALUES (?, ?, ?)",
        (key.alert_type.value, key.city_key, key.day_iso),
    )
    conn.commit()
    return cursor.rowcount == 1


def was_sent(conn: sqlite3.Connection, key: DedupKey) -> bool:
    row = conn.execute(
        "SELECT 1 FROM alert_dedup WHERE alert_type = ? AND city_key = ? AND day_iso = ?",
        (key.alert_type.value, key.city_key, key.day_iso),
    ).fetchone()
    return row is not None


def get_sent_for_day(conn: sqlite3.Connection, day_iso: str) -> list[DedupKey]:
    """All markers recorded for a calendar day."""
    rows = conn.execute(
        "SELECT alert_type, city_key, day_iso FROM alert_dedup "
        "WHERE day_iso = ? ORDER BY sent_at, alert_type",
        (day_iso,),
    ).fetchall()
    return [DedupKey(AlertType(r[0]), r[1], r[2]) for r in rows]
