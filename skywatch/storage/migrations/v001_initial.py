"""Initial schema: settings flags and per-day alert dedup markers."""

import sqlite3

DDL = [
    # Process-wide flags (alerts enabled, first-run prompt shown)
    """
    CREATE TABLE IF NOT EXISTS settings (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,

    # One row per (alert type, city, day) that has already been sent
    """
    CREATE TABLE IF NOT EXISTS alert_dedup (
        alert_type TEXT NOT NULL,
        city_key TEXT NOT NULL,
        day_iso TEXT NOT NULL,
        sent_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
        PRIMARY KEY (alert_type, city_key, day_iso)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_alert_dedup_day ON alert_dedup(day_iso)",
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
