"""Repository for persisted string settings."""

import sqlite3

ALERTS_ENABLED = "alerts_enabled"
ALERTS_PROMPTED = "alerts_prompted"


def get_setting(conn: sqlite3.Connection, key: str) -> str | None:
    """Get a setting value."""
    row = conn.execute(
        "SELECT value FROM settings WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_setting(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Set a setting value."""
    conn.execute(
        "INSERT INTO settings (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def has_setting(conn: sqlite3.Connection, key: str) -> bool:
    row = conn.execute("SELECT 1 FROM settings WHERE key = ?", (key,)).fetchone()
    return row is not None


def get_all_settings(conn: sqlite3.Connection) -> dict[str, str]:
    rows = conn.execute("SELECT key, value FROM settings ORDER BY key").fetchall()
    return {r[0]: r[1] for r in rows}
