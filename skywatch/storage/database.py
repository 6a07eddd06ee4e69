"""SQLite connection manager with WAL mode and migration support."""

import importlib
import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "skywatch.storage.migrations"
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def connect(db_path: str | Path, check_same_thread: bool = True) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode enabled.

    Creates the parent directory for file-backed databases. Pass
    check_same_thread=False when one connection serves a thread pool.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def open_database(db_path: str | Path, check_same_thread: bool = True) -> sqlite3.Connection:
    """Connect and bring the schema up to date."""
    conn = connect(db_path, check_same_thread=check_same_thread)
    run_migrations(conn)
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending migrations in version order. Returns the names applied."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    done = {r["version"] for r in conn.execute("SELECT version FROM schema_versions")}
    pending = [name for name in _discover_migrations() if name not in done]

    for name in pending:
        module = importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}")
        module.up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        logger.info("Applied migration %s", name)

    return pending


def _discover_migrations() -> list[str]:
    """Migration modules named v###_*.py, sorted by version."""
    return sorted(p.stem for p in MIGRATIONS_DIR.glob("v[0-9]*_*.py"))
