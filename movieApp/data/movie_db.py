# movie_db.py
"""
Connection owner for the movie SQLite file.

One `MovieDatabase` per process: the entry point builds it once and hands it
to `MovieRepo`. Opening it claims the file in EXCLUSIVE locking mode, so a
second instance on the same path fails with ``sqlite3.OperationalError``.
"""

from __future__ import annotations
import sqlite3, threading
from pathlib import Path

from movieApp import settings
from movieApp.utils import log_debug

_EXPECTED_COLUMNS = ("id", "title", "genre", "rating", "isFavorite")


class MovieDatabase:
    """Single shared sqlite3 connection; every statement runs under `lock`."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        timeout: float | None = None,
        schema_version: int | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else settings.DATABASE_PATH
        self.schema_version = (
            settings.SCHEMA_VERSION if schema_version is None else schema_version
        )
        self.lock = threading.RLock()       # serialises every statement
        self._closed = False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(
            str(self.path),
            timeout=settings.DB_TIMEOUT if timeout is None else timeout,
            check_same_thread=False,        # shared by worker threads, guarded by lock
            isolation_level="DEFERRED",
        )
        self._conn.row_factory = sqlite3.Row
        try:
            self._claim_file()
            self._ensure_schema()
        except sqlite3.Error:
            self._conn.close()
            self._closed = True
            raise
        log_debug(f"database opened: {self.path} (schema v{self.schema_version})")

    # ─── bootstrap ─────────────────────────────────────────────────────────
    def _claim_file(self) -> None:
        """Grab the exclusive file lock and keep it until `close()`."""
        self._conn.execute("PRAGMA locking_mode=EXCLUSIVE")
        self._conn.execute("BEGIN EXCLUSIVE")
        self._conn.commit()

    def _user_tables(self) -> list[str]:
        rows = self._conn.execute(
            "SELECT name FROM sqlite_master "
            "WHERE type='table' AND name NOT LIKE 'sqlite_%'"
        ).fetchall()
        return [r["name"] for r in rows]

    def _movie_columns(self) -> tuple[str, ...]:
        rows = self._conn.execute("PRAGMA table_info(movie)").fetchall()
        return tuple(r["name"] for r in rows)

    def _ensure_schema(self) -> None:
        """
        Create the schema on a fresh file. Any version or shape mismatch
        drops every table and starts over: existing rows are lost.
        """
        found = self._conn.execute("PRAGMA user_version").fetchone()[0]
        if found == self.schema_version and self._movie_columns() == _EXPECTED_COLUMNS:
            return

        tables = self._user_tables()
        if found != 0 or tables:
            log_debug(
                f"schema mismatch in {self.path.name} (found v{found}, "
                f"want v{self.schema_version}); dropping {len(tables)} table(s)"
            )
            for name in tables:
                self._conn.execute(f'DROP TABLE IF EXISTS "{name}"')
            self._conn.commit()

        self._conn.executescript(settings.SCHEMA_PATH.read_text(encoding="utf-8"))
        self._conn.execute(f"PRAGMA user_version = {int(self.schema_version)}")
        self._conn.commit()

    # ─── public helpers ────────────────────────────────────────────────────
    @property
    def closed(self) -> bool:
        return self._closed

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Like `connection.execute(...)`, under the shared lock."""
        with self.lock:
            if self._closed:
                raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
            return self._conn.execute(sql, params)

    def fetch_all(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self.lock:
            return self.execute(sql, params).fetchall()

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        with self.lock:
            return self.execute(sql, params).fetchone()

    def write(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """
        Run one mutating statement as its own transaction.

        Rolls back and re-raises on any sqlite3 error.
        """
        with self.lock:
            try:
                cur = self.execute(sql, params)
                self._conn.commit()
            except sqlite3.Error:
                if not self._closed:
                    self._conn.rollback()
                raise
            return cur

    def close(self) -> None:
        """Release the file lock. Safe to call twice."""
        with self.lock:
            if self._closed:
                return
            self._conn.close()
            self._closed = True
        log_debug(f"database closed: {self.path}")
