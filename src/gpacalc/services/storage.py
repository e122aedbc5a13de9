from __future__ import annotations

import sqlite3
from pathlib import Path


class Storage:
    """String-keyed durable store: one row per key, each value an opaque text blob."""

    def __init__(self, db_path: str = "gpacalc.db") -> None:
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(db_path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS entries (
              key TEXT PRIMARY KEY,
              value TEXT NOT NULL
            );
            """
        )
        self.conn.commit()

    def get(self, key: str) -> str | None:
        cur = self.conn.cursor()
        cur.execute("SELECT value FROM entries WHERE key=?", (key,))
        row = cur.fetchone()
        return None if row is None else str(row["value"])

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            """INSERT INTO entries(key, value) VALUES(?, ?)
               ON CONFLICT(key) DO UPDATE SET value=excluded.value""",
            (key, value),
        )
        self.conn.commit()

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM entries WHERE key=?", (key,))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
