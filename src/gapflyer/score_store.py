"""
score_store.py: Persistence for the single best-score value.
"""

import logging
import sqlite3
from typing import Protocol

from .constants import DB_FILE

logger = logging.getLogger(__name__)


class ScoreStoreError(Exception):
    """The backing store could not be read or written."""


class ScoreStore(Protocol):
    """Backends report every failure as ScoreStoreError."""

    def get_high_score(self) -> int: ...

    def set_high_score(self, score: int) -> None: ...


class MemoryScoreStore:
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, initial: int = 0):
        self.best = initial

    def get_high_score(self) -> int:
        return self.best

    def set_high_score(self, score: int):
        self.best = max(self.best, score)


class SqliteScoreStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot open score database {db_file}: {e}") from e

    def setup(self):
        """Creates the table and its single row if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.cur.execute("INSERT OR IGNORE INTO Scores (id, best) VALUES (1, 0)")
        self.conn.commit()

    def get_high_score(self) -> int:
        try:
            self.cur.execute("SELECT best FROM Scores WHERE id = 1")
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot read high score: {e}") from e
        return int(row[0]) if row else 0

    def set_high_score(self, score: int):
        """Stores the score unless a better one is already saved."""
        try:
            self.cur.execute("UPDATE Scores SET best = MAX(best, ?) WHERE id = 1", (score,))
            self.conn.commit()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot write high score: {e}") from e
        logger.debug("High score %d written to database", score)

    def close(self):
        self.conn.close()
