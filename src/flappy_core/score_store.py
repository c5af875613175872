"""
score_store.py: Durable best-score storage.
"""

import logging
import sqlite3
from typing import Optional, Protocol

from .constants import DB_FILE

logger = logging.getLogger(__name__)

# Failures a store may raise without taking the round down with it.
STORE_ERRORS = (sqlite3.Error, OSError, ValueError)


class ScoreStore(Protocol):
    """What the core needs from best-score persistence."""

    def load_best_score(self) -> int:
        ...

    def save_best_score(self, score: int) -> None:
        ...


class Database:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE, profile: str = "standard"):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.profile = profile
        self.setup()

    def setup(self):
        """Creates tables if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                profile TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.cur.execute(
            "INSERT OR IGNORE INTO Scores (profile, best) VALUES (?, 0)", (self.profile,))
        self.conn.commit()

    def load_best_score(self) -> int:
        self.cur.execute("SELECT best FROM Scores WHERE profile=?", (self.profile,))
        row = self.cur.fetchone()
        return int(row[0]) if row else 0

    def save_best_score(self, score: int):
        """Stores score if it beats the stored best. The stored best never drops."""
        self.cur.execute(
            "UPDATE Scores SET best = MAX(best, ?) WHERE profile=?", (score, self.profile))
        self.conn.commit()

    def close(self):
        self.conn.close()


def load_best_score(store: Optional[ScoreStore]) -> int:
    """Best score from store, or 0 if there is none or it cannot be read."""
    if store is None:
        return 0
    try:
        return max(int(store.load_best_score()), 0)
    except STORE_ERRORS as e:
        logger.warning("Could not load best score, starting from 0: %s", e)
        return 0


def save_best_score(store: Optional[ScoreStore], best: int) -> bool:
    """Returns whether best reached the store."""
    if store is None:
        return False
    try:
        store.save_best_score(best)
        return True
    except STORE_ERRORS as e:
        logger.warning("Could not save best score %d: %s", best, e)
        return False
