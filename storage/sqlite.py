"""SQLite implementations of repository interfaces."""

import json
import logging
from pathlib import Path
from typing import Iterable

from .base import SettingsRepository, StatsRepository
from .connection import get_connection, DEFAULT_DB_PATH
from models import Category, GameSettings, GameStats, QuestionCard

logger = logging.getLogger(__name__)

HIGHEST_SCORE = "highest_score"
MOST_RECENT_SCORE = "most_recent_score"
TOTAL_SESSIONS = "total_sessions"


def _correct_key(category: Category) -> str:
    return f"correct_{category.value}"


def _wrong_key(category: Category) -> str:
    return f"wrong_{category.value}"


def _categories_to_csv(categories: Iterable[Category]) -> str:
    return ",".join(category.name for category in categories)


def _csv_to_categories(csv: str | None) -> tuple[Category, ...]:
    """Parse category names, dropping unknown ones and duplicates."""
    if not csv:
        return ()
    categories = []
    for name in csv.split(","):
        name = name.strip()
        if name in Category.__members__:
            categories.append(Category[name])
        elif name:
            logger.warning("Ignoring unknown category in saved settings: %s", name)
    return tuple(dict.fromkeys(categories))


class SQLiteSettingsRepository(SettingsRepository):
    """SQLite implementation of SettingsRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def save(self, settings: GameSettings) -> None:
        """Persist the normalized settings, one row per field."""
        normalized = settings.normalized()
        values = normalized.model_dump(exclude={"enabled_categories"})
        values["enabled_categories"] = _categories_to_csv(normalized.enabled_categories)

        conn = get_connection(self.db_path)
        try:
            conn.executemany(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                [(key, json.dumps(value)) for key, value in values.items()],
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Saved settings to %s", self.db_path)

    def load(self) -> GameSettings:
        """Load saved settings, falling back to defaults for missing keys."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT key, value FROM settings")
            stored = {row["key"]: json.loads(row["value"]) for row in cursor.fetchall()}
        finally:
            conn.close()

        known = {
            key: value
            for key, value in stored.items()
            if key in GameSettings.model_fields and key != "enabled_categories"
        }
        settings = GameSettings(
            **known,
            enabled_categories=_csv_to_categories(stored.get("enabled_categories")),
        )
        return settings.normalized()

    def clear(self) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM settings")
            conn.commit()
        finally:
            conn.close()


class SQLiteStatsRepository(StatsRepository):
    """SQLite implementation of StatsRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def save_result(self, card: QuestionCard) -> None:
        """Increment the correct or wrong counter for the card's category."""
        self.save_results([card])

    def save_results(self, cards: Iterable[QuestionCard]) -> None:
        """Increment counters for every card in a single transaction."""
        keys = [
            _correct_key(card.category) if card.was_correct else _wrong_key(card.category)
            for card in cards
        ]
        conn = get_connection(self.db_path)
        try:
            for key in keys:
                self._increment(conn, key)
            conn.commit()
        finally:
            conn.close()
        logger.info("Recorded %d answered card(s)", len(keys))

    def record_session_score(self, score: int) -> None:
        """Update the most recent score, bump the highest, count the session."""
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                "INSERT OR REPLACE INTO stats (key, value) VALUES (?, ?)",
                (MOST_RECENT_SCORE, score),
            )
            conn.execute(
                """INSERT INTO stats (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = MAX(value, excluded.value)""",
                (HIGHEST_SCORE, score),
            )
            self._increment(conn, TOTAL_SESSIONS)
            conn.commit()
        finally:
            conn.close()
        logger.info("Recorded session score %d", score)

    def get_stats(self) -> GameStats:
        """Read all counters and scores into a GameStats object."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT key, value FROM stats")
            counters = {row["key"]: row["value"] for row in cursor.fetchall()}
        finally:
            conn.close()

        return GameStats(
            correct_counts={c: counters.get(_correct_key(c), 0) for c in Category},
            wrong_counts={c: counters.get(_wrong_key(c), 0) for c in Category},
            highest_score=counters.get(HIGHEST_SCORE, 0),
            most_recent_score=counters.get(MOST_RECENT_SCORE, 0),
            total_sessions=counters.get(TOTAL_SESSIONS, 0),
        )

    def clear(self) -> None:
        """Wipe all counters and scores."""
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM stats")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _increment(conn, key: str) -> None:
        conn.execute(
            """INSERT INTO stats (key, value) VALUES (?, 1)
            ON CONFLICT(key) DO UPDATE SET value = value + 1""",
            (key,),
        )
