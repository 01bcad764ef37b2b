"""Storage layer for the arithmetic quiz.

Provides repository interfaces and SQLite implementations for persisting
player settings and long-term statistics.
"""

from pathlib import Path

from .base import SettingsRepository, StatsRepository
from .sqlite import SQLiteSettingsRepository, SQLiteStatsRepository
from .connection import get_connection, init_schema, DEFAULT_DB_PATH

__all__ = [
    # Abstract interfaces
    "SettingsRepository",
    "StatsRepository",
    # SQLite implementations
    "SQLiteSettingsRepository",
    "SQLiteStatsRepository",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    # Factory functions
    "get_settings_repo",
    "get_stats_repo",
]


def get_settings_repo(db_path: Path = DEFAULT_DB_PATH) -> SettingsRepository:
    """Get a SettingsRepository instance."""
    return SQLiteSettingsRepository(db_path)


def get_stats_repo(db_path: Path = DEFAULT_DB_PATH) -> StatsRepository:
    """Get a StatsRepository instance."""
    return SQLiteStatsRepository(db_path)
