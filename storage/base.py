"""Abstract repository interfaces for the storage layer."""

from abc import ABC, abstractmethod
from typing import Iterable

from models import GameSettings, GameStats, QuestionCard


class SettingsRepository(ABC):
    """Abstract interface for player settings storage."""

    @abstractmethod
    def save(self, settings: GameSettings) -> None:
        """Persist the normalized form of ``settings``.

        Args:
            settings: The settings to save.
        """
        pass

    @abstractmethod
    def load(self) -> GameSettings:
        """Load the saved settings.

        Returns:
            Normalized settings; missing values fall back to defaults.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all saved settings."""
        pass


class StatsRepository(ABC):
    """Abstract interface for long-term statistics storage."""

    @abstractmethod
    def save_result(self, card: QuestionCard) -> None:
        """Increment the per-category counter for one answered card.

        Args:
            card: An answered question card.
        """
        pass

    @abstractmethod
    def save_results(self, cards: Iterable[QuestionCard]) -> None:
        """Increment counters for a whole session's answered cards.

        Args:
            cards: Answered question cards.
        """
        pass

    @abstractmethod
    def record_session_score(self, score: int) -> None:
        """Set the most recent score and raise the highest score if beaten.

        Args:
            score: Number of correct answers in the finished session.
        """
        pass

    @abstractmethod
    def get_stats(self) -> GameStats:
        """Read all counters and scores.

        Returns:
            The aggregate statistics, zero-filled for every category.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Wipe all statistics."""
        pass
