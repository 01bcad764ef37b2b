"""Shared pytest fixtures for the arithmetic quiz test suite."""

import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from generation import RandomSource
from models import Category, GameSettings
from storage import init_schema


class ScriptedRandomSource(RandomSource):
    """RandomSource that returns queued integer draws before falling back to
    seeded random ones. Lets tests pin the operands a generator picks."""

    def __init__(self, draws: list[int], seed: int = 0):
        super().__init__(seed)
        self.draws = list(draws)

    def randint(self, low: int, high: int) -> int:
        if self.draws:
            value = self.draws.pop(0)
            assert low <= value <= high, f"scripted draw {value} outside [{low}, {high}]"
            return value
        return super().randint(low, high)


@pytest.fixture
def scripted_rng():
    """Factory for a RandomSource with predetermined integer draws."""
    return ScriptedRandomSource


@pytest.fixture
def integer_settings() -> GameSettings:
    """Positive integers up to 10."""
    return GameSettings(magnitude_cap=10)


@pytest.fixture
def signed_integer_settings() -> GameSettings:
    return GameSettings(magnitude_cap=10, allow_negative=True)


@pytest.fixture
def decimal_settings() -> GameSettings:
    """Positive tenths up to 10.0."""
    return GameSettings(magnitude_cap=10, allow_decimals=True)


@pytest.fixture
def signed_decimal_settings() -> GameSettings:
    return GameSettings(magnitude_cap=10, allow_negative=True, allow_decimals=True)


@pytest.fixture
def basic_categories() -> tuple[Category, ...]:
    return (
        Category.ADDITION,
        Category.SUBTRACTION,
        Category.MULTIPLICATION,
        Category.DIVISION,
    )


@pytest.fixture
def test_db_path(tmp_path) -> Path:
    """Create a temporary database path for testing."""
    db_path = tmp_path / "test_arithmatic.db"
    init_schema(db_path)
    return db_path
