"""Registry that selects a generator per category and dispatches to it."""

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from errors import ConfigurationError
from models import Category, GameSettings, QuestionCard
from utils import new_id, now_millis

from .addition import AdditionGenerator
from .base import QuestionGenerator
from .division import DivisionGenerator
from .multiplication import MultiplicationGenerator
from .rng import RandomSource
from .subtraction import SubtractionGenerator

logger = logging.getLogger(__name__)


class CardFactory:
    """Delegates card creation to the generator registered for a category.

    The registry is fixed at construction. Categories without a generator
    are simply absent; asking for one raises ConfigurationError.

    Usage:
        factory = CardFactory.default()
        card = factory.generate(Category.ADDITION, settings)
        card = factory.generate_random(settings)
        cards = factory.generate_batch(settings, count=10)
    """

    def __init__(
        self,
        generators: Mapping[Category, QuestionGenerator],
        rng: RandomSource | None = None,
    ):
        for category, generator in generators.items():
            if generator.category != category:
                raise ConfigurationError(
                    f"Generator {type(generator).__name__} produces "
                    f"{generator.category.value}, but is registered for {category.value}"
                )
        self._generators = MappingProxyType(dict(generators))
        self.rng = rng if rng is not None else RandomSource()

    @classmethod
    def default(
        cls,
        rng: RandomSource | None = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], int] = now_millis,
    ) -> "CardFactory":
        """Registry of the four basic arithmetic generators sharing one source."""
        rng = rng if rng is not None else RandomSource()
        generator_classes = (
            AdditionGenerator,
            SubtractionGenerator,
            MultiplicationGenerator,
            DivisionGenerator,
        )
        return cls(
            {
                generator_cls.category: generator_cls(rng, id_factory, clock)
                for generator_cls in generator_classes
            },
            rng,
        )

    @property
    def generators(self) -> Mapping[Category, QuestionGenerator]:
        return self._generators

    def generate(self, category: Category, settings: GameSettings) -> QuestionCard:
        """Generate one card of ``category``.

        Raises:
            ConfigurationError: If no generator is registered for the category
                or the registered generator does not support ``settings``.
        """
        generator = self._generators.get(category)
        if generator is None:
            raise ConfigurationError(f"No generator registered for category: {category.value}")
        if not generator.supports(settings):
            raise ConfigurationError(
                f"Generator for {category.value} does not support the supplied settings"
            )

        logger.debug("Generating %s card", category.value)
        return generator.generate(settings)

    def supported_categories(self, settings: GameSettings) -> list[Category]:
        """Categories both enabled in ``settings`` and served by a generator.

        An empty selection means the default categories. Input order is kept.
        """
        selected = settings.enabled_categories or Category.default_selected()
        return [
            category
            for category in selected
            if category in self._generators
            and self._generators[category].supports(settings)
        ]

    def pick_category(self, settings: GameSettings) -> Category:
        """Pick a supported category uniformly at random."""
        return self.rng.choose(self._require_pool(settings))

    def generate_random(self, settings: GameSettings) -> QuestionCard:
        """Generate a single card from any supported category."""
        return self.generate(self.pick_category(settings), settings)

    def generate_batch(self, settings: GameSettings, count: int) -> list[QuestionCard]:
        """Generate ``count`` cards, drawing a category independently for each.

        Raises:
            ConfigurationError: If ``count`` is negative or no category is
                supported.
        """
        if count < 0:
            raise ConfigurationError(f"count must be >= 0, got {count}")
        if count == 0:
            return []

        pool = self._require_pool(settings)
        logger.debug(
            "Generating batch of %d cards from %s",
            count,
            [category.value for category in pool],
        )
        return [self.generate(self.rng.choose(pool), settings) for _ in range(count)]

    def _require_pool(self, settings: GameSettings) -> list[Category]:
        pool = self.supported_categories(settings)
        if not pool:
            raise ConfigurationError("No supported question categories for current settings")
        return pool
