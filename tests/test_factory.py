"""Tests for the CardFactory registry and dispatch."""

import pytest

from errors import ConfigurationError
from generation import (
    AdditionGenerator,
    CardFactory,
    DivisionGenerator,
    RandomSource,
)
from models import Category, GameSettings


class WholeNumberAddition(AdditionGenerator):
    """Addition generator that refuses decimal settings."""

    def supports(self, settings: GameSettings) -> bool:
        return not settings.allow_decimals


@pytest.fixture
def factory() -> CardFactory:
    return CardFactory.default(RandomSource(seed=3))


class TestRegistry:
    """Tests for factory construction."""

    def test_default_registers_basic_categories(self, factory, basic_categories):
        assert set(factory.generators) == set(basic_categories)

    def test_registry_is_read_only(self, factory):
        with pytest.raises(TypeError):
            factory.generators[Category.LOGIC] = AdditionGenerator()

    def test_mismatched_registration_rejected(self):
        with pytest.raises(ConfigurationError):
            CardFactory({Category.ADDITION: DivisionGenerator()})

    def test_default_shares_one_random_source(self):
        rng = RandomSource(1)
        factory = CardFactory.default(rng)
        assert factory.rng is rng
        assert all(generator.rng is rng for generator in factory.generators.values())


class TestGenerate:
    """Tests for single-category generation."""

    def test_generate_delegates_to_generator(self, factory, integer_settings):
        card = factory.generate(Category.DIVISION, integer_settings)
        assert card.category == Category.DIVISION
        assert "÷" in card.question

    def test_unregistered_category_fails(self, factory, integer_settings):
        with pytest.raises(ConfigurationError, match="No generator registered"):
            factory.generate(Category.LOGIC, integer_settings)

    def test_unsupported_settings_fail(self, decimal_settings):
        factory = CardFactory({Category.ADDITION: WholeNumberAddition()})
        with pytest.raises(ConfigurationError, match="does not support"):
            factory.generate(Category.ADDITION, decimal_settings)

    def test_configuration_error_is_value_error(self, factory, integer_settings):
        with pytest.raises(ValueError):
            factory.generate(Category.ADVANCED, integer_settings)


class TestSupportedCategories:
    """Tests for filtering categories by settings and registry."""

    def test_empty_selection_defaults_to_basic_set(self, factory, basic_categories):
        assert factory.supported_categories(GameSettings()) == list(basic_categories)

    def test_selection_order_preserved(self, factory):
        settings = GameSettings(
            enabled_categories=[Category.DIVISION, Category.LOGIC, Category.ADDITION]
        )
        assert factory.supported_categories(settings) == [
            Category.DIVISION,
            Category.ADDITION,
        ]

    def test_unsupported_generators_filtered(self, decimal_settings, integer_settings):
        factory = CardFactory(
            {
                Category.ADDITION: WholeNumberAddition(),
                Category.DIVISION: DivisionGenerator(),
            }
        )
        assert factory.supported_categories(decimal_settings) == [Category.DIVISION]
        assert factory.supported_categories(integer_settings) == [
            Category.ADDITION,
            Category.DIVISION,
        ]

    def test_only_reserved_categories_gives_empty_pool(self, factory):
        settings = GameSettings(enabled_categories=[Category.LOGIC, Category.ADVANCED])
        assert factory.supported_categories(settings) == []


class TestRandomGeneration:
    """Tests for pick_category, generate_random and generate_batch."""

    def test_pick_category_from_pool(self, factory):
        settings = GameSettings(
            enabled_categories=[Category.SUBTRACTION, Category.MULTIPLICATION]
        )
        picks = {factory.pick_category(settings) for _ in range(100)}
        assert picks == {Category.SUBTRACTION, Category.MULTIPLICATION}

    def test_pick_category_without_pool_fails(self, factory):
        settings = GameSettings(enabled_categories=[Category.LOGIC])
        with pytest.raises(ConfigurationError, match="No supported"):
            factory.pick_category(settings)
        with pytest.raises(ConfigurationError):
            factory.generate_random(settings)

    def test_generate_random(self, factory, signed_decimal_settings):
        card = factory.generate_random(signed_decimal_settings)
        assert card.category in Category.basic_set()
        assert card.correct_answer in card.options

    def test_batch_of_zero_is_empty(self, factory, integer_settings):
        assert factory.generate_batch(integer_settings, 0) == []

    def test_negative_batch_fails(self, factory, integer_settings):
        with pytest.raises(ConfigurationError):
            factory.generate_batch(integer_settings, -1)

    def test_batch_without_pool_fails(self, factory):
        settings = GameSettings(enabled_categories=[Category.ADVANCED])
        with pytest.raises(ConfigurationError):
            factory.generate_batch(settings, 3)

    def test_batch_draws_from_pool(self, factory):
        settings = GameSettings(enabled_categories=[Category.ADDITION, Category.DIVISION])
        cards = factory.generate_batch(settings, 50)

        assert len(cards) == 50
        assert {card.category for card in cards} == {Category.ADDITION, Category.DIVISION}
        assert len({card.id for card in cards}) == 50

    def test_single_category_batch(self, factory):
        settings = GameSettings(enabled_categories=[Category.MULTIPLICATION])
        cards = factory.generate_batch(settings, 10)
        assert all(card.category == Category.MULTIPLICATION for card in cards)

    def test_seeded_factories_agree(self, signed_decimal_settings):
        def batch(seed):
            factory = CardFactory.default(
                RandomSource(seed), id_factory=lambda: "id", clock=lambda: 0
            )
            return factory.generate_batch(signed_decimal_settings, 20)

        assert batch(11) == batch(11)
