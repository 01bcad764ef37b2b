"""Subtraction questions: a - b."""

from models import Category, GameSettings, QuestionCard

from .base import QuestionGenerator
from .config import DistractorConfig


class SubtractionGenerator(QuestionGenerator):
    """Signed mode draws both operands freely from [-cap, cap].

    Positive-only mode keeps the difference strictly positive by drawing
    ``a`` from [2, max(cap, 2)] and then ``b`` from [1, a - 1].
    """

    category = Category.SUBTRACTION
    verb = "minus"
    integer_options = DistractorConfig(fill_attempts=100, widen_floor=10)
    decimal_options = DistractorConfig(fill_attempts=100, widen_floor=20)

    def _generate_integer(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=1)

    def _generate_decimal(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=10)

    def _generate_scaled(self, settings: GameSettings, scale: int) -> QuestionCard:
        top = self._cap(settings) * scale

        if settings.allow_negative:
            a = self.rng.randint(-top, top)
            b = self.rng.randint(-top, top)
            result_low, result_high = -2 * top, 2 * top
        else:
            # a > b >= 1 needs at least two values to pick from
            top = max(top, 2)
            a = self.rng.randint(2, top)
            b = self.rng.randint(1, a - 1)
            result_low, result_high = 1, top - 1

        return self._make_card(
            a,
            b,
            a - b,
            low=result_low,
            high=result_high,
            positive_only=not settings.allow_negative,
            decimal=scale != 1,
        )
