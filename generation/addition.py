"""Addition questions: a + b."""

from models import Category, GameSettings, QuestionCard

from .base import QuestionGenerator
from .config import DistractorConfig


class AdditionGenerator(QuestionGenerator):
    """Both operands are drawn independently from the operand range.

    Positive-only sums are at least 2 since both operands are >= 1.
    """

    category = Category.ADDITION
    verb = "plus"
    integer_options = DistractorConfig(fill_attempts=100, widen_floor=10)
    decimal_options = DistractorConfig(fill_attempts=100, widen_floor=20)

    def _generate_integer(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=1)

    def _generate_decimal(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=10)

    def _generate_scaled(self, settings: GameSettings, scale: int) -> QuestionCard:
        top = self._cap(settings) * scale

        if settings.allow_negative:
            low, high = -top, top
            result_low, result_high = -2 * top, 2 * top
        else:
            low, high = 1, top
            result_low, result_high = 2, 2 * top

        a = self.rng.randint(low, high)
        b = self.rng.randint(low, high)

        return self._make_card(
            a,
            b,
            a + b,
            low=result_low,
            high=result_high,
            positive_only=not settings.allow_negative,
            decimal=scale != 1,
        )
