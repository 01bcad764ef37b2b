"""Division questions: dividend ÷ divisor, always exact."""

from models import Category, GameSettings, QuestionCard

from .base import QuestionGenerator
from .config import DistractorConfig


class DivisionGenerator(QuestionGenerator):
    """Division built backwards from divisor and quotient.

    The divisor is drawn first, then a quotient small enough that
    ``divisor * quotient`` stays within the cap, and the dividend is their
    product, so the quotient is exact by construction. Signed mode draws
    magnitudes the same way and then flips each sign independently.

    In decimal mode the divisor stays an integer and the quotient (hence
    the dividend) is in tenths.
    """

    category = Category.DIVISION
    verb = "divided by"
    integer_options = DistractorConfig(fill_attempts=120, widen_floor=5, widen_divisor=1)
    decimal_options = DistractorConfig(fill_attempts=150, widen_floor=10, widen_divisor=5)

    def _generate_integer(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=1)

    def _generate_decimal(self, settings: GameSettings) -> QuestionCard:
        return self._generate_scaled(settings, scale=10)

    def _generate_scaled(self, settings: GameSettings, scale: int) -> QuestionCard:
        cap = self._cap(settings)
        top = cap * scale  # bound on |dividend| and |quotient|, in result units

        divisor = self.rng.randint(1, cap)
        quotient = self.rng.randint(1, max(1, top // divisor))

        if settings.allow_negative:
            divisor = self._random_sign(divisor)
            quotient = self._random_sign(quotient)

        return self._make_card(
            divisor * quotient,
            divisor,
            quotient,
            low=-top if settings.allow_negative else 1,
            high=top,
            positive_only=not settings.allow_negative,
            decimal=scale != 1,
            right_is_integer=True,
        )
