"""Multiplication questions: a × b."""

from models import Category, GameSettings, QuestionCard

from .base import QuestionGenerator
from .config import DistractorConfig


class MultiplicationGenerator(QuestionGenerator):
    """Multiplication with operand-sized near-miss distractors.

    In decimal mode one operand is in tenths and the other is a plain
    integer, so the product still has exactly one decimal digit.
    """

    category = Category.MULTIPLICATION
    verb = "times"
    integer_options = DistractorConfig(fill_attempts=150, widen_floor=10, widen_divisor=1)
    decimal_options = DistractorConfig(fill_attempts=150, widen_floor=20, widen_divisor=10)

    def _generate_integer(self, settings: GameSettings) -> QuestionCard:
        cap = self._cap(settings)
        low = -cap if settings.allow_negative else 1

        a = self.rng.randint(low, cap)
        b = self.rng.randint(low, cap)

        # Off by one factor, by the average factor, or by one
        approx = max(1, (abs(a) + abs(b)) // 2)
        deltas = (-abs(a), abs(a), -abs(b), abs(b), -approx, approx, -1, 1)

        top = cap * cap
        return self._make_card(
            a,
            b,
            a * b,
            low=-top if settings.allow_negative else 1,
            high=top,
            positive_only=not settings.allow_negative,
            decimal=False,
            deltas=deltas,
        )

    def _generate_decimal(self, settings: GameSettings) -> QuestionCard:
        cap = self._cap(settings)
        cap_tenths = cap * 10

        if settings.allow_negative:
            a_tenths = self.rng.randint(-cap_tenths, cap_tenths)
            b = self.rng.randint(-cap, cap)
        else:
            a_tenths = self.rng.randint(1, cap_tenths)
            b = self.rng.randint(1, cap)

        deltas = (-abs(a_tenths), abs(a_tenths), -10, 10, -20, 20)

        top = cap_tenths * cap
        return self._make_card(
            a_tenths,
            b,
            a_tenths * b,
            low=-top if settings.allow_negative else 1,
            high=top,
            positive_only=not settings.allow_negative,
            decimal=True,
            right_is_integer=True,
            deltas=deltas,
        )
