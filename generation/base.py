"""Abstract base class for arithmetic question generators."""

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterable

from models import Category, GameSettings, QuestionCard
from utils import new_id, now_millis

from .config import DistractorConfig
from .formatting import (
    compact_question,
    format_int,
    format_int_operand,
    format_tenths,
    format_tenths_operand,
    natural_question,
)
from .options import CLOSE_DELTAS, build_options
from .rng import RandomSource


class QuestionGenerator(ABC):
    """Produces question cards for a single category.

    Implementations must be pure apart from draws on ``rng``: nothing else
    is read or written between calls. Each generator has an integer path
    and a decimal (tenths) path, selected by ``settings.allow_decimals``.

    To add a category:
    1. Subclass QuestionGenerator and set ``category`` and ``verb``
    2. Implement ``_generate_integer`` and ``_generate_decimal``
    3. Override ``supports`` if some settings can't be served
    4. Register it in ``CardFactory.default``
    """

    category: ClassVar[Category]
    verb: ClassVar[str]
    integer_options: ClassVar[DistractorConfig] = DistractorConfig(widen_floor=10)
    decimal_options: ClassVar[DistractorConfig] = DistractorConfig(widen_floor=20)

    def __init__(
        self,
        rng: RandomSource | None = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], int] = now_millis,
    ):
        self.rng = rng if rng is not None else RandomSource()
        self.id_factory = id_factory
        self.clock = clock

    def supports(self, settings: GameSettings) -> bool:
        """Return False if this generator can't operate under ``settings``."""
        return True

    def generate(self, settings: GameSettings) -> QuestionCard:
        """Produce a single question card for ``settings``."""
        if settings.allow_decimals:
            return self._generate_decimal(settings)
        return self._generate_integer(settings)

    @abstractmethod
    def _generate_integer(self, settings: GameSettings) -> QuestionCard:
        ...

    @abstractmethod
    def _generate_decimal(self, settings: GameSettings) -> QuestionCard:
        ...

    @staticmethod
    def _cap(settings: GameSettings) -> int:
        return max(1, settings.magnitude_cap)

    def _random_sign(self, magnitude: int) -> int:
        return magnitude if self.rng.randint(0, 1) == 0 else -magnitude

    def _make_card(
        self,
        left: int,
        right: int,
        result: int,
        *,
        low: int,
        high: int,
        positive_only: bool,
        decimal: bool,
        right_is_integer: bool = False,
        deltas: Iterable[int] = CLOSE_DELTAS,
    ) -> QuestionCard:
        """Format the operands, synthesize options and build the card.

        In decimal mode ``left`` and ``result`` are tenths; ``right`` is
        tenths too unless ``right_is_integer`` is set.
        """
        if decimal:
            formatter = format_tenths
            left_text, left_operand = format_tenths(left), format_tenths_operand(left)
        else:
            formatter = format_int
            left_text, left_operand = format_int(left), format_int_operand(left)

        if not decimal:
            right_text, right_operand = format_int(right), format_int_operand(right)
        elif right_is_integer:
            # Negative integer operands stay parenthesized in the sentence too.
            right_text = right_operand = format_int_operand(right)
        else:
            right_text, right_operand = format_tenths(right), format_tenths_operand(right)

        options = build_options(
            result,
            low,
            high,
            positive_only,
            deltas,
            self.rng,
            self.decimal_options if decimal else self.integer_options,
            formatter,
        )

        return QuestionCard.create(
            category=self.category,
            question=compact_question(left_operand, self.category.symbol, right_operand),
            natural_question=natural_question(left_text, self.verb, right_text),
            options=options,
            correct_answer=formatter(result),
            started_at_ms=self.clock(),
            card_id=self.id_factory(),
        )
