from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from errors import InvariantViolation
from utils import format_duration_ms, new_id, now_millis


class Category(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    # Reserved; no generator is registered for these.
    LOGIC = "logic"
    ADVANCED = "advanced"

    @property
    def is_basic(self) -> bool:
        """True for the four core arithmetic categories."""
        return self in _BASIC_SET

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def basic_set(cls) -> tuple[Category, ...]:
        """The four fundamental operations, in their canonical order."""
        return _BASIC_SET

    @classmethod
    def default_selected(cls) -> tuple[Category, ...]:
        """Selection used when the player has not enabled anything."""
        return cls.basic_set()

    @classmethod
    def ui_order(cls) -> tuple[Category, ...]:
        return tuple(cls)


_BASIC_SET = (
    Category.ADDITION,
    Category.SUBTRACTION,
    Category.MULTIPLICATION,
    Category.DIVISION,
)

_SYMBOLS = {
    Category.ADDITION: "+",
    Category.SUBTRACTION: "-",
    Category.MULTIPLICATION: "×",
    Category.DIVISION: "÷",
    Category.LOGIC: "∴",
    Category.ADVANCED: "★",
}


# ============================================================================
# Settings
# ============================================================================


DEFAULT_TIME_PER_QUESTION_SEC = 10
DEFAULT_TOTAL_QUESTIONS = 10
DEFAULT_MAGNITUDE_CAP = 10
MAX_TIME_PER_QUESTION_SEC = 30
MIN_TOTAL_QUESTIONS = 1
MAX_TOTAL_QUESTIONS = 100


class GameSettings(BaseModel):
    """Player-configurable settings that control question generation.

    An empty ``enabled_categories`` means "use the default selection".
    ``magnitude_cap`` is always at least 1.
    """

    model_config = ConfigDict(frozen=True)

    magnitude_cap: int = DEFAULT_MAGNITUDE_CAP
    allow_negative: bool = False
    allow_decimals: bool = False
    enabled_categories: tuple[Category, ...] = ()
    time_per_question_sec: int = DEFAULT_TIME_PER_QUESTION_SEC
    total_questions: int = DEFAULT_TOTAL_QUESTIONS

    @field_validator("magnitude_cap")
    @classmethod
    def clamp_magnitude_cap(cls, value: int) -> int:
        return max(1, value)

    def time_limit_millis(self) -> int | None:
        """Time limit in milliseconds, or None if untimed."""
        if self.time_per_question_sec <= 0:
            return None
        return self.time_per_question_sec * 1_000

    def is_category_enabled(self, category: Category) -> bool:
        return category in self.enabled_categories

    def normalized(self) -> GameSettings:
        """Return a sanitized copy with clamped numeric fields and a
        non-empty, de-duplicated category list."""
        seconds = min(max(self.time_per_question_sec, 0), MAX_TIME_PER_QUESTION_SEC)
        total = min(max(self.total_questions, MIN_TOTAL_QUESTIONS), MAX_TOTAL_QUESTIONS)
        categories = self.enabled_categories or Category.default_selected()

        return self.model_copy(
            update={
                "time_per_question_sec": seconds,
                "total_questions": total,
                "enabled_categories": tuple(dict.fromkeys(categories)),
            }
        )


# ============================================================================
# Question cards
# ============================================================================


# Every question offers exactly this many options, correct answer included.
OPTION_COUNT = 4


class QuestionCard(BaseModel):
    """One multiple-choice question shown to the player.

    Cards are immutable. ``ended_at_ms`` stays None until the card is
    answered; answering returns a new card and may happen only once.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    category: Category
    question: str  # Compact form, e.g. "12 ÷ 4 = ?"
    natural_question: str  # Sentence form, e.g. "What is 12 divided by 4?"
    options: tuple[str, ...]
    correct_answer: str
    started_at_ms: int
    ended_at_ms: int | None = None
    was_correct: bool = False

    @model_validator(mode="after")
    def check_options(self) -> QuestionCard:
        # Not a ValueError, so pydantic re-raises it unwrapped.
        if len(self.options) != OPTION_COUNT:
            raise InvariantViolation(
                f"expected {OPTION_COUNT} options, got {len(self.options)}: {self.options}"
            )
        if len(set(self.options)) != len(self.options):
            raise InvariantViolation(f"options must be distinct: {self.options}")
        if self.correct_answer not in self.options:
            raise InvariantViolation(
                f"correct answer {self.correct_answer!r} is not among options {self.options}"
            )
        return self

    @classmethod
    def create(
        cls,
        category: Category,
        question: str,
        options: Iterable[str],
        correct_answer: str,
        natural_question: str | None = None,
        started_at_ms: int | None = None,
        card_id: str | None = None,
    ) -> QuestionCard:
        """Build an unanswered card, stamping an id and the start time.

        Raises:
            InvariantViolation: If there are not exactly four distinct options
                containing the correct answer.
        """
        return cls(
            id=card_id if card_id is not None else new_id(),
            category=category,
            question=question,
            natural_question=natural_question if natural_question is not None else question,
            options=tuple(options),
            correct_answer=correct_answer,
            started_at_ms=started_at_ms if started_at_ms is not None else now_millis(),
        )

    @property
    def is_answered(self) -> bool:
        return self.ended_at_ms is not None

    @property
    def duration_ms(self) -> int | None:
        """Time from start to answer, or None while unanswered."""
        if self.ended_at_ms is None:
            return None
        return self.ended_at_ms - self.started_at_ms

    def display_text(self) -> str:
        """Prefer the natural-language text when available."""
        return self.natural_question if self.natural_question.strip() else self.question

    def answered_with(
        self,
        choice: str,
        at_ms: int | None = None,
        clock: Callable[[], int] = now_millis,
    ) -> QuestionCard:
        """Mark as answered with the chosen option text."""
        return self.answered(choice == self.correct_answer, at_ms, clock)

    def answered(
        self,
        correct: bool,
        at_ms: int | None = None,
        clock: Callable[[], int] = now_millis,
    ) -> QuestionCard:
        """Mark as answered with explicit correctness.

        The end time is ``at_ms`` when given, otherwise read from ``clock``.
        Pass the clock the card was generated with to keep both timestamps
        on the same time base.
        """
        if self.is_answered:
            raise InvariantViolation(f"question {self.id} has already been answered")
        return self.model_copy(
            update={
                "was_correct": correct,
                "ended_at_ms": at_ms if at_ms is not None else clock(),
            }
        )


# ============================================================================
# Session results and long-term statistics
# ============================================================================


def _zero_counts() -> dict[Category, int]:
    return {category: 0 for category in Category}


def _add_counts(
    a: dict[Category, int], b: dict[Category, int]
) -> dict[Category, int]:
    return {category: a.get(category, 0) + b.get(category, 0) for category in Category}


class GameResults(BaseModel):
    """Summary of a completed game session."""

    model_config = ConfigDict(frozen=True)

    correct_counts: dict[Category, int]
    wrong_counts: dict[Category, int]
    started_at_ms: int
    finished_at_ms: int

    @property
    def duration_ms(self) -> int:
        return max(0, self.finished_at_ms - self.started_at_ms)

    @property
    def formatted_duration(self) -> str:
        return format_duration_ms(self.duration_ms)

    @property
    def total_correct(self) -> int:
        return sum(self.correct_counts.values())

    @property
    def total_wrong(self) -> int:
        return sum(self.wrong_counts.values())

    @property
    def total_questions(self) -> int:
        return self.total_correct + self.total_wrong

    @property
    def accuracy(self) -> float:
        """Overall accuracy in [0.0, 1.0]; 0.0 if no questions."""
        if self.total_questions == 0:
            return 0.0
        return self.total_correct / self.total_questions

    def attempts_for(self, category: Category) -> int:
        return self.correct_counts.get(category, 0) + self.wrong_counts.get(category, 0)

    def accuracy_for(self, category: Category) -> float | None:
        """Accuracy for one category, or None if it was never attempted."""
        attempts = self.attempts_for(category)
        if attempts == 0:
            return None
        return self.correct_counts.get(category, 0) / attempts

    @classmethod
    def from_cards(
        cls,
        cards: Iterable[QuestionCard],
        started_at_ms: int,
        finished_at_ms: int,
    ) -> GameResults:
        """Tally cards by their ``was_correct`` flag.

        Every category is present in both maps, defaulting to zero.
        """
        correct = _zero_counts()
        wrong = _zero_counts()
        for card in cards:
            counts = correct if card.was_correct else wrong
            counts[card.category] += 1

        return cls(
            correct_counts=correct,
            wrong_counts=wrong,
            started_at_ms=started_at_ms,
            finished_at_ms=finished_at_ms,
        )


class GameStats(BaseModel):
    """Long-term aggregate statistics across many sessions."""

    model_config = ConfigDict(frozen=True)

    correct_counts: dict[Category, int] = Field(default_factory=_zero_counts)
    wrong_counts: dict[Category, int] = Field(default_factory=_zero_counts)
    highest_score: int = 0
    most_recent_score: int = 0
    total_sessions: int = 0
    fastest_answer_ms: int | None = None
    slowest_answer_ms: int | None = None
    fastest_question_id: str | None = None
    slowest_question_id: str | None = None
    last_played_at_ms: int | None = None

    @classmethod
    def empty(cls) -> GameStats:
        return cls()

    @property
    def total_correct(self) -> int:
        return sum(self.correct_counts.values())

    @property
    def total_wrong(self) -> int:
        return sum(self.wrong_counts.values())

    @property
    def total_answers(self) -> int:
        return self.total_correct + self.total_wrong

    @property
    def accuracy(self) -> float:
        if self.total_answers == 0:
            return 0.0
        return self.total_correct / self.total_answers

    def attempts_for(self, category: Category) -> int:
        return self.correct_counts.get(category, 0) + self.wrong_counts.get(category, 0)

    def with_session(
        self,
        results: GameResults,
        cards: Iterable[QuestionCard] | None = None,
        played_at_ms: int | None = None,
    ) -> GameStats:
        """Merge in a finished session.

        Adds per-category counts, updates the highest and most recent
        scores, and tracks the fastest/slowest answered cards when
        ``cards`` is given.
        """
        fastest_ms = self.fastest_answer_ms
        slowest_ms = self.slowest_answer_ms
        fastest_id = self.fastest_question_id
        slowest_id = self.slowest_question_id

        for card in cards or ():
            duration = card.duration_ms
            if duration is None:
                continue
            if fastest_ms is None or duration < fastest_ms:
                fastest_ms = duration
                fastest_id = card.id
            if slowest_ms is None or duration > slowest_ms:
                slowest_ms = duration
                slowest_id = card.id

        score = results.total_correct
        return self.model_copy(
            update={
                "correct_counts": _add_counts(self.correct_counts, results.correct_counts),
                "wrong_counts": _add_counts(self.wrong_counts, results.wrong_counts),
                "highest_score": max(self.highest_score, score),
                "most_recent_score": score,
                "total_sessions": self.total_sessions + 1,
                "fastest_answer_ms": fastest_ms,
                "slowest_answer_ms": slowest_ms,
                "fastest_question_id": fastest_id,
                "slowest_question_id": slowest_id,
                "last_played_at_ms": played_at_ms if played_at_ms is not None else now_millis(),
            }
        )
