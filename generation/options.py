"""Distractor synthesis shared by all arithmetic generators."""

import logging
from typing import Callable, Iterable

from .config import OPTION_COUNT, DistractorConfig
from .rng import RandomSource

logger = logging.getLogger(__name__)

# Near-miss offsets tried first for sums, differences and quotients.
CLOSE_DELTAS = (-1, 1, -2, 2, -3, 3)


def build_options(
    correct: int,
    low: int,
    high: int,
    positive_only: bool,
    deltas: Iterable[int],
    rng: RandomSource,
    config: DistractorConfig,
    formatter: Callable[[int], str],
) -> list[str]:
    """Build ``OPTION_COUNT`` distinct, shuffled option strings.

    Works on raw integers (plain or tenths) and formats only at the end, so
    two distinct values can never collide as text.

    Args:
        correct: The correct result; always included.
        low: Inclusive lower bound of plausible results.
        high: Inclusive upper bound of plausible results.
        positive_only: Reject every candidate that is not > 0.
        deltas: Offsets from ``correct`` to try first, in preference order.
        rng: Source for random fill and the final shuffle.
        config: Retry budget and widen margin for this mode.
        formatter: Turns a raw value into its display text.

    Returns:
        The formatted options in random order.
    """
    # dict keeps insertion order and rejects duplicates
    choices: dict[int, None] = {correct: None}

    def acceptable(value: int) -> bool:
        return not positive_only or value > 0

    for delta in deltas:
        if len(choices) >= OPTION_COUNT:
            break
        value = correct + delta
        if low <= value <= high and acceptable(value):
            choices.setdefault(value)

    attempts = 0
    while len(choices) < OPTION_COUNT and attempts < config.fill_attempts:
        attempts += 1
        value = rng.randint(low, high)
        if acceptable(value):
            choices.setdefault(value)

    if len(choices) < OPTION_COUNT:
        margin = config.widen_margin(correct)
        if positive_only:
            wide_low, wide_high = 1, max(high, correct + margin)
        else:
            wide_low, wide_high = low - margin, high + margin
        logger.debug(
            "Range [%d, %d] too narrow for %d options around %d; widening to [%d, %d]",
            low,
            high,
            OPTION_COUNT,
            correct,
            wide_low,
            wide_high,
        )
        while len(choices) < OPTION_COUNT:
            value = rng.randint(wide_low, wide_high)
            if acceptable(value):
                choices.setdefault(value)

    options = [formatter(value) for value in choices]
    rng.shuffle(options)
    return options
