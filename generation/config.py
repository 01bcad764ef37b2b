"""Tuning for distractor-option synthesis.

Each generator carries one configuration for integer mode and one for
decimal (tenths) mode.
"""

from pydantic import BaseModel, ConfigDict, Field

from models import OPTION_COUNT

__all__ = ["OPTION_COUNT", "DistractorConfig"]


class DistractorConfig(BaseModel):
    """Retry budget and widen-phase margin for one generation mode.

    The widen margin is ``max(widen_floor, abs(correct) // widen_divisor)``
    (the scaled term is skipped when ``widen_divisor`` is 0). A floor of at
    least 5 keeps the widened range wide enough for four distinct values.
    """

    model_config = ConfigDict(frozen=True)

    fill_attempts: int = Field(default=100, ge=1)
    widen_floor: int = Field(default=10, ge=5)
    widen_divisor: int = Field(default=0, ge=0)

    def widen_margin(self, correct: int) -> int:
        scaled = abs(correct) // self.widen_divisor if self.widen_divisor else 0
        return max(self.widen_floor, scaled)
