"""The rolling draw of one difficult (A) and one simple (B) question."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from questiondraw.store import QUESTION_COUNT, QuestionBanks

INITIAL_INTERVAL_MS = 50
INTERVAL_STEP_MS = 10
MAX_INTERVAL_MS = 200
DRAW_DURATION_MS = 4000


class DrawStatus(Enum):
    COMPLETE = "抽题完成！"
    SIMPLE_EXHAUSTED = "A库抽题完成，B库无可抽取题目！"
    DIFFICULT_EXHAUSTED = "A库无可抽取题目，B库抽取完成！"
    EXHAUSTED = "无可抽取题目！"


@dataclass(frozen=True)
class DrawOutcome:
    """Result of a finished draw; a number of 0 means nothing was drawn."""

    status: DrawStatus
    difficult: int
    simple: int

    def message(self) -> str:
        return self.status.value


class Lottery:
    """Shuffles through the available questions and removes the final picks."""

    def __init__(self, banks: QuestionBanks, rng: random.Random | None = None) -> None:
        self.banks = banks
        self.rng = rng if rng is not None else random.Random()
        self.difficult_number = 0
        self.simple_number = 0
        self.interval = INITIAL_INTERVAL_MS
        self._difficult_available = 0
        self._simple_available = 0

    def step(self) -> tuple[int, int]:
        """Pick a new candidate from each bank and slow the roll down.

        Returns the current difficult and simple numbers.
        """
        difficult = [value for value in self.banks.difficult if value != 0]
        self._difficult_available = len(difficult)
        if difficult:
            self.difficult_number = self.rng.choice(difficult)

        simple = [value for value in self.banks.simple if value != 0]
        self._simple_available = len(simple)
        if simple:
            self.simple_number = self.rng.choice(simple)

        self.interval = min(self.interval + INTERVAL_STEP_MS, MAX_INTERVAL_MS)
        return self.difficult_number, self.simple_number

    def finish(self) -> DrawOutcome:
        """Stop the roll, take the picked questions out of their banks."""
        self.interval = INITIAL_INTERVAL_MS
        if self._difficult_available and self._simple_available:
            status = DrawStatus.COMPLETE
        elif self._difficult_available:
            status = DrawStatus.SIMPLE_EXHAUSTED
        elif self._simple_available:
            status = DrawStatus.DIFFICULT_EXHAUSTED
        else:
            status = DrawStatus.EXHAUSTED

        for bank, number in (
            (self.banks.simple, self.simple_number),
            (self.banks.difficult, self.difficult_number),
        ):
            if 1 <= number <= QUESTION_COUNT:
                bank[number - 1] = 0

        return DrawOutcome(status, self.difficult_number, self.simple_number)