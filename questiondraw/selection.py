"""Which questions of each bank are marked as removed while editing a group."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from questiondraw.store import QUESTION_COUNT, QuestionBanks


class Bank(Enum):
    DIFFICULT = "A"
    SIMPLE = "B"

    @property
    def offset(self) -> int:
        """Amount added to a question number when it is shown."""
        return QUESTION_COUNT if self is Bank.SIMPLE else 0

    @property
    def title(self) -> str:
        return "简单题(B库)" if self is Bank.SIMPLE else "困难题(A库)"


def _check_number(number: int) -> None:
    if not 1 <= number <= QUESTION_COUNT:
        raise ValueError(f"question number must be 1..{QUESTION_COUNT}, got {number}")


def _empty_removed() -> dict[Bank, set[int]]:
    return {bank: set() for bank in Bank}


@dataclass
class BankSelection:
    removed: dict[Bank, set[int]] = field(default_factory=_empty_removed)

    @classmethod
    def from_banks(cls, banks: QuestionBanks) -> "BankSelection":
        selection = cls()
        selection.apply_banks(banks)
        return selection

    def apply_banks(self, banks: QuestionBanks) -> None:
        """Mark entries that are 0 and clear entries that hold their own number."""
        for bank, values in ((Bank.SIMPLE, banks.simple), (Bank.DIFFICULT, banks.difficult)):
            removed = self.removed[bank]
            for number, value in enumerate(values, start=1):
                if value == 0:
                    removed.add(number)
                elif value == number:
                    removed.discard(number)

    def toggle(self, bank: Bank, number: int) -> bool:
        """Flip the mark of a question and return whether it is now removed."""
        _check_number(number)
        removed = self.removed[bank]
        if number in removed:
            removed.discard(number)
            return False
        removed.add(number)
        return True

    def is_removed(self, bank: Bank, number: int) -> bool:
        _check_number(number)
        return number in self.removed[bank]

    def to_banks(self) -> QuestionBanks:
        def values(bank: Bank) -> list[int]:
            removed = self.removed[bank]
            return [0 if n in removed else n for n in range(1, QUESTION_COUNT + 1)]

        return QuestionBanks(values(Bank.SIMPLE), values(Bank.DIFFICULT))