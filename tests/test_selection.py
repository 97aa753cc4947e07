import pytest

from questiondraw.selection import Bank, BankSelection
from questiondraw.store import QuestionBanks


def test_fresh_banks_have_nothing_removed():
    selection = BankSelection.from_banks(QuestionBanks.fresh())
    assert all(not selection.is_removed(bank, n) for bank in Bank for n in range(1, 31))
    assert selection.to_banks() == QuestionBanks.fresh()


def test_zero_entries_are_marked_removed():
    banks = QuestionBanks.fresh()
    banks.simple[3] = 0
    banks.difficult[10] = 0
    selection = BankSelection.from_banks(banks)
    assert selection.removed[Bank.SIMPLE] == {4}
    assert selection.removed[Bank.DIFFICULT] == {11}


def test_apply_banks_keeps_mark_for_unexpected_value():
    selection = BankSelection()
    selection.toggle(Bank.DIFFICULT, 2)
    banks = QuestionBanks.fresh()
    banks.difficult[1] = 99
    selection.apply_banks(banks)
    assert selection.is_removed(Bank.DIFFICULT, 2)


def test_apply_banks_clears_restored_question():
    selection = BankSelection()
    selection.toggle(Bank.SIMPLE, 6)
    selection.apply_banks(QuestionBanks.fresh())
    assert not selection.is_removed(Bank.SIMPLE, 6)


def test_toggle_flips_state():
    selection = BankSelection()
    assert selection.toggle(Bank.SIMPLE, 30) is True
    assert selection.is_removed(Bank.SIMPLE, 30)
    assert selection.toggle(Bank.SIMPLE, 30) is False
    assert not selection.is_removed(Bank.SIMPLE, 30)


def test_to_banks_round_trip():
    banks = QuestionBanks.fresh()
    banks.simple[0] = 0
    banks.simple[29] = 0
    banks.difficult[14] = 0
    assert BankSelection.from_banks(banks).to_banks() == banks


@pytest.mark.parametrize("number", [0, 31, -1])
def test_out_of_range_number(number):
    selection = BankSelection()
    with pytest.raises(ValueError):
        selection.toggle(Bank.DIFFICULT, number)
    with pytest.raises(ValueError):
        selection.is_removed(Bank.SIMPLE, number)


def test_bank_offsets_give_displayed_numbers_of_removed_questions():
    banks = QuestionBanks.fresh()
    banks.simple[3] = 0
    banks.difficult[3] = 0
    selection = BankSelection.from_banks(banks)
    displayed = {
        bank.title: {n + bank.offset for n in selection.removed[bank]} for bank in Bank
    }
    assert displayed == {"简单题(B库)": {34}, "困难题(A库)": {4}}