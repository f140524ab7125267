from datetime import date
from decimal import Decimal

import pytest

from tracker_core.exceptions import RecordNotFoundError
from tracker_core.models import Expense, Income


def _expense(description, amount, on=date(2023, 6, 1), category="FOOD"):
    return Expense(description=description, amount=Decimal(amount), category=category, date=on)


def test_totals_on_empty_ledger_are_zero(ledger):
    assert ledger.total_expense() == 0
    assert ledger.total_income() == 0
    assert ledger.balance() == 0


def test_total_expense_sums_amounts(ledger):
    ledger.add_expense(_expense("a", "10"))
    ledger.add_expense(_expense("b", "20.5"))
    assert ledger.total_expense() == Decimal("30.5")


def test_remove_expense_shifts_later_entries(ledger):
    for name in ("first", "second", "third"):
        ledger.add_expense(_expense(name, "1"))

    removed = ledger.remove_expense(2)

    assert removed.description == "second"
    assert [e.description for e in ledger.expenses] == ["first", "third"]
    assert ledger.remove_expense(2).description == "third"


@pytest.mark.parametrize("index", [0, -1, 3])
def test_remove_out_of_range_leaves_ledger_unchanged(ledger, index):
    ledger.add_expense(_expense("a", "1"))
    ledger.add_expense(_expense("b", "2"))

    with pytest.raises(RecordNotFoundError):
        ledger.remove_expense(index)

    assert len(ledger.expenses) == 2


def test_remove_income_from_empty_ledger(ledger):
    with pytest.raises(RecordNotFoundError, match="index 1"):
        ledger.remove_income(1)


def test_expenses_property_is_a_copy(ledger):
    ledger.add_expense(_expense("a", "1"))
    ledger.expenses.clear()
    assert len(ledger.expenses) == 1


def test_total_between_is_inclusive(ledger):
    ledger.add_expense(_expense("start", "1", date(2023, 1, 1)))
    ledger.add_expense(_expense("end", "2", date(2023, 12, 31)))
    ledger.add_expense(_expense("after", "4", date(2024, 1, 1)))

    assert ledger.total_expense_between(date(2023, 1, 1), date(2023, 12, 31)) == Decimal("3")


def test_inverted_range_totals_to_zero(ledger):
    # Documented boundary behaviour: start after end is not an error.
    ledger.add_income(Income("Salary", Decimal("100"), "WORK", date(2023, 6, 1)))
    assert ledger.total_income_between(date(2023, 12, 31), date(2023, 1, 1)) == 0


def test_balance_is_income_minus_expense(ledger):
    ledger.add_income(Income("Salary", Decimal("100"), "WORK"))
    ledger.add_expense(_expense("Lunch", "12.50"))
    assert ledger.balance() == Decimal("87.50")


def test_total_expense_for_category(ledger):
    ledger.add_expense(_expense("Lunch", "10", date(2023, 6, 1)))
    ledger.add_expense(_expense("Dinner", "15", date(2023, 7, 1)))
    ledger.add_expense(_expense("Bus", "3", date(2023, 6, 2), category="TRANSPORT"))

    assert ledger.total_expense_for_category("food") == Decimal("25")
    assert ledger.total_expense_for_category(
        "FOOD", date(2023, 6, 1), date(2023, 6, 30)
    ) == Decimal("10")
