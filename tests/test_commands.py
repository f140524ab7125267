from datetime import date
from decimal import Decimal

from tracker_core.commands import (
    AddExpenseCommand,
    CheckBudgetCommand,
    DeleteExpenseCommand,
    DeleteIncomeCommand,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListExpenseCommand,
    SetBudgetCommand,
    TotalExpenseBetweenCommand,
    TotalExpenseCommand,
)
from tracker_core.models import Expense, Income


def run(line, parser, ledger, ui, budget_manager):
    command = parser.parse_command(line)
    command.execute(ledger, ui, budget_manager)
    return command


def test_add_expense_round_trip(parser, ledger, ui, budget_manager, out):
    run("add_ex d/Lunch a/12.50 c/food", parser, ledger, ui, budget_manager)

    assert len(ledger.expenses) == 1
    expense = ledger.expenses[0]
    assert (expense.description, expense.amount, expense.category) == ("Lunch", Decimal("12.50"), "FOOD")
    assert "Expense added: [FOOD] Lunch - $12.50" in out.getvalue()


def test_invalid_amount_leaves_ledger_unchanged(parser, ledger, ui, budget_manager, err):
    for line in ("add_ex d/Lunch a/-1 c/food", "add_in d/Pay a/lots c/work"):
        run(line, parser, ledger, ui, budget_manager)

    assert ledger.expenses == []
    assert ledger.incomes == []
    assert err.getvalue().count("Error:") == 2


def test_delete_expense_reports_removed_entry(ledger, ui, budget_manager, out):
    ledger.add_expense(Expense("Coffee", Decimal("3"), "FOOD"))
    ledger.add_expense(Expense("Bus", Decimal("2"), "TRANSPORT"))

    DeleteExpenseCommand(1).execute(ledger, ui, budget_manager)

    assert [e.description for e in ledger.expenses] == ["Bus"]
    assert "Expense deleted: [FOOD] Coffee" in out.getvalue()


def test_delete_out_of_range_prints_not_found(ledger, ui, budget_manager, err):
    ledger.add_income(Income("Salary", Decimal("100"), "WORK"))

    DeleteIncomeCommand(2).execute(ledger, ui, budget_manager)

    assert len(ledger.incomes) == 1
    assert "Income with index 2 not found" in err.getvalue()


def test_list_is_one_based_in_insertion_order(ledger, ui, budget_manager, out):
    ledger.add_expense(Expense("Coffee", Decimal("3"), "FOOD", date(2023, 1, 2)))
    ledger.add_expense(Expense("Bus", Decimal("2"), "TRANSPORT", date(2023, 1, 1)))

    ListExpenseCommand().execute(ledger, ui, budget_manager)

    lines = out.getvalue().splitlines()
    assert lines[1] == "1. [FOOD] Coffee - $3.00 (2023-01-02)"
    assert lines[2] == "2. [TRANSPORT] Bus - $2.00 (2023-01-01)"


def test_list_empty(ledger, ui, budget_manager, out):
    ListExpenseCommand().execute(ledger, ui, budget_manager)
    assert "not recorded any expenses" in out.getvalue()


def test_totals(ledger, ui, budget_manager, out):
    TotalExpenseCommand().execute(ledger, ui, budget_manager)
    ledger.add_expense(Expense("a", Decimal("10"), "X"))
    ledger.add_expense(Expense("b", Decimal("20.5"), "X"))
    TotalExpenseCommand().execute(ledger, ui, budget_manager)

    lines = out.getvalue().splitlines()
    assert lines == ["Your total expense is: $0.00", "Your total expense is: $30.50"]


def test_total_between_excludes_entries_outside_range(ledger, ui, budget_manager, out):
    ledger.add_expense(Expense("in", Decimal("5"), "X", date(2023, 6, 1)))
    ledger.add_expense(Expense("out", Decimal("7"), "X", date(2024, 1, 1)))

    TotalExpenseBetweenCommand(date(2023, 1, 1), date(2023, 12, 31)).execute(ledger, ui, budget_manager)

    assert "between 2023-01-01 and 2023-12-31 is: $5.00" in out.getvalue()


def test_budget_warning_after_overspending(ledger, ui, budget_manager, out):
    SetBudgetCommand("FOOD", Decimal("50")).execute(ledger, ui, budget_manager)
    AddExpenseCommand(Expense("Feast", Decimal("60"), "FOOD")).execute(ledger, ui, budget_manager)

    assert "Monthly budget for FOOD set to $50.00" in out.getvalue()
    assert "exceeded your FOOD budget of $50.00 by $10.00" in out.getvalue()


def test_check_budget(ledger, ui, budget_manager, out):
    CheckBudgetCommand("FOOD").execute(ledger, ui, budget_manager)
    budget_manager.set_budget("FOOD", "40")
    ledger.add_expense(Expense("Lunch", Decimal("15"), "FOOD"))
    CheckBudgetCommand("FOOD").execute(ledger, ui, budget_manager)

    text = out.getvalue()
    assert "No budget has been set for FOOD." in text
    assert "FOOD: spent $15.00 of $40.00 this month, $25.00 remaining" in text


def test_help_exit_and_invalid(ledger, ui, budget_manager, out, err):
    HelpCommand().execute(ledger, ui, budget_manager)
    exit_command = ExitCommand()
    exit_command.execute(ledger, ui, budget_manager)
    InvalidCommand("nope").execute(ledger, ui, budget_manager)

    assert "add_ex d/DESCRIPTION" in out.getvalue()
    assert exit_command.is_exit
    assert not HelpCommand().is_exit
    assert err.getvalue() == "Error: nope\n"
