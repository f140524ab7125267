"""Console rendering for command outcomes."""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence, TextIO

from . import messages
from .budget import BudgetStatus
from .models import Entry, Expense, Income, format_amount

SEPARATOR = "-" * 60


def format_entry(entry: Entry, number: Optional[int] = None) -> str:
    prefix = f"{number}. " if number is not None else ""
    return (
        f"{prefix}[{entry.category}] {entry.description} - "
        f"${format_amount(entry.amount)} ({entry.date.isoformat()})"
    )


class ConsoleUI:
    """Writes command results to ``out`` and errors to ``err``."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    def print_error(self, message: str) -> None:
        print(f"Error: {message}", file=self._err)

    def print_welcome(self) -> None:
        self._print(SEPARATOR)
        self._print("Welcome to the finance tracker. Type \"help\" for the list of commands.")
        self._print(SEPARATOR)

    def print_goodbye(self) -> None:
        self._print("Bye! Your entries are not saved between sessions.")

    def print_help(self) -> None:
        self._print(messages.HELP_MESSAGE)

    def print_expense_added(self, expense: Expense) -> None:
        self._print("Expense added: " + format_entry(expense))

    def print_income_added(self, income: Income) -> None:
        self._print("Income added: " + format_entry(income))

    def print_expense_deleted(self, expense: Expense) -> None:
        self._print("Expense deleted: " + format_entry(expense))

    def print_income_deleted(self, income: Income) -> None:
        self._print("Income deleted: " + format_entry(income))

    def _print_entries(self, kind: str, entries: Sequence[Entry]) -> None:
        if not entries:
            self._print(f"You have not recorded any {kind} yet.")
            return
        self._print(f"Your {kind}:")
        for number, entry in enumerate(entries, start=1):
            self._print(format_entry(entry, number))

    def print_expense_list(self, expenses: Sequence[Expense]) -> None:
        self._print_entries("expenses", expenses)

    def print_income_list(self, incomes: Sequence[Income]) -> None:
        self._print_entries("incomes", incomes)

    def print_total_expense(self, total: Decimal) -> None:
        self._print(f"Your total expense is: ${format_amount(total)}")

    def print_total_income(self, total: Decimal) -> None:
        self._print(f"Your total income is: ${format_amount(total)}")

    def print_total_expense_between(self, total: Decimal, start: date, end: date) -> None:
        self._print(
            f"Your total expense between {start.isoformat()} and {end.isoformat()} "
            f"is: ${format_amount(total)}"
        )

    def print_total_income_between(self, total: Decimal, start: date, end: date) -> None:
        self._print(
            f"Your total income between {start.isoformat()} and {end.isoformat()} "
            f"is: ${format_amount(total)}"
        )

    def print_balance(self, balance: Decimal) -> None:
        self._print(f"Your balance is: ${format_amount(balance)}")

    def print_budget_set(self, category: str, limit: Decimal) -> None:
        self._print(f"Monthly budget for {category} set to ${format_amount(limit)}")

    def print_budget_status(self, status: BudgetStatus) -> None:
        self._print(
            f"{status.category}: spent ${format_amount(status.spent)} "
            f"of ${format_amount(status.limit)} this month, "
            f"${format_amount(status.remaining)} remaining"
        )

    def print_no_budget(self, category: str) -> None:
        self._print(f"No budget has been set for {category}.")

    def print_budget_exceeded(self, status: BudgetStatus) -> None:
        self._print(
            f"Warning: you have exceeded your {status.category} budget of "
            f"${format_amount(status.limit)} by ${format_amount(-status.remaining)}"
        )
