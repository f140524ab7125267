"""Command objects produced by the parser, one per user action."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import ClassVar

from .budget import BudgetManager
from .exceptions import RecordNotFoundError
from .ledger import Ledger
from .models import Expense, Income
from .ui import ConsoleUI

__all__ = [
    "Command",
    "ErrorKind",
    "AddExpenseCommand",
    "AddIncomeCommand",
    "DeleteExpenseCommand",
    "DeleteIncomeCommand",
    "ListExpenseCommand",
    "ListIncomeCommand",
    "TotalExpenseCommand",
    "TotalIncomeCommand",
    "TotalExpenseBetweenCommand",
    "TotalIncomeBetweenCommand",
    "BalanceCommand",
    "SetBudgetCommand",
    "CheckBudgetCommand",
    "HelpCommand",
    "ExitCommand",
    "InvalidCommand",
]


class ErrorKind(enum.Enum):
    SYNTAX = "syntax"
    VALIDATION = "validation"


class Command(ABC):
    """A validated user action, executed against the ledger."""

    is_exit: ClassVar[bool] = False

    @abstractmethod
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ...


@dataclass(frozen=True)
class AddExpenseCommand(Command):
    expense: Expense

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ledger.add_expense(self.expense)
        ui.print_expense_added(self.expense)
        status = budget_manager.check(ledger, self.expense.category, self.expense.date)
        if status is not None and status.exceeded:
            ui.print_budget_exceeded(status)


@dataclass(frozen=True)
class AddIncomeCommand(Command):
    income: Income

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ledger.add_income(self.income)
        ui.print_income_added(self.income)


@dataclass(frozen=True)
class DeleteExpenseCommand(Command):
    index: int

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        try:
            removed = ledger.remove_expense(self.index)
        except RecordNotFoundError as exc:
            ui.print_error(str(exc))
            return
        ui.print_expense_deleted(removed)


@dataclass(frozen=True)
class DeleteIncomeCommand(Command):
    index: int

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        try:
            removed = ledger.remove_income(self.index)
        except RecordNotFoundError as exc:
            ui.print_error(str(exc))
            return
        ui.print_income_deleted(removed)


@dataclass(frozen=True)
class ListExpenseCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_expense_list(ledger.expenses)


@dataclass(frozen=True)
class ListIncomeCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_income_list(ledger.incomes)


@dataclass(frozen=True)
class TotalExpenseCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_total_expense(ledger.total_expense())


@dataclass(frozen=True)
class TotalIncomeCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_total_income(ledger.total_income())


@dataclass(frozen=True)
class TotalExpenseBetweenCommand(Command):
    start: date
    end: date

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        total = ledger.total_expense_between(self.start, self.end)
        ui.print_total_expense_between(total, self.start, self.end)


@dataclass(frozen=True)
class TotalIncomeBetweenCommand(Command):
    start: date
    end: date

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        total = ledger.total_income_between(self.start, self.end)
        ui.print_total_income_between(total, self.start, self.end)


@dataclass(frozen=True)
class BalanceCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_balance(ledger.balance())


@dataclass(frozen=True)
class SetBudgetCommand(Command):
    category: str
    amount: Decimal

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        limit = budget_manager.set_budget(self.category, self.amount)
        ui.print_budget_set(self.category, limit)


@dataclass(frozen=True)
class CheckBudgetCommand(Command):
    category: str

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        status = budget_manager.check(ledger, self.category)
        if status is None:
            ui.print_no_budget(self.category)
            return
        ui.print_budget_status(status)
        if status.exceeded:
            ui.print_budget_exceeded(status)


@dataclass(frozen=True)
class HelpCommand(Command):
    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_help()


@dataclass(frozen=True)
class ExitCommand(Command):
    is_exit: ClassVar[bool] = True

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_goodbye()


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Result of a line that could not be parsed; carries the diagnostic."""

    message: str
    kind: ErrorKind = ErrorKind.SYNTAX

    def execute(self, ledger: Ledger, ui: ConsoleUI, budget_manager: BudgetManager) -> None:
        ui.print_error(self.message)
