"""In-memory ledger of expense and income entries."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from . import messages
from .exceptions import RecordNotFoundError
from .models import Entry, Expense, Income

logger = logging.getLogger(__name__)


def _sum_amounts(entries: Iterable[Entry]) -> Decimal:
    return sum((entry.amount for entry in entries), start=Decimal("0"))


class Ledger:
    """Ordered collections of expenses and incomes, addressed by one-based index.

    The ledger is not safe for concurrent mutation; callers sharing one
    between threads must serialise access themselves.
    """

    def __init__(self) -> None:
        self._expenses: List[Expense] = []
        self._incomes: List[Income] = []

    # Expenses -------------------------------------------------------------
    def add_expense(self, expense: Expense) -> None:
        self._expenses.append(expense)
        logger.debug("Added expense #%d: %s", len(self._expenses), expense)

    def remove_expense(self, index: int) -> Expense:
        """Remove and return the expense at one-based ``index``."""
        if not 1 <= index <= len(self._expenses):
            raise RecordNotFoundError(
                messages.EXPENSE_NOT_FOUND_MESSAGE.format(index=index, size=len(self._expenses))
            )
        removed = self._expenses.pop(index - 1)
        logger.debug("Removed expense #%d: %s", index, removed)
        return removed

    @property
    def expenses(self) -> List[Expense]:
        return list(self._expenses)

    def total_expense(self) -> Decimal:
        return _sum_amounts(self._expenses)

    def total_expense_between(self, start: date, end: date) -> Decimal:
        return _sum_amounts(e for e in self._expenses if e.falls_between(start, end))

    def total_expense_for_category(
        self, category: str, start: Optional[date] = None, end: Optional[date] = None
    ) -> Decimal:
        canonical = category.strip().upper()
        return _sum_amounts(
            e
            for e in self._expenses
            if e.category == canonical
            and (start is None or e.date >= start)
            and (end is None or e.date <= end)
        )

    # Incomes --------------------------------------------------------------
    def add_income(self, income: Income) -> None:
        self._incomes.append(income)
        logger.debug("Added income #%d: %s", len(self._incomes), income)

    def remove_income(self, index: int) -> Income:
        """Remove and return the income at one-based ``index``."""
        if not 1 <= index <= len(self._incomes):
            raise RecordNotFoundError(
                messages.INCOME_NOT_FOUND_MESSAGE.format(index=index, size=len(self._incomes))
            )
        removed = self._incomes.pop(index - 1)
        logger.debug("Removed income #%d: %s", index, removed)
        return removed

    @property
    def incomes(self) -> List[Income]:
        return list(self._incomes)

    def total_income(self) -> Decimal:
        return _sum_amounts(self._incomes)

    def total_income_between(self, start: date, end: date) -> Decimal:
        return _sum_amounts(i for i in self._incomes if i.falls_between(start, end))

    # Aggregates -----------------------------------------------------------
    def balance(self) -> Decimal:
        """Total income minus total expense."""
        return self.total_income() - self.total_expense()
