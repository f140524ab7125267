"""Monthly per-category spending limits."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional, Tuple

from .ledger import Ledger
from .validators import parse_amount, validate_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetStatus:
    category: str
    limit: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.limit - self.spent

    @property
    def exceeded(self) -> bool:
        return self.spent > self.limit


def month_bounds(on: date) -> Tuple[date, date]:
    """Return the first and last day of the calendar month containing ``on``."""
    last_day = calendar.monthrange(on.year, on.month)[1]
    return on.replace(day=1), on.replace(day=last_day)


class BudgetManager:
    """Tracks monthly budgets keyed by upper-cased category."""

    def __init__(self) -> None:
        self._budgets: Dict[str, Decimal] = {}

    def set_budget(self, category: str, amount: object) -> Decimal:
        canonical = validate_category(category)
        limit = parse_amount(amount)
        self._budgets[canonical] = limit
        logger.debug("Budget for %s set to %s", canonical, limit)
        return limit

    def get_budget(self, category: str) -> Optional[Decimal]:
        return self._budgets.get(category.strip().upper())

    def spending(self, ledger: Ledger, category: str, on: date) -> Decimal:
        start, end = month_bounds(on)
        return ledger.total_expense_for_category(category, start, end)

    def check(self, ledger: Ledger, category: str, on: Optional[date] = None) -> Optional[BudgetStatus]:
        """Compare the month's spending for ``category`` against its budget.

        Returns ``None`` when no budget has been set for the category.
        """
        canonical = category.strip().upper()
        limit = self._budgets.get(canonical)
        if limit is None:
            return None
        spent = self.spending(ledger, canonical, on or date.today())
        status = BudgetStatus(category=canonical, limit=limit, spent=spent)
        if status.exceeded:
            logger.info("Budget for %s exceeded: spent %s of %s", canonical, spent, limit)
        return status
