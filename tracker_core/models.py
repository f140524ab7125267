"""Data models for the finance tracker domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict

__all__ = ["Entry", "Expense", "Income", "format_amount"]


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two fraction digits."""
    return f"{amount:.2f}"


@dataclass(frozen=True)
class Entry:
    description: str
    amount: Decimal
    category: str
    date: date = field(default_factory=date.today)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the entry to JSON-friendly natives."""
        return {
            "description": self.description,
            "amount": format_amount(self.amount),
            "category": self.category,
            "date": self.date.isoformat(),
        }

    def falls_between(self, start: date, end: date) -> bool:
        # An inverted range never matches.
        return start <= self.date <= end


@dataclass(frozen=True)
class Expense(Entry):
    pass


@dataclass(frozen=True)
class Income(Entry):
    pass
