"""Core business logic package for the finance tracker."""

from .budget import BudgetManager, BudgetStatus
from .commands import Command, ErrorKind, InvalidCommand
from .exceptions import RecordNotFoundError, ValidationError
from .ledger import Ledger
from .models import Expense, Income
from .parser import Parser
from .ui import ConsoleUI

__all__ = [
    "BudgetManager",
    "BudgetStatus",
    "Command",
    "ConsoleUI",
    "ErrorKind",
    "Expense",
    "Income",
    "InvalidCommand",
    "Ledger",
    "Parser",
    "RecordNotFoundError",
    "ValidationError",
]
