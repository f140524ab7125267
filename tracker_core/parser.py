"""Turns raw input lines into command objects."""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Optional, Type

from . import messages
from .commands import (
    AddExpenseCommand,
    AddIncomeCommand,
    BalanceCommand,
    CheckBudgetCommand,
    Command,
    DeleteExpenseCommand,
    DeleteIncomeCommand,
    ErrorKind,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListExpenseCommand,
    ListIncomeCommand,
    SetBudgetCommand,
    TotalExpenseBetweenCommand,
    TotalExpenseCommand,
    TotalIncomeBetweenCommand,
    TotalIncomeCommand,
)
from .exceptions import ValidationError
from .models import Entry, Expense, Income
from .validators import (
    parse_amount,
    parse_date,
    parse_index,
    validate_category,
    validate_description,
)

logger = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<keyword>\S+)(?P<arguments>.*)", re.DOTALL)
ADD_ENTRY_ARGUMENT_FORMAT = re.compile(
    r"d/(?P<description>[^/]+)"
    r" a/(?P<amount>[^/]+)"
    r" c/(?P<category>[^/]+?)"
    r"(?: D/(?P<date>[^/]+))?"
)
DELETE_ENTRY_ARGUMENT_FORMAT = re.compile(r"i/(?P<index>[^/]+)")
DATE_RANGE_ARGUMENT_FORMAT = re.compile(r"s/(?P<start>[^/]+)e/(?P<end>[^/]+)")
SET_BUDGET_ARGUMENT_FORMAT = re.compile(r"c/(?P<category>[^/]+) a/(?P<amount>[^/]+)")
CHECK_BUDGET_ARGUMENT_FORMAT = re.compile(r"c/(?P<category>[^/]+)")

HELP_KEYWORD = "help"
ADD_EXPENSE_KEYWORD = "add_ex"
ADD_INCOME_KEYWORD = "add_in"
DELETE_EXPENSE_KEYWORD = "del_ex"
DELETE_INCOME_KEYWORD = "del_in"
LIST_EXPENSE_KEYWORD = "list_ex"
LIST_INCOME_KEYWORD = "list_in"
TOTAL_EXPENSE_KEYWORD = "total_ex"
TOTAL_INCOME_KEYWORD = "total_in"
EXPENSE_RANGE_KEYWORD = "btw_ex"
INCOME_RANGE_KEYWORD = "btw_in"
BALANCE_KEYWORD = "balance"
SET_BUDGET_KEYWORD = "set_budget"
CHECK_BUDGET_KEYWORD = "check_budget"
EXIT_KEYWORD = "end"


def _invalid(message: str = messages.INVALID_COMMAND_MESSAGE) -> InvalidCommand:
    return InvalidCommand(message, ErrorKind.SYNTAX)


class Parser:
    """Parses one line of user input into a :class:`Command`.

    ``parse_command`` never raises: malformed input comes back as an
    :class:`InvalidCommand` whose ``kind`` tells grammar errors apart from
    field validation errors.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Callable[[str], Command]] = {
            HELP_KEYWORD: self._no_arguments(HelpCommand),
            ADD_EXPENSE_KEYWORD: lambda args: self._prepare_add_entry(args, Expense),
            ADD_INCOME_KEYWORD: lambda args: self._prepare_add_entry(args, Income),
            DELETE_EXPENSE_KEYWORD: lambda args: self._prepare_delete(args, DeleteExpenseCommand),
            DELETE_INCOME_KEYWORD: lambda args: self._prepare_delete(args, DeleteIncomeCommand),
            LIST_EXPENSE_KEYWORD: self._no_arguments(ListExpenseCommand),
            LIST_INCOME_KEYWORD: self._no_arguments(ListIncomeCommand),
            TOTAL_EXPENSE_KEYWORD: self._no_arguments(TotalExpenseCommand),
            TOTAL_INCOME_KEYWORD: self._no_arguments(TotalIncomeCommand),
            EXPENSE_RANGE_KEYWORD: lambda args: self._prepare_range(args, TotalExpenseBetweenCommand),
            INCOME_RANGE_KEYWORD: lambda args: self._prepare_range(args, TotalIncomeBetweenCommand),
            BALANCE_KEYWORD: self._no_arguments(BalanceCommand),
            SET_BUDGET_KEYWORD: self._prepare_set_budget,
            CHECK_BUDGET_KEYWORD: self._prepare_check_budget,
            EXIT_KEYWORD: self._no_arguments(ExitCommand),
        }

    def parse_command(self, user_input: str) -> Command:
        matcher = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            return _invalid()

        keyword = matcher.group("keyword")
        handler = self._handlers.get(keyword)
        if handler is None:
            logger.debug("Unknown command keyword %r", keyword)
            return _invalid()

        try:
            return handler(matcher.group("arguments"))
        except ValidationError as exc:
            logger.debug("Rejected %r: %s", keyword, exc)
            return InvalidCommand(str(exc), ErrorKind.VALIDATION)

    # Argument preparation -------------------------------------------------
    @staticmethod
    def _no_arguments(command_type: Type[Command]) -> Callable[[str], Command]:
        def prepare(arguments: str) -> Command:
            if arguments.strip():
                return _invalid()
            return command_type()

        return prepare

    @staticmethod
    def _prepare_add_entry(arguments: str, entry_type: Type[Entry]) -> Command:
        matcher = ADD_ENTRY_ARGUMENT_FORMAT.fullmatch(arguments.strip())
        if matcher is None:
            return _invalid()

        # Field order matters: the first failing field decides the message.
        amount = parse_amount(matcher.group("amount"))
        description = validate_description(matcher.group("description"))
        category = validate_category(matcher.group("category"))
        raw_date: Optional[str] = matcher.group("date")

        if raw_date is None:
            entry = entry_type(description=description, amount=amount, category=category)
        else:
            entry = entry_type(
                description=description,
                amount=amount,
                category=category,
                date=parse_date(raw_date),
            )
        if isinstance(entry, Expense):
            return AddExpenseCommand(entry)
        return AddIncomeCommand(entry)

    @staticmethod
    def _prepare_delete(arguments: str, command_type: Callable[[int], Command]) -> Command:
        matcher = DELETE_ENTRY_ARGUMENT_FORMAT.fullmatch(arguments.strip())
        if matcher is None:
            return _invalid()
        return command_type(parse_index(matcher.group("index")))

    @staticmethod
    def _prepare_range(arguments: str, command_type: Callable[..., Command]) -> Command:
        matcher = DATE_RANGE_ARGUMENT_FORMAT.fullmatch(arguments.strip())
        if matcher is None:
            return _invalid()
        # No ordering check: an inverted range simply totals to zero.
        start = parse_date(matcher.group("start"))
        end = parse_date(matcher.group("end"))
        return command_type(start=start, end=end)

    @staticmethod
    def _prepare_set_budget(arguments: str) -> Command:
        matcher = SET_BUDGET_ARGUMENT_FORMAT.fullmatch(arguments.strip())
        if matcher is None:
            return _invalid()
        amount = parse_amount(matcher.group("amount"))
        category = validate_category(matcher.group("category"))
        return SetBudgetCommand(category=category, amount=amount)

    @staticmethod
    def _prepare_check_budget(arguments: str) -> Command:
        matcher = CHECK_BUDGET_ARGUMENT_FORMAT.fullmatch(arguments.strip())
        if matcher is None:
            return _invalid()
        return CheckBudgetCommand(validate_category(matcher.group("category")))
