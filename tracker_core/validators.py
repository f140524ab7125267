"""Validation helpers shared by the command parser and the HTTP API."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from . import messages
from .exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
AMOUNT_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")
INDEX_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Amounts must stay below 10 ** MAX_AMOUNT_DIGITS.
MAX_AMOUNT_DIGITS = 12


def _quantize_two_decimals(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_amount(raw: object) -> Decimal:
    """Convert raw input to a strictly positive Decimal with two fraction digits."""
    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not AMOUNT_PATTERN.fullmatch(text):
        raise ValidationError(messages.NON_NUMERIC_AMOUNT_MESSAGE)

    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise ValidationError(messages.NON_NUMERIC_AMOUNT_MESSAGE) from exc
    if amount <= 0:
        raise ValidationError(messages.NON_POSITIVE_AMOUNT_MESSAGE)
    if amount.adjusted() >= MAX_AMOUNT_DIGITS:
        raise ValidationError(messages.AMOUNT_TOO_LARGE_MESSAGE)

    amount = _quantize_two_decimals(amount)
    # Anything below half a cent rounds away to nothing.
    if amount <= 0:
        raise ValidationError(messages.NON_POSITIVE_AMOUNT_MESSAGE)
    return amount


def validate_description(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(messages.BLANK_DESCRIPTION_MESSAGE)
    return value.strip()


def validate_category(value: object) -> str:
    """Return the trimmed, upper-cased category."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(messages.BLANK_CATEGORY_MESSAGE)
    return value.strip().upper()


def parse_index(raw: object) -> int:
    """Convert raw input to a one-based index (>= 1)."""
    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not INDEX_PATTERN.fullmatch(text):
        raise ValidationError(messages.NON_NUMERIC_INDEX_MESSAGE)
    index = int(text)
    if index <= 0:
        raise ValidationError(messages.NON_POSITIVE_INDEX_MESSAGE)
    return index


def parse_date(raw: object) -> date:
    """Parse a strict yyyy-MM-dd date."""
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not DATE_PATTERN.fullmatch(raw.strip()):
        raise ValidationError(messages.DATE_FORMAT_MESSAGE)
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(messages.DATE_FORMAT_MESSAGE) from exc
