"""Mini README: Display helpers for amounts and dates.

Structure:
    * format_currency - symbol, grouping and two decimals from settings.
    * format_date - ISO dates rendered as DD/MM/YYYY.
    * format_signed_amount - "+" for income, "-" for expenses.
    * default_transaction_date - today's date for pre-filling the form.
    * format_type_label - "Income" or "Expense" for list rows.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..configuration import FinanceTrackerSettings, get_settings
from ..models import Transaction, TransactionType, parse_date

INVALID_DATE_LABEL = "Invalid date"
TYPE_LABELS = {TransactionType.INCOME: "Income", TransactionType.EXPENSE: "Expense"}


def format_currency(
    value: Union[Decimal, int, float],
    settings: Optional[FinanceTrackerSettings] = None,
) -> str:
    """Render ``value`` like ``R$ 1.234,50`` using configured separators."""

    settings = settings or get_settings()
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    units, cents = f"{abs(amount):,.2f}".split(".")
    units = units.replace(",", settings.thousands_separator)
    return f"{sign}{settings.currency_symbol} {units}{settings.decimal_separator}{cents}"


def format_date(value: object) -> str:
    """Render a date as DD/MM/YYYY, or a placeholder when unusable."""

    if value is None or value == "":
        return INVALID_DATE_LABEL
    try:
        parsed = parse_date(value)
    except ValueError:
        return INVALID_DATE_LABEL
    return parsed.strftime("%d/%m/%Y")


def format_signed_amount(
    transaction: Transaction,
    settings: Optional[FinanceTrackerSettings] = None,
) -> str:
    prefix = "+" if transaction.is_income else "-"
    return f"{prefix} {format_currency(transaction.amount, settings)}"


def default_transaction_date(today: Optional[date] = None) -> str:
    """Return today's ISO date, the default value of the form's date input."""

    return (today or date.today()).isoformat()


def format_type_label(transaction_type: TransactionType) -> str:
    """Return the list label for a transaction type."""

    return TYPE_LABELS[transaction_type]
