"""Mini README: Derived views over a ledger snapshot.

Structure:
    * ViewConfig - type filter and search term chosen by the user.
    * Summary - income, expense and balance totals.
    * CategoryShare - one bar of the expense breakdown chart.
    * summarize / filter_and_sort / category_breakdown - pure functions that
      take a sequence of transactions and never mutate it.

Ordering rules: the transaction list is sorted by date with the most recent
first, and transactions sharing a date keep their insertion order. The
breakdown is ordered by summed amount, largest first, with ties kept in the
order the categories were first seen.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from ..logging_utils import get_logger
from ..models import Transaction, TransactionType

LOGGER = get_logger(__name__)

ZERO = Decimal("0")


class TypeFilter(str, Enum):
    """Transaction types the list view can be restricted to."""

    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """User-selected list filters."""

    type_filter: TypeFilter = TypeFilter.ALL
    search_term: str = ""

    @classmethod
    def from_raw(cls, type_filter: Optional[str] = None, search_term: Optional[str] = None) -> "ViewConfig":
        """Build a config from request parameters, defaulting blanks."""

        raw_filter = (type_filter or TypeFilter.ALL.value).strip().lower()
        try:
            parsed_filter = TypeFilter(raw_filter)
        except ValueError as error:
            raise ValueError(f"Unsupported type filter: {type_filter}") from error
        return cls(type_filter=parsed_filter, search_term=search_term or "")


@dataclass(frozen=True, slots=True)
class Summary:
    """Aggregate totals for the balance cards."""

    income: Decimal = ZERO
    expenses: Decimal = ZERO
    balance: Decimal = ZERO

    @property
    def is_negative(self) -> bool:
        return self.balance < 0

    def as_dict(self) -> Dict[str, str]:
        return {
            "income": str(self.income),
            "expenses": str(self.expenses),
            "balance": str(self.balance),
        }


@dataclass(frozen=True, slots=True)
class CategoryShare:
    """Summed expenses for one category and its bar width."""

    category: str
    amount: Decimal
    percentage: float


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """Total income and expenses; the balance is their difference."""

    income = ZERO
    expenses = ZERO
    for transaction in transactions:
        if transaction.type is TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return Summary(income=income, expenses=expenses, balance=income - expenses)


def filter_and_sort(transactions: Sequence[Transaction], config: ViewConfig) -> List[Transaction]:
    """Apply the type filter and search term, newest first."""

    filtered = list(transactions)
    if config.type_filter is not TypeFilter.ALL:
        wanted = TransactionType(config.type_filter.value)
        filtered = [transaction for transaction in filtered if transaction.type is wanted]

    needle = config.search_term.strip().casefold()
    if needle:
        filtered = [
            transaction
            for transaction in filtered
            if needle in transaction.description.casefold()
            or needle in transaction.category.casefold()
        ]

    # sorted() is stable, so equal dates keep insertion order even with reverse=True.
    ordered = sorted(filtered, key=lambda transaction: transaction.date, reverse=True)
    LOGGER.debug(
        "Filtered %s of %s transactions (type=%s search=%r)",
        len(ordered),
        len(transactions),
        config.type_filter.value,
        config.search_term,
    )
    return ordered


def category_breakdown(transactions: Iterable[Transaction]) -> Optional[List[CategoryShare]]:
    """Group expenses by category for the bar chart.

    Returns ``None`` when there are no expenses at all, so the chart can show
    its empty state instead of drawing nothing.
    """

    totals: Dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type is not TransactionType.EXPENSE:
            continue
        totals[transaction.category] = totals.get(transaction.category, ZERO) + transaction.amount

    if not totals:
        return None

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    max_amount = ranked[0][1]
    return [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=float(amount / max_amount * 100),
        )
        for category, amount in ranked
    ]
