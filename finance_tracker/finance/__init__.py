"""Mini README: Ledger and derived views for the finance tracker.

``ledger`` owns the transaction collection, ``views`` computes totals,
filtered lists and the expense breakdown, and ``formatting`` turns amounts
and dates into display strings.
"""

from ..models import Transaction, TransactionType
from .formatting import (
    default_transaction_date,
    format_currency,
    format_date,
    format_signed_amount,
    format_type_label,
)
from .ledger import Ledger, ValidationError, open_ledger
from .views import (
    CategoryShare,
    Summary,
    TypeFilter,
    ViewConfig,
    category_breakdown,
    filter_and_sort,
    summarize,
)

__all__ = [
    "CategoryShare",
    "Ledger",
    "Summary",
    "Transaction",
    "TransactionType",
    "TypeFilter",
    "ValidationError",
    "ViewConfig",
    "category_breakdown",
    "default_transaction_date",
    "filter_and_sort",
    "format_currency",
    "format_date",
    "format_signed_amount",
    "format_type_label",
    "open_ledger",
    "summarize",
]
