"""Mini README: Transaction data model shared by storage and the ledger.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable dataclass describing one recorded event.
    * parse_date / parse_amount - coercion helpers for raw user input.

The wire representation produced by ``Transaction.as_dict`` is the record
layout written to the blob store: ``id``, ``description``, ``amount``,
``date``, ``category`` and ``type``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping


class TransactionType(str, Enum):
    """Enumerate the supported transaction types."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    id: int
    description: str
    amount: Decimal
    date: date
    category: str
    type: TransactionType

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with JSON serialisable values."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "category": self.category,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Transaction":
        """Rebuild a transaction from its stored record.

        Raises ``ValueError`` when a required key is missing or holds a value
        that cannot be coerced. Unknown keys are ignored.
        """

        missing = [key for key in _RECORD_KEYS if key not in record]
        if missing:
            raise ValueError(f"Record is missing fields: {', '.join(missing)}")
        raw_id = record["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, str)):
            raise ValueError(f"Invalid transaction id: {raw_id!r}")
        try:
            transaction_id = int(raw_id)
        except ValueError as error:
            raise ValueError(f"Invalid transaction id: {raw_id!r}") from error
        description = str(record["description"]).strip()
        category = str(record["category"]).strip()
        if not description or not category:
            raise ValueError("Description and category must not be empty")
        return cls(
            id=transaction_id,
            description=description,
            amount=parse_amount(record["amount"]),
            date=parse_date(record["date"]),
            category=category,
            type=TransactionType.from_str(record["type"]),
        )


_RECORD_KEYS = ("id", "description", "amount", "date", "category", "type")

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999999999.99")


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValueError(f"Invalid date: {value!r}") from error
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def parse_amount(value: object) -> Decimal:
    """Coerce numbers or numeric strings into a positive ``Decimal``.

    Amounts are limited to cents and to ``MAX_AMOUNT`` so totals over any
    realistic ledger stay exact and can always be rounded for display.
    """

    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as error:
        raise ValueError(f"Invalid amount: {value!r}") from error
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be a positive number, got {value!r}")
    if amount > MAX_AMOUNT:
        raise ValueError(f"Amount must not exceed {MAX_AMOUNT}, got {value!r}")
    if amount != amount.quantize(CENT):
        raise ValueError(f"Amount must have at most two decimal places, got {value!r}")
    return amount
