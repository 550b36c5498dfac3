"""Mini README: Authoritative in-memory ledger of income and expenses.

Structure:
    * ValidationError - raised when ``Ledger.add`` receives unusable input.
    * Ledger - owns the transaction collection and persists every mutation.

The ledger loads its collection once from a ``TransactionRepository`` and
writes the whole collection back after each successful add or remove.
Transactions cannot be edited in place; callers remove and re-add instead.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Sequence

from ..configuration import get_settings
from ..logging_utils import get_logger
from ..models import MAX_AMOUNT, Transaction, TransactionType, parse_amount, parse_date
from ..storage import TransactionRepository, create_blob_store

LOGGER = get_logger(__name__)

GENERIC_VALIDATION_MESSAGE = "Please fill in all fields with valid values."
AMOUNT_PROBLEM = (
    f"amount must be a positive number up to {MAX_AMOUNT} with at most two decimal places"
)


class ValidationError(ValueError):
    """Raised when a candidate transaction is incomplete or invalid."""

    def __init__(self, problems: Sequence[str]) -> None:
        super().__init__(GENERIC_VALIDATION_MESSAGE)
        self.problems = list(problems)


def _milliseconds_now() -> int:
    return time.time_ns() // 1_000_000


class Ledger:
    """Manage the transaction collection backed by a repository."""

    def __init__(
        self,
        repository: TransactionRepository,
        *,
        clock: Callable[[], int] = _milliseconds_now,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._transactions: Dict[int, Transaction] = {}
        self._last_id = 0
        self._initialised = False

    def initialize(self) -> None:
        """Load the persisted collection; later calls are ignored."""

        if self._initialised:
            return
        for transaction in self._repository.load():
            self._transactions[transaction.id] = transaction
            self._last_id = max(self._last_id, transaction.id)
        self._initialised = True
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def _next_id(self) -> int:
        """Return a time based identifier strictly greater than any issued."""

        self._last_id = max(self._clock(), self._last_id + 1)
        return self._last_id

    def _persist(self) -> None:
        self._repository.save(self._transactions.values())

    def add(
        self,
        *,
        description: object,
        amount: object,
        date: object,
        category: object,
        type: object,
    ) -> Transaction:
        """Validate candidate fields, store a new transaction and persist it."""

        self.initialize()
        problems: List[str] = []

        clean_description = str(description).strip() if description is not None else ""
        if not clean_description:
            problems.append("description is required")
        clean_category = str(category).strip() if category is not None else ""
        if not clean_category:
            problems.append("category is required")

        parsed_amount = None
        if amount is None or (isinstance(amount, str) and not amount.strip()):
            problems.append("amount is required")
        else:
            try:
                parsed_amount = parse_amount(amount)
            except ValueError:
                problems.append(AMOUNT_PROBLEM)

        parsed_date = None
        if date is None or (isinstance(date, str) and not date.strip()):
            problems.append("date is required")
        else:
            try:
                parsed_date = parse_date(date)
            except ValueError:
                problems.append("date must be an ISO calendar date (YYYY-MM-DD)")

        parsed_type = None
        if type is None or (isinstance(type, str) and not type.strip()):
            problems.append("type is required")
        else:
            try:
                parsed_type = TransactionType.from_str(type)
            except ValueError:
                problems.append("type must be 'income' or 'expense'")

        if problems:
            LOGGER.info("Rejected transaction: %s", "; ".join(problems))
            raise ValidationError(problems)

        transaction = Transaction(
            id=self._next_id(),
            description=clean_description,
            amount=parsed_amount,
            date=parsed_date,
            category=clean_category,
            type=parsed_type,
        )
        self._transactions[transaction.id] = transaction
        self._persist()
        LOGGER.info(
            "Added %s transaction %s (%s %s)",
            transaction.type.value,
            transaction.id,
            transaction.category,
            transaction.amount,
        )
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Delete a transaction by id, returning whether anything was removed."""

        self.initialize()
        if self._transactions.pop(transaction_id, None) is None:
            LOGGER.debug("Remove requested for unknown transaction %s", transaction_id)
            return False
        self._persist()
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def list_transactions(self) -> List[Transaction]:
        """Return a copy of the collection in insertion order."""

        self.initialize()
        return list(self._transactions.values())

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Look up one transaction by id; unknown ids raise ``KeyError``."""

        self.initialize()
        try:
            return self._transactions[transaction_id]
        except KeyError as error:
            raise KeyError(f"No transaction with id {transaction_id}") from error


def open_ledger(repository: Optional[TransactionRepository] = None) -> Ledger:
    """Build and initialise a ledger from configured storage."""

    if repository is None:
        settings = get_settings()
        repository = TransactionRepository(create_blob_store(settings), key=settings.storage_key)
    ledger = Ledger(repository)
    ledger.initialize()
    return ledger
