"""Mini README: Whole-collection persistence for transactions.

Structure:
    * TransactionRepository - loads and saves every transaction as one JSON
      array stored under a single blob store key.

Loading fails soft. A missing blob yields an empty collection; undecodable
text, corrupt JSON or a payload that is not an array is logged and also
yields an empty collection; individual bad or duplicate records are logged
and skipped.
"""

from __future__ import annotations

import json
from typing import Iterable, List, Set

from ..logging_utils import get_logger
from ..models import Transaction
from .blob_store import BlobStore

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "transactions"


class TransactionRepository:
    """Serialise the full transaction collection into a blob store slot."""

    def __init__(self, store: BlobStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> List[Transaction]:
        """Return every stored transaction, skipping unreadable content."""

        # UnicodeDecodeError and JSONDecodeError are both ValueErrors.
        try:
            blob = self.store.read(self.key)
            if blob is None:
                LOGGER.debug("No stored transactions under key '%s'", self.key)
                return []
            records = json.loads(blob)
        except ValueError as error:
            LOGGER.warning(
                "Stored transactions under '%s' are unreadable (%s); starting empty",
                self.key,
                error,
            )
            return []
        if not isinstance(records, list):
            LOGGER.warning(
                "Stored transactions under '%s' are not a list; starting empty", self.key
            )
            return []

        transactions: List[Transaction] = []
        seen_ids: Set[int] = set()
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                LOGGER.warning("Skipping stored record %s: not an object", index)
                continue
            try:
                transaction = Transaction.from_dict(record)
            except ValueError as error:
                LOGGER.warning("Skipping stored record %s: %s", index, error)
                continue
            if transaction.id in seen_ids:
                LOGGER.warning("Skipping stored record %s: duplicate id %s", index, transaction.id)
                continue
            seen_ids.add(transaction.id)
            transactions.append(transaction)
        LOGGER.debug("Loaded %s transactions from key '%s'", len(transactions), self.key)
        return transactions

    def save(self, transactions: Iterable[Transaction]) -> None:
        """Overwrite the stored blob with the given collection."""

        payload = [transaction.as_dict() for transaction in transactions]
        self.store.write(self.key, json.dumps(payload, ensure_ascii=False))
        LOGGER.debug("Saved %s transactions under key '%s'", len(payload), self.key)
