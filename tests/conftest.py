"""Mini README: Shared fixtures for finance tracker tests.

Structure:
    * settings - isolated settings using the in-memory backend.
    * store / repository / ledger - a fresh persistence stack per test.
"""

from __future__ import annotations

import pytest

from finance_tracker.configuration import FinanceTrackerSettings
from finance_tracker.finance import Ledger
from finance_tracker.storage import MemoryBlobStore, TransactionRepository


@pytest.fixture()
def settings(tmp_path) -> FinanceTrackerSettings:
    return FinanceTrackerSettings(
        data_directory=tmp_path,
        storage_backend="memory",
        currency_symbol="R$",
        thousands_separator=".",
        decimal_separator=",",
    )


@pytest.fixture()
def store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture()
def repository(store: MemoryBlobStore) -> TransactionRepository:
    return TransactionRepository(store)


@pytest.fixture()
def ledger(repository: TransactionRepository) -> Ledger:
    ticks = iter(range(1_700_000_000_000, 1_800_000_000_000))
    instance = Ledger(repository, clock=lambda: next(ticks))
    instance.initialize()
    return instance
