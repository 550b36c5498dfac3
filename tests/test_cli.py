"""Mini README: Tests for the Typer command line entry point.

The ``summary`` command reads the store named by ``FINANCE_TRACKER_*``
environment variables, so each test points the cached settings at a
temporary directory seeded with transactions.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from finance_tracker.configuration import get_settings
from finance_tracker.models import Transaction, TransactionType
from finance_tracker.storage import FileBlobStore, TransactionRepository
from main_finance_tracker import cli


@pytest.fixture()
def seeded_store(monkeypatch, tmp_path):
    monkeypatch.setenv("FINANCE_TRACKER_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("FINANCE_TRACKER_STORAGE_BACKEND", "file")
    monkeypatch.setenv("FINANCE_TRACKER_STORAGE_KEY", "transactions")
    TransactionRepository(FileBlobStore(tmp_path)).save(
        [
            Transaction(
                id=1,
                description="Salary",
                amount=Decimal("1000"),
                date=date(2024, 1, 5),
                category="Work",
                type=TransactionType.INCOME,
            ),
            Transaction(
                id=2,
                description="Rent",
                amount=Decimal("1400.50"),
                date=date(2024, 1, 1),
                category="Housing",
                type=TransactionType.EXPENSE,
            ),
        ]
    )
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def test_summary_prints_formatted_totals(seeded_store) -> None:
    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines == [
        "Income:   R$ 1.000,00",
        "Expenses: R$ 1.400,50",
        "Balance:  -R$ 400,50",
    ]


def test_summary_on_empty_store(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FINANCE_TRACKER_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("FINANCE_TRACKER_STORAGE_BACKEND", "file")
    get_settings.cache_clear()
    try:
        result = CliRunner().invoke(cli, ["summary"])
    finally:
        get_settings.cache_clear()

    assert result.exit_code == 0, result.output
    assert "Balance:  R$ 0,00" in result.output
