"""Mini README: Tests for totals, list filtering and the expense breakdown.

These tests confirm the view helpers agree with each other (breakdown sums
to the expense total, income and expense filters partition the list) and
cover the Salary/Rent walkthrough shown on a fresh dashboard.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.finance import (
    Ledger,
    Transaction,
    TransactionType,
    TypeFilter,
    ViewConfig,
    category_breakdown,
    filter_and_sort,
    format_currency,
    summarize,
)


def _txn(id_: int, description: str, amount: str, day: date, category: str, kind: str) -> Transaction:
    return Transaction(
        id=id_,
        description=description,
        amount=Decimal(amount),
        date=day,
        category=category,
        type=TransactionType(kind),
    )


@pytest.fixture()
def sample() -> list:
    return [
        _txn(1, "Salary", "3000", date(2024, 3, 1), "Work", "income"),
        _txn(2, "Supermarket", "210.40", date(2024, 3, 2), "Food", "expense"),
        _txn(3, "Freelance site", "800", date(2024, 2, 20), "Work", "income"),
        _txn(4, "Rent", "1200", date(2024, 3, 1), "Housing", "expense"),
        _txn(5, "Restaurant", "89.60", date(2024, 3, 2), "Food", "expense"),
        _txn(6, "Bus pass", "0.1", date(2024, 1, 15), "Transport", "expense"),
    ]


def test_summarize_empty_is_zero() -> None:
    totals = summarize([])
    assert (totals.income, totals.expenses, totals.balance) == (0, 0, 0)
    assert totals.is_negative is False


def test_summarize_is_additive(sample) -> None:
    left, right = sample[:3], sample[3:]
    combined = summarize(sample)
    a, b = summarize(left), summarize(right)
    assert combined.income == a.income + b.income
    assert combined.expenses == a.expenses + b.expenses
    assert combined.balance == combined.income - combined.expenses


def test_summarize_flags_negative_balance() -> None:
    totals = summarize([_txn(1, "Rent", "10", date(2024, 1, 1), "Housing", "expense")])
    assert totals.balance == Decimal("-10")
    assert totals.is_negative is True


def test_filter_all_sorts_newest_first_with_stable_ties(sample) -> None:
    ordered = filter_and_sort(sample, ViewConfig())
    assert [transaction.id for transaction in ordered] == [2, 5, 1, 4, 3, 6]


def test_filter_by_type_partitions_collection(sample) -> None:
    income = filter_and_sort(sample, ViewConfig(type_filter=TypeFilter.INCOME))
    expenses = filter_and_sort(sample, ViewConfig(type_filter=TypeFilter.EXPENSE))
    assert all(transaction.type is TransactionType.INCOME for transaction in income)
    assert all(transaction.type is TransactionType.EXPENSE for transaction in expenses)
    assert {t.id for t in income} | {t.id for t in expenses} == {t.id for t in sample}


def test_search_matches_description_or_category_case_insensitively(sample) -> None:
    by_category = filter_and_sort(sample, ViewConfig(search_term="FOOD"))
    assert [transaction.id for transaction in by_category] == [2, 5]

    by_description = filter_and_sort(sample, ViewConfig(search_term="lance"))
    assert [transaction.id for transaction in by_description] == [3]

    combined = filter_and_sort(sample, ViewConfig(type_filter=TypeFilter.EXPENSE, search_term="work"))
    assert combined == []


def test_filter_does_not_mutate_input(sample) -> None:
    original = list(sample)
    filter_and_sort(sample, ViewConfig(search_term="rent"))
    assert sample == original


def test_view_config_from_raw_defaults_and_rejects_unknown() -> None:
    assert ViewConfig.from_raw(None, None) == ViewConfig()
    assert ViewConfig.from_raw(" Income ", "x").type_filter is TypeFilter.INCOME
    with pytest.raises(ValueError):
        ViewConfig.from_raw("transfers", "")


def test_category_breakdown_groups_and_orders(sample) -> None:
    shares = category_breakdown(sample)
    assert [share.category for share in shares] == ["Housing", "Food", "Transport"]
    assert shares[0].percentage == pytest.approx(100.0)
    assert shares[1].amount == Decimal("300.00")
    assert shares[1].percentage == pytest.approx(25.0)
    assert sum(share.amount for share in shares) == summarize(sample).expenses


def test_category_breakdown_without_expenses_signals_no_data(sample) -> None:
    incomes = [transaction for transaction in sample if transaction.type is TransactionType.INCOME]
    assert category_breakdown(incomes) is None
    assert category_breakdown([]) is None


def test_salary_and_rent_walkthrough(ledger: Ledger) -> None:
    """Two entries produce the expected totals, ordering and single bar."""

    ledger.add(description="Salary", amount=1000, date="2024-01-05", category="Work", type="income")
    ledger.add(description="Rent", amount=400, date="2024-01-01", category="Housing", type="expense")
    transactions = ledger.list_transactions()

    totals = summarize(transactions)
    assert (totals.income, totals.expenses, totals.balance) == (
        Decimal("1000"),
        Decimal("400"),
        Decimal("600"),
    )
    ordered = filter_and_sort(transactions, ViewConfig.from_raw("all", ""))
    assert [transaction.description for transaction in ordered] == ["Salary", "Rent"]

    shares = category_breakdown(transactions)
    assert len(shares) == 1
    assert shares[0].category == "Housing"
    assert shares[0].amount == Decimal("400")
    assert shares[0].percentage == pytest.approx(100.0)


def test_totals_stay_exact_with_large_and_cent_amounts(settings) -> None:
    """Sums over many extreme amounts are exact and still format."""

    transactions = [
        _txn(i, "Snack", "0.01", date(2024, 1, 1), "Food", "expense") for i in range(1000)
    ] + [
        _txn(1000 + i, "Building", "999999999999.99", date(2024, 1, 2), "Housing", "expense")
        for i in range(1000)
    ]

    totals = summarize(transactions)
    assert totals.expenses == Decimal("1000000000000000.00")
    assert totals.balance == -totals.expenses

    shares = category_breakdown(transactions)
    assert [share.category for share in shares] == ["Housing", "Food"]
    assert sum(share.amount for share in shares) == totals.expenses
    assert shares[1].amount == Decimal("10.00")
    assert 0 < shares[1].percentage < 1e-9

    assert format_currency(totals.balance, settings) == "-R$ 1.000.000.000.000.000,00"


def test_float_like_inputs_sum_without_drift(ledger: Ledger) -> None:
    ledger.add(description="Gum", amount=0.1, date="2024-01-01", category="Food", type="expense")
    ledger.add(description="Mints", amount=0.2, date="2024-01-01", category="Food", type="expense")

    totals = summarize(ledger.list_transactions())
    assert totals.expenses == Decimal("0.3")
    assert category_breakdown(ledger.list_transactions())[0].amount == totals.expenses
