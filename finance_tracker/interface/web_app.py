"""Mini README: FastAPI JSON interface for the finance tracker.

Structure:
    * create_application - application factory wiring routes to a ledger.
    * _transaction_row / _summary_payload - response shaping helpers.

Routes hand the view layer's outputs to the browser: totals, the filtered
transaction list and the expense breakdown. Adding and removing
transactions are the only mutating routes; delete confirmation is left to
the client.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Query
from fastapi.responses import JSONResponse

from ..configuration import FinanceTrackerSettings, get_settings
from ..finance import (
    Ledger,
    Summary,
    Transaction,
    ValidationError,
    ViewConfig,
    category_breakdown,
    default_transaction_date,
    filter_and_sort,
    format_currency,
    format_date,
    format_signed_amount,
    format_type_label,
    open_ledger,
    summarize,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _transaction_row(transaction: Transaction, settings: FinanceTrackerSettings) -> Dict[str, object]:
    row = transaction.as_dict()
    row["display_date"] = format_date(transaction.date)
    row["display_amount"] = format_signed_amount(transaction, settings)
    row["display_type"] = format_type_label(transaction.type)
    return row


def _summary_payload(summary: Summary, settings: FinanceTrackerSettings) -> Dict[str, object]:
    return {
        **summary.as_dict(),
        "display": {
            "income": format_currency(summary.income, settings),
            "expenses": format_currency(summary.expenses, settings),
            "balance": format_currency(summary.balance, settings),
        },
        "is_negative": summary.is_negative,
    }


def create_application(
    ledger: Optional[Ledger] = None,
    settings: Optional[FinanceTrackerSettings] = None,
) -> FastAPI:
    """Create the FastAPI application bound to a single ledger."""

    settings = settings or get_settings()
    if ledger is None:
        ledger = open_ledger()
    ledger.initialize()

    app = FastAPI(title="Finance Tracker", version="0.1.0")
    # Sync handlers run in the threadpool; the ledger expects one caller at a time.
    ledger_lock = threading.Lock()

    def snapshot():
        with ledger_lock:
            return ledger.list_transactions()

    @app.get("/api/summary")
    def summary() -> JSONResponse:
        """Return income, expense and balance totals."""

        totals = summarize(snapshot())
        return JSONResponse(_summary_payload(totals, settings))

    @app.get("/api/transactions")
    def list_transactions(
        type_filter: str = Query("all", alias="type"),
        search: str = Query(""),
    ) -> JSONResponse:
        """Return filtered transactions, newest first."""

        try:
            config = ViewConfig.from_raw(type_filter, search)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        rows = [
            _transaction_row(transaction, settings)
            for transaction in filter_and_sort(snapshot(), config)
        ]
        return JSONResponse({"transactions": rows, "count": len(rows)})

    @app.post("/api/transactions")
    def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        date: str = Form(""),
        category: str = Form(""),
        type: str = Form(""),
    ) -> JSONResponse:
        """Record a transaction submitted from the entry form."""

        try:
            with ledger_lock:
                transaction = ledger.add(
                    description=description,
                    amount=amount,
                    date=date,
                    category=category,
                    type=type,
                )
        except ValidationError as error:
            raise HTTPException(
                status_code=400,
                detail={"message": str(error), "problems": error.problems},
            ) from error
        return JSONResponse(_transaction_row(transaction, settings), status_code=201)

    @app.delete("/api/transactions/{transaction_id}")
    def remove_transaction(transaction_id: int) -> JSONResponse:
        """Delete a transaction; unknown ids report that nothing was removed."""

        with ledger_lock:
            removed = ledger.remove(transaction_id)
        return JSONResponse({"id": transaction_id, "removed": removed})

    @app.get("/api/transactions/{transaction_id}")
    def get_transaction(transaction_id: int) -> JSONResponse:
        """Return one transaction, or 404 when the id is unknown."""

        try:
            with ledger_lock:
                transaction = ledger.get_transaction(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=error.args[0]) from error
        return JSONResponse(_transaction_row(transaction, settings))

    @app.get("/api/category-breakdown")
    def breakdown() -> JSONResponse:
        """Return expense totals per category with relative bar widths."""

        shares = category_breakdown(snapshot())
        if shares is None:
            return JSONResponse({"has_data": False, "categories": []})
        return JSONResponse(
            {
                "has_data": True,
                "categories": [
                    {
                        "category": share.category,
                        "amount": str(share.amount),
                        "display_amount": format_currency(share.amount, settings),
                        "percentage": share.percentage,
                    }
                    for share in shares
                ],
            }
        )

    @app.get("/api/form-defaults")
    def form_defaults() -> JSONResponse:
        """Return initial values for the entry form."""

        return JSONResponse({"date": default_transaction_date()})

    return app
