"""Mini README: Package initializer for the personal finance tracker.

The tracker records income and expense transactions, persists them as a
single JSON blob and derives totals, filtered lists and a category
breakdown for the web interface. Sub-packages:

    * storage - blob stores and the transaction repository.
    * finance - the ledger, view helpers and display formatting.
    * interface - FastAPI application exposing the views as JSON.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
