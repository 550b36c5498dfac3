"""Mini README: Entry point CLI for the finance tracker.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port and production flags, and prints the totals of the
configured store. Settings are drawn from ``FINANCE_TRACKER_*`` environment
variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from finance_tracker.configuration import get_settings
from finance_tracker.finance import format_currency, open_ledger, summarize
from finance_tracker.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch and inspect the personal finance tracker.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot navigate to the 0.0.0.0 sentinel, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting finance tracker on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/api/summary"
    )
    uvicorn.run(
        "finance_tracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print income, expenses and balance for the configured store."""

    settings = get_settings()
    totals = summarize(open_ledger().list_transactions())
    typer.echo(f"Income:   {format_currency(totals.income, settings)}")
    typer.echo(f"Expenses: {format_currency(totals.expenses, settings)}")
    typer.echo(f"Balance:  {format_currency(totals.balance, settings)}")


if __name__ == "__main__":
    cli()
