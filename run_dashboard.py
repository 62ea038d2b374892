"""Mini README: Entry point CLI for the Pennywise dashboard.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI dashboard under uvicorn, and ``summary`` prints the demo ledger's
totals and category breakdown to the terminal. Settings come from
``PENNYWISE_*`` environment variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from pennywise.configuration import get_settings
from pennywise.finance import TransactionLedger
from pennywise.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch the Pennywise dashboard or inspect the demo ledger.")


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

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Pennywise on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "pennywise.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print totals and the spending breakdown for the demo ledger."""

    settings = get_settings()
    ledger = TransactionLedger(legacy_last_month=settings.legacy_last_month_estimate)
    typer.echo(f"Transactions: {len(ledger.transactions)}")
    typer.echo(f"Income:       {ledger.total_income:10.2f}")
    typer.echo(f"Expenses:     {ledger.total_expenses:10.2f}")
    typer.echo(f"Balance:      {ledger.balance:10.2f}")
    typer.echo(
        f"This month:   {ledger.this_month_expenses:10.2f} ({ledger.monthly_trend.value} vs "
        f"{ledger.last_month_expenses:.2f} last month)"
    )
    typer.echo("Spending by category:")
    for spending in ledger.category_spending:
        typer.echo(
            f"  {spending.category.value:<14}{spending.amount:10.2f}  {spending.formatted_percentage:>4}"
        )


if __name__ == "__main__":
    cli()
