"""Mini README: Entry point CLI for the finledger personal ledger.

This script exposes a Typer CLI that either starts the browser surface
(FastAPI under uvicorn) or works on the stored ledger directly from the
terminal: adding, listing, removing, checking the balance and switching
the theme. All commands read settings from ``FINLEDGER_`` environment
variables and share the same store as the web surface.
"""

from __future__ import annotations

import typer
import uvicorn

from finledger.configuration import get_settings
from finledger.finance import SortKey, load_seed_transactions
from finledger.interface import LedgerViewModel
from finledger.interface.console import ConsoleDisplay, echo_notification, prompt_confirmation
from finledger.logging_utils import configure_root_logger, level_for_environment
from finledger.storage import create_store

cli = typer.Typer(help="Record income and expenses and keep a running balance.")


def _build_view_model(
    display: ConsoleDisplay, *, assume_yes: bool = False
) -> LedgerViewModel:
    settings = get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    return LedgerViewModel(
        create_store(settings),
        seed_provider=load_seed_transactions if settings.seed_demo_data else None,
        confirm=(lambda message: True) if assume_yes else prompt_confirmation,
        notify=echo_notification,
        display=display,
        settings=settings,
    )


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the browser surface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # 0.0.0.0 is a bind address only; browsers need a concrete host.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting finledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "finledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Positive amount, e.g. 49.90."),
    date: str = typer.Option(..., "--date", "-d", help="Date as YYYY-MM-DD."),
    income: bool = typer.Option(
        False, "--income/--expense", help="Record as income instead of expense."
    ),
) -> None:
    """Record a new transaction and show the updated balance."""

    view_model = _build_view_model(ConsoleDisplay(show_rows=False))
    transaction = view_model.add(description, amount, date, "income" if income else "expense")
    if transaction is None:
        raise typer.Exit(code=1)
    typer.echo(f"Recorded transaction {transaction.id}.")


@cli.command("list")
def list_transactions(
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive description filter."),
    sort: SortKey = typer.Option(SortKey.DATE_DESC, "--sort", help="Ordering of the list."),
) -> None:
    """Show the filtered, sorted list followed by the balance."""

    display = ConsoleDisplay()
    view_model = _build_view_model(display)
    display.show_rows(view_model.rows(search, sort))
    display.show_balance(view_model.balance_view())


@cli.command()
def balance() -> None:
    """Print the running balance."""

    view_model = _build_view_model(ConsoleDisplay(show_rows=False))
    view_model.refresh()


@cli.command()
def remove(
    transaction_id: int = typer.Argument(..., help="Identifier shown by `list`."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a transaction after confirmation."""

    view_model = _build_view_model(ConsoleDisplay(show_rows=False), assume_yes=yes)
    if not view_model.allow_deletion:
        echo_notification("Deletion is disabled.")
        raise typer.Exit(code=1)
    if view_model.remove(transaction_id):
        typer.echo(f"Removed transaction {transaction_id}.")
    else:
        typer.echo("Nothing removed.")


@cli.command()
def theme(
    toggle: bool = typer.Option(False, "--toggle", help="Switch between dark and light."),
) -> None:
    """Show, or toggle, the stored theme preference."""

    view_model = _build_view_model(ConsoleDisplay(show_rows=False, show_balance=False))
    current = view_model.toggle_theme() if toggle else view_model.theme
    typer.echo(f"Theme: {current.value}")


if __name__ == "__main__":
    cli()
