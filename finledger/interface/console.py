"""Mini README: Terminal rendering of the ledger screen for the CLI.

Structure:
    * ConsoleDisplay - ``LedgerDisplay`` that echoes rows and balance via Typer.
    * echo_notification / prompt_confirmation - blocking notify/confirm ports.
"""

from __future__ import annotations

from typing import Sequence

import typer

from ..finance import BalanceIndicator, BalanceView, TransactionRow
from .display import LedgerDisplay, Theme


def echo_notification(message: str) -> None:
    """Show a user-facing notification on stderr."""

    typer.secho(message, fg=typer.colors.YELLOW, err=True)


def prompt_confirmation(message: str) -> bool:
    """Ask a yes/no question, defaulting to no."""

    return typer.confirm(message, default=False)


class ConsoleDisplay(LedgerDisplay):
    """Print the list and balance as plain text lines."""

    def __init__(self, *, show_rows: bool = True, show_balance: bool = True) -> None:
        self._show_rows = show_rows
        self._show_balance = show_balance

    def show_rows(self, rows: Sequence[TransactionRow]) -> None:
        if not self._show_rows:
            return
        if not rows:
            typer.echo("No transactions.")
            return
        for row in rows:
            colour = typer.colors.GREEN if row.type.value == "income" else typer.colors.RED
            typer.echo(
                f"{row.transaction_id:>14}  {row.date_label:<12}  "
                + typer.style(f"{row.amount_label:>18}", fg=colour)
                + f"  {row.description}"
            )

    def show_balance(self, balance: BalanceView) -> None:
        if not self._show_balance:
            return
        colour = (
            typer.colors.GREEN
            if balance.indicator is BalanceIndicator.NON_NEGATIVE
            else typer.colors.RED
        )
        typer.echo("Balance: " + typer.style(balance.label, fg=colour, bold=True))

    def apply_theme(self, theme: Theme) -> None:
        return None
