"""Mini README: Display port through which the view-model shows its state.

Structure:
    * Theme - the two presentation themes.
    * LedgerDisplay - abstract surface receiving rows, balance and theme.
    * RecordingDisplay - keeps the last applied state; used by the web
      surface and tests.

Each ``show_*`` call replaces whatever was shown before, so applying the
same rows twice leaves the display unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from ..finance import BalanceView, TransactionRow


class Theme(str, Enum):
    """Presentation theme persisted alongside the ledger."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class LedgerDisplay(ABC):
    """Surface that renders the ledger screen."""

    @abstractmethod
    def show_rows(self, rows: Sequence[TransactionRow]) -> None:
        """Replace the displayed list with ``rows``."""

    @abstractmethod
    def show_balance(self, balance: BalanceView) -> None:
        """Replace the displayed balance."""

    @abstractmethod
    def apply_theme(self, theme: Theme) -> None:
        """Switch the document-level theme."""

    def reset_form(self) -> None:
        """Clear the entry form after a successful add."""


class RecordingDisplay(LedgerDisplay):
    """In-memory display holding exactly what was last rendered."""

    def __init__(self) -> None:
        self.rows: List[TransactionRow] = []
        self.balance: Optional[BalanceView] = None
        self.theme: Optional[Theme] = None
        self.form_resets = 0

    def show_rows(self, rows: Sequence[TransactionRow]) -> None:
        self.rows = list(rows)

    def show_balance(self, balance: BalanceView) -> None:
        self.balance = balance

    def apply_theme(self, theme: Theme) -> None:
        self.theme = theme

    def reset_form(self) -> None:
        self.form_resets += 1
