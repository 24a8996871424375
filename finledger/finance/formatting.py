"""Mini README: Display formatting for amounts and dates.

Structure:
    * format_currency - locale-style money text (``R$ 1.500,00`` by default).
    * format_signed_amount - currency text prefixed with ``+`` or ``-`` by type.
    * format_date - ``YYYY-MM-DD`` to ``DD/MM/YYYY`` with a placeholder fallback.

Symbol and separators default to Brazilian real conventions and can be
overridden through :class:`~finledger.configuration.LedgerSettings`.
"""

from __future__ import annotations

from typing import Final, Optional

from ..configuration import LedgerSettings
from .ledger import Transaction, TransactionType

DEFAULT_CURRENCY_SYMBOL: Final = "R$"
DEFAULT_THOUSANDS_SEPARATOR: Final = "."
DEFAULT_DECIMAL_SEPARATOR: Final = ","
INVALID_DATE_LABEL: Final = "Invalid date"


def format_currency(value: float, settings: Optional[LedgerSettings] = None) -> str:
    """Format ``value`` with two decimals, grouped thousands and the currency symbol."""

    if settings is None:
        symbol = DEFAULT_CURRENCY_SYMBOL
        thousands = DEFAULT_THOUSANDS_SEPARATOR
        decimal = DEFAULT_DECIMAL_SEPARATOR
    else:
        symbol = settings.currency_symbol
        thousands = settings.thousands_separator
        decimal = settings.decimal_separator

    rounded = round(value, 2)
    digits = f"{abs(rounded):,.2f}"
    # swap the en-US separators for the configured ones in one pass
    digits = "".join(
        thousands if char == "," else decimal if char == "." else char for char in digits
    )
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol} {digits}"


def format_signed_amount(
    transaction: Transaction, settings: Optional[LedgerSettings] = None
) -> str:
    """Return e.g. ``- R$ 10,00`` for an expense and ``+ R$ 10,00`` for income."""

    prefix = "-" if transaction.type is TransactionType.EXPENSE else "+"
    return f"{prefix} {format_currency(transaction.amount, settings)}"


def format_date(value: Optional[str]) -> str:
    """Render an ISO date as ``DD/MM/YYYY``; empty or malformed input yields a placeholder."""

    if not value:
        return INVALID_DATE_LABEL
    parts = value.split("-")
    if len(parts) != 3 or not all(parts):
        return INVALID_DATE_LABEL
    year, month, day = parts
    return f"{day}/{month}/{year}"
