"""Mini README: Finance domain for the personal ledger.

This package groups the transaction model, the ordered in-memory ledger,
the demo seed data, display formatting, and the pure view derivation
(filter, sort, rows, balance). Nothing here performs I/O; persistence
lives in ``finledger.storage``.
"""

from .formatting import INVALID_DATE_LABEL, format_currency, format_date, format_signed_amount
from .ledger import FinanceLedger, IdGenerator, LedgerSummary, Transaction, TransactionType
from .seed import DEMO_TRANSACTIONS, load_seed_transactions
from .view import (
    BalanceIndicator,
    BalanceView,
    SortKey,
    TransactionRow,
    build_balance_view,
    build_rows,
    compute_view,
)

__all__ = [
    "BalanceIndicator",
    "BalanceView",
    "DEMO_TRANSACTIONS",
    "FinanceLedger",
    "INVALID_DATE_LABEL",
    "IdGenerator",
    "LedgerSummary",
    "SortKey",
    "Transaction",
    "TransactionRow",
    "TransactionType",
    "build_balance_view",
    "build_rows",
    "compute_view",
    "format_currency",
    "format_date",
    "format_signed_amount",
    "load_seed_transactions",
]
