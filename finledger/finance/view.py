"""Mini README: Derive what the ledger screen shows from the raw ledger.

Structure:
    * SortKey - the four orderings offered by the sort selector.
    * compute_view - pure filter + stable sort over a sequence of transactions.
    * TransactionRow / build_rows - display-ready rows for the list.
    * BalanceIndicator / BalanceView / build_balance_view - balance text and state.

Nothing here touches a display or a store, so the derivation can be tested
without any UI. Applying the result to a screen is the job of
``finledger.interface``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from ..configuration import LedgerSettings
from ..logging_utils import get_logger
from .formatting import format_currency, format_date, format_signed_amount
from .ledger import Transaction, TransactionType

LOGGER = get_logger(__name__)


class SortKey(str, Enum):
    """Orderings available for the transaction list."""

    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    AMOUNT_DESC = "amount-desc"
    AMOUNT_ASC = "amount-asc"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "SortKey":
        """Coerce selector text into a sort key, defaulting to newest first."""

        if isinstance(value, SortKey):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            LOGGER.warning("Unknown sort key %r, falling back to %s", value, cls.DATE_DESC.value)
            return cls.DATE_DESC


def _date_key(transaction: Transaction) -> date:
    return transaction.occurred_on or date.min


def _amount_key(transaction: Transaction) -> float:
    return transaction.amount


def compute_view(
    transactions: Iterable[Transaction],
    search_term: str = "",
    sort_key: SortKey = SortKey.DATE_DESC,
) -> List[Transaction]:
    """Filter by description substring (case-insensitive) and sort stably.

    Entries that compare equal keep their ledger order, for descending keys
    too. Entries whose date cannot be parsed sort as the oldest.
    """

    needle = (search_term or "").casefold()
    filtered = [entry for entry in transactions if needle in entry.description.casefold()]

    key = _date_key if sort_key in (SortKey.DATE_DESC, SortKey.DATE_ASC) else _amount_key
    descending = sort_key in (SortKey.DATE_DESC, SortKey.AMOUNT_DESC)
    ordered = sorted(filtered, key=key, reverse=descending)
    LOGGER.debug(
        "View computed: %s entries matched %r, sorted by %s",
        len(ordered),
        search_term,
        sort_key.value,
    )
    return ordered


@dataclass(frozen=True, slots=True)
class TransactionRow:
    """One display row of the transaction list."""

    transaction_id: int
    description: str
    date_label: str
    amount_label: str
    type: TransactionType
    delete_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "id": self.transaction_id,
            "description": self.description,
            "date": self.date_label,
            "amount": self.amount_label,
            "type": self.type.value,
            "delete_id": self.delete_id,
        }


def build_rows(
    view: Sequence[Transaction],
    *,
    allow_deletion: bool = True,
    settings: Optional[LedgerSettings] = None,
) -> List[TransactionRow]:
    """Turn a computed view into display rows, one per transaction."""

    return [
        TransactionRow(
            transaction_id=entry.id,
            description=entry.description,
            date_label=format_date(entry.date),
            amount_label=format_signed_amount(entry, settings),
            type=entry.type,
            delete_id=entry.id if allow_deletion else None,
        )
        for entry in view
    ]


class BalanceIndicator(str, Enum):
    """Two-state colour cue for the balance (zero counts as non-negative)."""

    NON_NEGATIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True, slots=True)
class BalanceView:
    """Balance amount together with its display text and indicator."""

    amount: float
    label: str
    indicator: BalanceIndicator

    def as_dict(self) -> dict:
        return {"amount": self.amount, "label": self.label, "indicator": self.indicator.value}


def build_balance_view(
    balance: float, settings: Optional[LedgerSettings] = None
) -> BalanceView:
    indicator = (
        BalanceIndicator.NON_NEGATIVE if round(balance, 2) >= 0 else BalanceIndicator.NEGATIVE
    )
    return BalanceView(
        amount=balance,
        label=format_currency(balance, settings),
        indicator=indicator,
    )
