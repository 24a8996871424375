"""Mini README: In-memory personal ledger of income and expense entries.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - dataclass storing one entry plus serialisation helpers.
    * IdGenerator - strictly increasing, millisecond-based identifiers.
    * LedgerSummary - totals derived from the ledger.
    * FinanceLedger - ordered collection with append/remove and JSON export.

The ledger keeps entries in the order they were added; any sorting happens
in the view layer. Amounts are always stored positive and the sign comes
from the transaction type. The JSON form is a plain array of records using
the keys ``id``, ``description``, ``amount``, ``date`` and ``type``.
"""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_RECORD_KEYS = ("id", "description", "amount", "date", "type")


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error

    @property
    def sign(self) -> int:
        return 1 if self is TransactionType.INCOME else -1


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single recorded income or expense."""

    id: int
    description: str
    amount: float
    date: str
    type: TransactionType

    @property
    def occurred_on(self) -> Optional[date]:
        """Parsed calendar date, or ``None`` when the stored text is not ISO."""

        return parse_iso_date(self.date)

    @property
    def signed_amount(self) -> float:
        return self.type.sign * self.amount

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction as a JSON-ready persistence record."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "date": self.date,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, record: object) -> "Transaction":
        """Build a transaction from a persistence record, validating every field."""

        if not isinstance(record, dict):
            raise ValueError(f"Transaction records must be objects, got {type(record).__name__}")
        missing = [key for key in _RECORD_KEYS if key not in record]
        if missing:
            raise ValueError(f"Transaction record is missing fields: {', '.join(missing)}")

        identifier = record["id"]
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise ValueError(f"Transaction id must be an integer, got {identifier!r}")
        amount = parse_amount(record["amount"])
        if amount is None:
            raise ValueError(f"Transaction amount must be a positive number, got {record['amount']!r}")
        description = record["description"]
        occurred = record["date"]
        if not isinstance(description, str) or not isinstance(occurred, str):
            raise ValueError("Transaction description and date must be strings")

        return cls(
            id=identifier,
            description=description,
            amount=amount,
            date=occurred,
            type=TransactionType.from_str(str(record["type"])),
        )


def parse_amount(value: object) -> Optional[float]:
    """Return ``value`` as a positive finite float, or ``None`` when it is not one."""

    if isinstance(value, bool):
        return None
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` text, returning ``None`` for empty or malformed input."""

    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class IdGenerator:
    """Hand out strictly increasing identifiers derived from wall-clock milliseconds.

    Two calls within the same millisecond still receive distinct ids because
    each id is at least one greater than the previous one.
    """

    def __init__(self, clock: Callable[[], float] = time.time, last_id: int = 0) -> None:
        self._clock = clock
        self._last_id = last_id

    def observe(self, identifier: int) -> None:
        """Make sure future ids stay above an id seen elsewhere (e.g. from storage)."""

        self._last_id = max(self._last_id, identifier)

    def next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        self._last_id = max(now_ms, self._last_id + 1)
        return self._last_id


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Aggregated totals across the whole ledger."""

    income_total: float
    expense_total: float
    balance: float
    count: int


class FinanceLedger:
    """Ordered collection of transactions, kept in insertion order."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Finance ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FinanceLedger):
            return NotImplemented
        return self._transactions == other._transactions

    def append(self, transaction: Transaction) -> None:
        """Add a transaction to the end of the ledger."""

        self._transactions.append(transaction)
        LOGGER.info(
            "Recorded %s %s of %.2f (%s)",
            transaction.type.value,
            transaction.id,
            transaction.amount,
            transaction.description,
        )

    def remove(self, transaction_id: int) -> bool:
        """Drop the transaction with ``transaction_id``; report whether anything changed."""

        remaining = [entry for entry in self._transactions if entry.id != transaction_id]
        if len(remaining) == len(self._transactions):
            LOGGER.debug("No transaction with id %s to remove", transaction_id)
            return False
        self._transactions = remaining
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def list_transactions(self) -> List[Transaction]:
        """Return a copy of the transactions in insertion order."""

        return list(self._transactions)

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def balance(self) -> float:
        """Signed sum of all amounts: income adds, expense subtracts."""

        return sum((entry.signed_amount for entry in self._transactions), 0.0)

    def summarise(self) -> LedgerSummary:
        income = sum(
            (e.amount for e in self._transactions if e.type is TransactionType.INCOME), 0.0
        )
        expenses = sum(
            (e.amount for e in self._transactions if e.type is TransactionType.EXPENSE), 0.0
        )
        return LedgerSummary(
            income_total=income,
            expense_total=expenses,
            balance=income - expenses,
            count=len(self._transactions),
        )

    def export_snapshot(self) -> Dict[str, List[Dict[str, object]]]:
        """Export transactions grouped by type for JSON responses."""

        income: List[Dict[str, object]] = []
        expenses: List[Dict[str, object]] = []
        for transaction in self._transactions:
            if transaction.type is TransactionType.INCOME:
                income.append(transaction.as_dict())
            else:
                expenses.append(transaction.as_dict())
        return {"income": income, "expenses": expenses}

    def to_json(self) -> str:
        """Serialise the full ledger as a JSON array of records."""

        return json.dumps([entry.as_dict() for entry in self._transactions], ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str) -> "FinanceLedger":
        """Rebuild a ledger from :meth:`to_json` output.

        Raises ``ValueError`` when the payload is not a JSON array of valid
        records; a partially valid payload is rejected as a whole.
        """

        try:
            records = json.loads(payload)
        except (TypeError, json.JSONDecodeError) as error:
            raise ValueError(f"Stored ledger is not valid JSON: {error}") from error
        if not isinstance(records, list):
            raise ValueError("Stored ledger must be a JSON array")
        return cls(Transaction.from_dict(record) for record in records)
