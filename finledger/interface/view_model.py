"""Mini README: View-model owning the ledger, the theme and their persistence.

Structure:
    * LedgerViewModel - restores state, handles user operations, and pushes
      rows and balance to a ``LedgerDisplay``.
    * ConfirmPort / NotifyPort - blocking yes/no and alert capabilities.

Start-up reads the stored ledger snapshot; when it is missing or malformed
the seed provider is used, and when that is unavailable the ledger starts
empty. Every mutation refreshes the display and overwrites the stored
snapshot in full. Invalid input is reported through ``notify`` and never
raised to the caller.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Union

from ..configuration import LedgerSettings, get_settings
from ..finance import (
    BalanceView,
    FinanceLedger,
    IdGenerator,
    SortKey,
    Transaction,
    TransactionRow,
    TransactionType,
    build_balance_view,
    build_rows,
    compute_view,
    load_seed_transactions,
)
from ..finance.ledger import parse_amount
from ..logging_utils import get_logger
from ..storage import KeyValueStore
from .display import LedgerDisplay, RecordingDisplay, Theme

LOGGER = get_logger(__name__)

ConfirmPort = Callable[[str], bool]
NotifyPort = Callable[[str], None]
SeedProvider = Callable[[], Iterable[Transaction]]

AMOUNT_REJECTED_MESSAGE = "The amount must be greater than zero!"
DELETE_CONFIRMATION_MESSAGE = "Are you sure you want to delete this transaction?"


def _decline(message: str) -> bool:
    LOGGER.debug("No confirmation handler; declining: %s", message)
    return False


def _log_notification(message: str) -> None:
    LOGGER.warning("Notification: %s", message)


class LedgerViewModel:
    """Single owner of the ledger state and the operations the UI triggers."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        seed_provider: Optional[SeedProvider] = load_seed_transactions,
        confirm: ConfirmPort = _decline,
        notify: NotifyPort = _log_notification,
        display: Optional[LedgerDisplay] = None,
        id_generator: Optional[IdGenerator] = None,
        allow_deletion: Optional[bool] = None,
        settings: Optional[LedgerSettings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._store = store
        self._confirm = confirm
        self._notify = notify
        self.display = display or RecordingDisplay()
        self._allow_deletion = (
            self._settings.allow_deletion if allow_deletion is None else allow_deletion
        )
        self._search_term = ""
        self._sort_key = SortKey.DATE_DESC

        self._ledger = self._restore_ledger(seed_provider)
        self._ids = id_generator or IdGenerator()
        for transaction in self._ledger:
            self._ids.observe(transaction.id)
        self._theme = self._restore_theme()
        LOGGER.info(
            "Ledger view-model ready with %s transactions (theme=%s, store=%s)",
            len(self._ledger),
            self._theme.value,
            store.backend_name,
        )

    def _restore_ledger(self, seed_provider: Optional[SeedProvider]) -> FinanceLedger:
        stored = self._store.get(self._settings.transactions_key)
        if stored is not None:
            try:
                return FinanceLedger.from_json(stored)
            except ValueError as error:
                LOGGER.warning("Discarding stored ledger: %s", error)

        if seed_provider is None:
            LOGGER.info("No stored ledger and no seed provider; starting empty")
            return FinanceLedger()
        try:
            records = list(seed_provider() or [])
        except Exception as error:  # noqa: BLE001 - any seed failure means "no seed"
            LOGGER.warning("Seed provider unavailable (%s); starting empty", error)
            return FinanceLedger()
        try:
            seeded = [
                record if isinstance(record, Transaction) else Transaction.from_dict(record)
                for record in records
            ]
        except ValueError as error:
            LOGGER.warning("Discarding seed data: %s", error)
            return FinanceLedger()
        LOGGER.info("Seeding ledger with %s demo transactions", len(seeded))
        return FinanceLedger(seeded)

    def _restore_theme(self) -> Theme:
        stored = self._store.get(self._settings.theme_key)
        return Theme.DARK if stored == Theme.DARK.value else Theme.LIGHT

    def _persist(self) -> None:
        self._store.set(self._settings.transactions_key, self._ledger.to_json())
        LOGGER.debug("Persisted ledger snapshot with %s entries", len(self._ledger))

    @property
    def transactions(self) -> List[Transaction]:
        return self._ledger.list_transactions()

    @property
    def ledger(self) -> FinanceLedger:
        return self._ledger

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    @property
    def allow_deletion(self) -> bool:
        return self._allow_deletion

    def compute_view(
        self,
        search_term: Optional[str] = None,
        sort_key: Union[SortKey, str, None] = None,
    ) -> List[Transaction]:
        """Filtered and sorted projection; defaults to the current UI inputs."""

        term = self._search_term if search_term is None else search_term
        key = self._sort_key if sort_key is None else SortKey.from_str(sort_key)
        return compute_view(self._ledger, term, key)

    def compute_balance(self) -> float:
        return self._ledger.balance()

    def balance_view(self) -> BalanceView:
        return build_balance_view(self.compute_balance(), self._settings)

    def rows(
        self,
        search_term: Optional[str] = None,
        sort_key: Union[SortKey, str, None] = None,
    ) -> List[TransactionRow]:
        return build_rows(
            self.compute_view(search_term, sort_key),
            allow_deletion=self._allow_deletion,
            settings=self._settings,
        )

    def _render_list(self) -> None:
        self.display.show_rows(self.rows())

    def _render_balance(self) -> None:
        self.display.show_balance(self.balance_view())

    def refresh(self) -> None:
        """Apply the current list and balance to the display."""

        self._render_list()
        self._render_balance()

    def start(self) -> None:
        """Apply the restored theme and draw the initial screen."""

        self.display.apply_theme(self._theme)
        self.refresh()

    def add(
        self,
        description: str,
        amount: object,
        occurred_on: Union[str, date, None],
        transaction_type: Union[TransactionType, str],
    ) -> Optional[Transaction]:
        """Record a new transaction; returns ``None`` when the input is rejected."""

        parsed_amount = parse_amount(amount)
        if parsed_amount is None:
            LOGGER.info("Rejected transaction with amount %r", amount)
            self._notify(AMOUNT_REJECTED_MESSAGE)
            return None
        try:
            kind = TransactionType.from_str(transaction_type)
        except ValueError as error:
            LOGGER.info("Rejected transaction: %s", error)
            self._notify(str(error))
            return None

        if isinstance(occurred_on, datetime):
            occurred_text = occurred_on.date().isoformat()
        elif isinstance(occurred_on, date):
            occurred_text = occurred_on.isoformat()
        else:
            occurred_text = str(occurred_on or "").strip()

        transaction = Transaction(
            id=self._ids.next_id(),
            description="" if description is None else str(description),
            amount=parsed_amount,
            date=occurred_text,
            type=kind,
        )
        self._ledger.append(transaction)
        self.refresh()
        self._persist()
        self.display.reset_form()
        return transaction

    def remove(self, transaction_id: Union[int, str]) -> bool:
        """Delete a transaction after confirmation; ``True`` when one was removed."""

        if not self._allow_deletion:
            LOGGER.warning("Deletion is disabled; ignoring request for %s", transaction_id)
            return False
        try:
            identifier = int(transaction_id)
        except (TypeError, ValueError):
            LOGGER.debug("Ignoring delete request with id %r", transaction_id)
            return False
        if not self._confirm(DELETE_CONFIRMATION_MESSAGE):
            LOGGER.info("Deletion of %s declined", identifier)
            return False

        removed = self._ledger.remove(identifier)
        self.refresh()
        if removed:
            self._persist()
        return removed

    def set_search_term(self, search_term: Optional[str]) -> None:
        self._search_term = search_term or ""
        self._render_list()

    def set_sort_key(self, sort_key: Union[SortKey, str]) -> None:
        self._sort_key = SortKey.from_str(sort_key)
        self._render_list()

    def toggle_theme(self) -> Theme:
        """Flip between dark and light, apply it and persist the choice."""

        self._theme = self._theme.toggled()
        self.display.apply_theme(self._theme)
        self._store.set(self._settings.theme_key, self._theme.value)
        LOGGER.info("Theme switched to %s", self._theme.value)
        return self._theme
