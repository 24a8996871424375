"""Mini README: Shared fixtures for the finledger test-suite.

Structure:
    * settings - isolated settings pointing at a temporary data directory.
    * make_transaction - factory for concise transaction construction.
"""

from __future__ import annotations

from typing import Callable

import pytest

from finledger.configuration import LedgerSettings
from finledger.finance import Transaction, TransactionType


@pytest.fixture()
def settings(tmp_path) -> LedgerSettings:
    return LedgerSettings(data_directory=tmp_path, storage_backend="memory")


@pytest.fixture()
def make_transaction() -> Callable[..., Transaction]:
    def _make(
        identifier: int,
        description: str = "Entry",
        amount: float = 10.0,
        occurred_on: str = "2024-01-01",
        kind: str = "expense",
    ) -> Transaction:
        return Transaction(
            id=identifier,
            description=description,
            amount=amount,
            date=occurred_on,
            type=TransactionType(kind),
        )

    return _make
