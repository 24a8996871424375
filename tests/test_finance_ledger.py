"""Mini README: Tests covering the ordered finance ledger and its records.

Structure:
    * Transaction type coercion and record validation.
    * Ledger append/remove ordering, balance and summary totals.
    * JSON export and reload, including malformed payloads.
    * Identifier generation under a frozen clock.
"""

from __future__ import annotations

import json
from datetime import date

import pytest

from finledger.finance import FinanceLedger, IdGenerator, Transaction, TransactionType


def test_transaction_type_from_str_normalises_case() -> None:
    """Selector values arrive in arbitrary casing and padding."""

    assert TransactionType.from_str("  Income ") is TransactionType.INCOME
    with pytest.raises(ValueError):
        TransactionType.from_str("transfer")


def test_transaction_exposes_sign_and_date(make_transaction) -> None:
    expense = make_transaction(1, amount=25.0, occurred_on="2024-03-07")
    undated = make_transaction(2, kind="income", occurred_on="")

    assert expense.signed_amount == pytest.approx(-25.0)
    assert expense.occurred_on == date(2024, 3, 7)
    assert undated.signed_amount == pytest.approx(10.0)
    assert undated.occurred_on is None


@pytest.mark.parametrize(
    "record",
    [
        {"id": 1, "description": "x", "amount": 0, "date": "2024-01-01", "type": "income"},
        {"id": 1, "description": "x", "amount": -4, "date": "2024-01-01", "type": "income"},
        {"id": "1", "description": "x", "amount": 4, "date": "2024-01-01", "type": "income"},
        {"id": 1, "description": "x", "amount": 4, "date": "2024-01-01", "type": "gift"},
        {"id": 1, "description": "x", "amount": 4, "type": "income"},
        ["not", "an", "object"],
    ],
)
def test_from_dict_rejects_malformed_records(record) -> None:
    """Stored records must carry every field with a valid value."""

    with pytest.raises(ValueError):
        Transaction.from_dict(record)


def test_append_preserves_insertion_order(make_transaction) -> None:
    ledger = FinanceLedger()
    ledger.append(make_transaction(3, occurred_on="2024-06-01"))
    ledger.append(make_transaction(1, occurred_on="2023-01-01"))
    ledger.append(make_transaction(2, occurred_on="2025-01-01"))

    assert [entry.id for entry in ledger.list_transactions()] == [3, 1, 2]


def test_remove_unknown_id_leaves_ledger_identical(make_transaction) -> None:
    """Removing an id that is not present is a silent no-op."""

    ledger = FinanceLedger([make_transaction(1), make_transaction(2)])
    before = ledger.list_transactions()

    assert ledger.remove(99) is False
    assert ledger.list_transactions() == before


def test_remove_drops_matching_entry(make_transaction) -> None:
    ledger = FinanceLedger([make_transaction(1), make_transaction(2), make_transaction(3)])

    assert ledger.remove(2) is True
    assert [entry.id for entry in ledger] == [1, 3]
    with pytest.raises(KeyError):
        ledger.get_transaction(2)


def test_balance_is_signed_sum(make_transaction) -> None:
    """Income adds, expense subtracts, and an empty ledger balances to zero."""

    ledger = FinanceLedger()
    assert ledger.balance() == 0

    ledger.append(make_transaction(1, amount=1500.0, kind="income"))
    assert ledger.balance() == pytest.approx(1500.0)

    ledger.append(make_transaction(2, amount=200.5, kind="expense"))
    assert ledger.balance() == pytest.approx(1299.5)

    summary = ledger.summarise()
    assert summary.income_total == pytest.approx(1500.0)
    assert summary.expense_total == pytest.approx(200.5)
    assert summary.balance == pytest.approx(1299.5)
    assert summary.count == 2


def test_export_snapshot_groups_by_type(make_transaction) -> None:
    ledger = FinanceLedger(
        [make_transaction(1, kind="income"), make_transaction(2), make_transaction(3)]
    )

    snapshot = ledger.export_snapshot()

    assert [entry["id"] for entry in snapshot["income"]] == [1]
    assert [entry["id"] for entry in snapshot["expenses"]] == [2, 3]


def test_json_reload_reproduces_ordered_ledger(make_transaction) -> None:
    """Serialising and reloading yields equal transactions in the same order."""

    ledger = FinanceLedger(
        [
            make_transaction(5, "Café da manhã", 12.3, "2024-02-02", "expense"),
            make_transaction(2, "Salário", 3000.0, "2024-02-01", "income"),
            make_transaction(9, "", 1.0, "", "expense"),
        ]
    )

    payload = ledger.to_json()
    restored = FinanceLedger.from_json(payload)

    assert restored == ledger
    assert json.loads(payload)[0] == {
        "id": 5,
        "description": "Café da manhã",
        "amount": 12.3,
        "date": "2024-02-02",
        "type": "expense",
    }


@pytest.mark.parametrize("payload", ["", "{not json", '{"id": 1}', '[{"id": 1}]'])
def test_from_json_rejects_malformed_payloads(payload: str) -> None:
    with pytest.raises(ValueError):
        FinanceLedger.from_json(payload)


def test_id_generator_is_strictly_increasing_within_one_millisecond() -> None:
    """A frozen clock must still produce distinct, increasing ids."""

    generator = IdGenerator(clock=lambda: 1_700_000_000.0)

    first = generator.next_id()
    second = generator.next_id()

    assert first == 1_700_000_000_000
    assert second == first + 1


def test_id_generator_stays_above_observed_ids() -> None:
    generator = IdGenerator(clock=lambda: 1.0)
    generator.observe(5_000)

    assert generator.next_id() == 5_001
