"""Mini README: Tests for the pure view derivation.

These tests confirm that search is a case-insensitive substring match,
that every sort key orders entries as the selector promises while keeping
ties in ledger order, and that rows and balance carry display-ready text.
"""

from __future__ import annotations

from finledger.finance import (
    BalanceIndicator,
    SortKey,
    build_balance_view,
    build_rows,
    compute_view,
)


def test_search_is_case_insensitive_substring(make_transaction) -> None:
    """Filtering "café" should match "Café da manhã" but not unrelated entries."""

    transactions = [
        make_transaction(1, "Café da manhã"),
        make_transaction(2, "Supermercado"),
        make_transaction(3, "CAFÉ expresso"),
    ]

    view = compute_view(transactions, "café", SortKey.DATE_ASC)

    assert [entry.id for entry in view] == [1, 3]


def test_empty_search_matches_everything(make_transaction) -> None:
    transactions = [make_transaction(1), make_transaction(2)]

    assert len(compute_view(transactions, "")) == 2


def test_sort_keys_order_by_date_and_amount(make_transaction) -> None:
    january = make_transaction(1, "January", 50.0, "2024-01-01")
    june = make_transaction(2, "June", 10.0, "2024-06-01")
    transactions = [january, june]

    assert compute_view(transactions, "", SortKey.DATE_DESC)[0] is june
    assert compute_view(transactions, "", SortKey.DATE_ASC)[0] is january
    assert compute_view(transactions, "", SortKey.AMOUNT_DESC)[0] is january
    assert compute_view(transactions, "", SortKey.AMOUNT_ASC)[0] is june


def test_ties_keep_ledger_order_in_both_directions(make_transaction) -> None:
    """Equal keys never swap, even for descending sorts."""

    transactions = [
        make_transaction(1, amount=20.0, occurred_on="2024-05-01"),
        make_transaction(2, amount=20.0, occurred_on="2024-05-01"),
        make_transaction(3, amount=5.0, occurred_on="2024-04-01"),
    ]

    assert [e.id for e in compute_view(transactions, "", SortKey.DATE_DESC)] == [1, 2, 3]
    assert [e.id for e in compute_view(transactions, "", SortKey.AMOUNT_DESC)] == [1, 2, 3]
    assert [e.id for e in compute_view(transactions, "", SortKey.AMOUNT_ASC)] == [3, 1, 2]


def test_undated_entries_sort_as_oldest(make_transaction) -> None:
    transactions = [make_transaction(1, occurred_on=""), make_transaction(2, occurred_on="2020-01-01")]

    assert [e.id for e in compute_view(transactions, "", SortKey.DATE_DESC)] == [2, 1]
    assert [e.id for e in compute_view(transactions, "", SortKey.DATE_ASC)] == [1, 2]


def test_compute_view_does_not_mutate_input(make_transaction) -> None:
    transactions = [make_transaction(1, occurred_on="2024-01-01"), make_transaction(2, occurred_on="2024-06-01")]

    compute_view(transactions, "", SortKey.DATE_DESC)

    assert [e.id for e in transactions] == [1, 2]


def test_unknown_sort_key_falls_back_to_newest_first() -> None:
    assert SortKey.from_str("alphabetical") is SortKey.DATE_DESC
    assert SortKey.from_str(None) is SortKey.DATE_DESC
    assert SortKey.from_str("AMOUNT-ASC") is SortKey.AMOUNT_ASC


def test_build_rows_formats_fields_and_delete_control(make_transaction) -> None:
    view = [
        make_transaction(7, "Aluguel", 1500.0, "2024-03-07", "expense"),
        make_transaction(8, "Salário", 4500.0, "", "income"),
    ]

    rows = build_rows(view)

    assert rows[0].date_label == "07/03/2024"
    assert rows[0].amount_label == "- R$ 1.500,00"
    assert rows[0].delete_id == 7
    assert rows[1].date_label == "Invalid date"
    assert rows[1].amount_label == "+ R$ 4.500,00"
    assert all(row.delete_id is None for row in build_rows(view, allow_deletion=False))


def test_build_rows_is_repeatable(make_transaction) -> None:
    view = [make_transaction(1), make_transaction(2)]

    assert build_rows(view) == build_rows(view)


def test_balance_indicator_threshold_is_inclusive_at_zero() -> None:
    assert build_balance_view(0.0).indicator is BalanceIndicator.NON_NEGATIVE
    assert build_balance_view(12.5).indicator is BalanceIndicator.NON_NEGATIVE
    negative = build_balance_view(-0.5)
    assert negative.indicator is BalanceIndicator.NEGATIVE
    assert negative.label == "-R$ 0,50"
