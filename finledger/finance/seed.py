"""Mini README: Demo transactions used when nothing has been stored yet.

Structure:
    * DEMO_TRANSACTIONS - deterministic records shown on first launch.
    * load_seed_transactions - default seed provider returning fresh copies.

Any zero-argument callable returning transactions can act as a seed
provider; passing ``None`` to the view-model means no seed is available.
"""

from __future__ import annotations

from typing import List

from .ledger import Transaction, TransactionType

DEMO_TRANSACTIONS: List[Transaction] = [
    Transaction(
        id=1,
        description="Salário",
        amount=4500.0,
        date="2024-05-05",
        type=TransactionType.INCOME,
    ),
    Transaction(
        id=2,
        description="Aluguel",
        amount=1500.0,
        date="2024-05-10",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id=3,
        description="Café da manhã",
        amount=32.5,
        date="2024-05-12",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id=4,
        description="Freelance design",
        amount=850.0,
        date="2024-05-20",
        type=TransactionType.INCOME,
    ),
    Transaction(
        id=5,
        description="Supermercado",
        amount=412.75,
        date="2024-05-22",
        type=TransactionType.EXPENSE,
    ),
]


def load_seed_transactions() -> List[Transaction]:
    """Return the demo dataset as a new list."""

    return list(DEMO_TRANSACTIONS)
