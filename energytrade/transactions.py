"""Energy transactions and an index over them ordered by transaction id."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from itertools import dropwhile, takewhile
from typing import Iterator

from energytrade.bplustree import BPlusTree

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_RULE = "=" * 46


@dataclass
class Transaction:
    """One sale of energy from a seller to a buyer."""

    transaction_id: int
    buyer_id: int
    seller_id: int
    energy_amount: float
    price_per_kwh: float
    total_price: float
    timestamp: str


def new_transaction(
    transaction_id: int,
    buyer_id: int,
    seller_id: int,
    energy_amount: float,
    price_per_kwh: float,
    timestamp: str | None = None,
) -> Transaction:
    """Build a transaction, pricing it and stamping it with local time if needed."""
    if timestamp is None:
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    return Transaction(
        transaction_id=transaction_id,
        buyer_id=buyer_id,
        seller_id=seller_id,
        energy_amount=energy_amount,
        price_per_kwh=price_per_kwh,
        total_price=energy_amount * price_per_kwh,
        timestamp=timestamp,
    )


def format_transaction(transaction: Transaction | None) -> str:
    """Render a transaction as a boxed table of its fields."""
    if transaction is None:
        return "Transaction is NULL."
    lines = [
        _RULE,
        f"| Transaction ID       : {transaction.transaction_id:<15d}     |",
        f"| Buyer ID             : {transaction.buyer_id:<15d}     |",
        f"| Seller ID            : {transaction.seller_id:<15d}     |",
        f"| Energy Amount (kWh)  : {transaction.energy_amount:<15.2f}     |",
        f"| Price per kWh        : {transaction.price_per_kwh:<15.2f}     |",
        f"| Total Price          : {transaction.total_price:<15.2f}     |",
        f"| Timestamp            : {transaction.timestamp:<15s} |",
        _RULE,
    ]
    return "\n".join(lines)


class TransactionIndex:
    """Transactions kept in a B+ tree keyed by transaction id."""

    def __init__(self) -> None:
        self._tree: BPlusTree[int, Transaction] = BPlusTree()

    def add(self, transaction: Transaction) -> None:
        """Index a transaction under its id."""
        self._tree.insert(transaction.transaction_id, transaction)

    def get(self, transaction_id: int) -> Transaction | None:
        """Return the transaction with this id, or None."""
        return self._tree.get(transaction_id)

    def __iter__(self) -> Iterator[Transaction]:
        return self._tree.values()

    def __len__(self) -> int:
        return len(self._tree)

    def energy_between(self, minimum: float, maximum: float) -> list[Transaction]:
        """Return transactions whose energy lies in [minimum, maximum], by energy."""
        chosen = (t for t in self if minimum <= t.energy_amount <= maximum)
        return sorted(chosen, key=lambda t: t.energy_amount)

    def between_times(self, start: str, end: str) -> list[Transaction]:
        """Return transactions from the first stamped at or after ``start``
        up to, not including, the first stamped after ``end``.

        Timestamps are compared as strings and are expected to rise with
        transaction id.
        """
        from_start = dropwhile(lambda t: t.timestamp < start, self)
        return list(takewhile(lambda t: t.timestamp <= end, from_start))