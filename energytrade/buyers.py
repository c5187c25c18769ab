"""Buyers and a directory of them ordered by buyer id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from energytrade.bplustree import BPlusTree
from energytrade.transactions import Transaction, TransactionIndex

_RULE = "=" * 46


@dataclass
class Buyer:
    """A buyer and the energy it has bought."""

    buyer_id: int
    total_energy_purchased: float = 0.0
    transactions: TransactionIndex = field(default_factory=TransactionIndex)


def format_buyer(buyer: Buyer | None) -> str:
    """Render a buyer as a boxed table of its fields."""
    if buyer is None:
        return "Buyer is NULL."
    tree_state = "Available" if len(buyer.transactions) else "Empty"
    lines = [
        _RULE,
        f"| Buyer ID              : {buyer.buyer_id:<15d}     |",
        f"| Total Energy Purchased: {buyer.total_energy_purchased:<15.2f}     |",
        f"| Transaction Tree       : {tree_state:<15s}     |",
        _RULE,
    ]
    return "\n".join(lines)


class BuyerDirectory:
    """Buyers kept in a B+ tree keyed by buyer id."""

    def __init__(self) -> None:
        self._tree: BPlusTree[int, Buyer] = BPlusTree()

    def add(self, buyer: Buyer) -> None:
        """Index a buyer under its id."""
        self._tree.insert(buyer.buyer_id, buyer)

    def get(self, buyer_id: int) -> Buyer | None:
        """Return the buyer with this id, or None."""
        return self._tree.get(buyer_id)

    def record(self, transaction: Transaction) -> Buyer:
        """File a transaction under its buyer, creating the buyer if new."""
        buyer = self.get(transaction.buyer_id)
        if buyer is None:
            buyer = Buyer(transaction.buyer_id)
            self.add(buyer)
        buyer.transactions.add(transaction)
        buyer.total_energy_purchased += transaction.energy_amount
        return buyer

    def __iter__(self) -> Iterator[Buyer]:
        return self._tree.values()

    def __len__(self) -> int:
        return len(self._tree)

    def sorted_by_energy(self) -> list[Buyer]:
        """Return all buyers, least energy purchased first."""
        return sorted(self, key=lambda buyer: buyer.total_energy_purchased)