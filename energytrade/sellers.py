"""Sellers and a directory of them ordered by seller id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from energytrade.bplustree import BPlusTree
from energytrade.transactions import Transaction, TransactionIndex

_RULE = "=" * 46


@dataclass
class Seller:
    """A seller, its energy rates, its revenue and its regular buyers."""

    seller_id: int
    rate_below_300: float = 0.0
    rate_above_300: float = 0.0
    total_revenue: float = 0.0
    regular_buyers: list[Any] = field(default_factory=list)
    transactions: TransactionIndex = field(default_factory=TransactionIndex)


def format_seller(seller: Seller | None) -> str:
    """Render a seller as a boxed table of its fields."""
    if seller is None:
        return "Seller is NULL."
    regular_state = "Available" if seller.regular_buyers else "None"
    tree_state = "Available" if len(seller.transactions) else "Empty"
    lines = [
        _RULE,
        f"| Seller ID            : {seller.seller_id:<15d}     |",
        f"| Rate Below 300 kWh   : {seller.rate_below_300:<15.2f}     |",
        f"| Rate Above 300 kWh   : {seller.rate_above_300:<15.2f}     |",
        f"| Total Revenue        : {seller.total_revenue:<15.2f}     |",
        f"| Regular Buyers       : {regular_state:<15s}     |",
        f"| Transaction Tree     : {tree_state:<15s}     |",
        _RULE,
    ]
    return "\n".join(lines)


class SellerDirectory:
    """Sellers kept in a B+ tree keyed by seller id."""

    def __init__(self) -> None:
        self._tree: BPlusTree[int, Seller] = BPlusTree()

    def add(self, seller: Seller) -> None:
        """Index a seller under its id."""
        self._tree.insert(seller.seller_id, seller)

    def get(self, seller_id: int) -> Seller | None:
        """Return the seller with this id, or None."""
        return self._tree.get(seller_id)

    def record(self, transaction: Transaction) -> Seller:
        """File a transaction under its seller, creating the seller if new."""
        seller = self.get(transaction.seller_id)
        if seller is None:
            seller = Seller(transaction.seller_id)
            self.add(seller)
        seller.transactions.add(transaction)
        seller.total_revenue += transaction.total_price
        return seller

    def __iter__(self) -> Iterator[Seller]:
        return self._tree.values()

    def __len__(self) -> int:
        return len(self._tree)

    def total_revenue(self, seller_id: int) -> int:
        """Return a seller's revenue truncated to a whole number, 0 if unknown."""
        seller = self.get(seller_id)
        if seller is None:
            return 0
        return int(seller.total_revenue)