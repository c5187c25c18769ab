"""The trading market: transactions, sellers, buyers and their pairings."""

from __future__ import annotations

from energytrade.buyers import Buyer, BuyerDirectory
from energytrade.pairs import PairTable, SellerBuyerPair
from energytrade.sellers import SellerDirectory
from energytrade.transactions import Transaction, TransactionIndex, new_transaction


class EnergyMarket:
    """All market records, with every transaction filed in every index."""

    def __init__(self) -> None:
        self.transactions = TransactionIndex()
        self.sellers = SellerDirectory()
        self.buyers = BuyerDirectory()
        self.pairs = PairTable()
        self.last_transaction_id = 0

    def record(self, transaction: Transaction) -> SellerBuyerPair:
        """File an existing transaction under its seller, buyer and pair."""
        self.last_transaction_id = max(
            self.last_transaction_id, transaction.transaction_id
        )
        self.transactions.add(transaction)
        seller = self.sellers.record(transaction)
        buyer = self.buyers.record(transaction)
        return self.pairs.record(seller, buyer)

    def add_transaction(
        self,
        buyer_id: int,
        seller_id: int,
        energy_amount: float,
        price_per_kwh: float,
        timestamp: str | None = None,
    ) -> Transaction:
        """Create a transaction with the next free id and record it."""
        transaction = new_transaction(
            self.last_transaction_id + 1,
            buyer_id,
            seller_id,
            energy_amount,
            price_per_kwh,
            timestamp,
        )
        self.record(transaction)
        return transaction

    def total_revenue(self, seller_id: int) -> int:
        """Return a seller's whole-number revenue, 0 if the seller is unknown."""
        return self.sellers.total_revenue(seller_id)

    def transactions_between_times(self, start: str, end: str) -> list[Transaction]:
        """Return the transactions stamped from ``start`` to ``end``."""
        return self.transactions.between_times(start, end)

    def transactions_with_energy_between(
        self, minimum: float, maximum: float
    ) -> list[Transaction]:
        """Return transactions with energy in [minimum, maximum], by energy."""
        return self.transactions.energy_between(minimum, maximum)

    def buyers_by_energy(self) -> list[Buyer]:
        """Return all buyers, least energy purchased first."""
        return self.buyers.sorted_by_energy()

    def pairs_by_transactions(self) -> list[SellerBuyerPair]:
        """Return all seller/buyer pairs, most transactions first."""
        return self.pairs.sorted_by_transactions()