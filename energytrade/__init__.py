"""Energy trading ledger: B+ tree indexes of transactions, buyers and sellers, pair counts, CSV storage and a menu."""

__version__ = "0.1.0"
__all__ = ["bplustree", "transactions", "pairs", "buyers", "sellers", "market", "storage", "cli"]