"""Saving the market to CSV files and loading it back."""

from __future__ import annotations

import os
from pathlib import Path

from energytrade.market import EnergyMarket
from energytrade.transactions import Transaction

TRANSACTION_FILE = "transactions.csv"
SELLER_FILE = "sellers.csv"
BUYER_FILE = "buyers.csv"

TRANSACTION_HEADER = (
    "TransactionID,BuyerID,SellerID,EnergyAmount,PricePerKWh,TotalPrice,Timestamp"
)
SELLER_HEADER = "SellerID,RateBelow300,RateAbove300,TotalRevenue"
BUYER_HEADER = "BuyerID,TotalEnergyPurchased"

PathLike = str | os.PathLike


def _parse_transaction(line: str, line_number: int) -> Transaction:
    fields = line.rstrip("\r\n").split(",", 6)
    if len(fields) != 7:
        raise ValueError(f"line {line_number}: expected 7 fields, got {len(fields)}")
    try:
        return Transaction(
            transaction_id=int(fields[0]),
            buyer_id=int(fields[1]),
            seller_id=int(fields[2]),
            energy_amount=float(fields[3]),
            price_per_kwh=float(fields[4]),
            total_price=float(fields[5]),
            timestamp=fields[6].rstrip("\r\n"),
        )
    except ValueError as error:
        raise ValueError(f"line {line_number}: {error}") from error


def load_transactions(market: EnergyMarket, path: PathLike = TRANSACTION_FILE) -> int:
    """Record every transaction in a CSV file into ``market``; return the count."""
    count = 0
    with open(path, encoding="utf-8", newline="") as file:
        next(file, None)
        for line_number, line in enumerate(file, start=2):
            if not line.strip():
                continue
            market.record(_parse_transaction(line, line_number))
            count += 1
    return count


def save_transactions(market: EnergyMarket, path: PathLike = TRANSACTION_FILE) -> int:
    """Write all transactions in id order to a CSV file; return the count."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(TRANSACTION_HEADER + "\n")
        for t in market.transactions:
            file.write(
                f"{t.transaction_id},{t.buyer_id},{t.seller_id},"
                f"{t.energy_amount:.2f},{t.price_per_kwh:.2f},"
                f"{t.total_price:.2f},{t.timestamp}\n"
            )
            count += 1
    return count


def save_sellers(market: EnergyMarket, path: PathLike = SELLER_FILE) -> int:
    """Write all sellers in id order to a CSV file; return the count."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(SELLER_HEADER + "\n")
        for s in market.sellers:
            file.write(
                f"{s.seller_id},{s.rate_below_300:.2f},"
                f"{s.rate_above_300:.2f},{s.total_revenue:.2f}\n"
            )
            count += 1
    return count


def save_buyers(market: EnergyMarket, path: PathLike = BUYER_FILE) -> int:
    """Write all buyers in id order to a CSV file; return the count."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(BUYER_HEADER + "\n")
        for b in market.buyers:
            file.write(f"{b.buyer_id},{b.total_energy_purchased:.2f}\n")
            count += 1
    return count


def save_all(market: EnergyMarket, directory: PathLike = ".") -> tuple[int, int, int]:
    """Save transactions, sellers and buyers; return how many of each."""
    folder = Path(directory)
    return (
        save_transactions(market, folder / TRANSACTION_FILE),
        save_sellers(market, folder / SELLER_FILE),
        save_buyers(market, folder / BUYER_FILE),
    )


def load_all(market: EnergyMarket, directory: PathLike = ".") -> int:
    """Load saved transactions into ``market``; a missing file loads nothing."""
    try:
        return load_transactions(market, Path(directory) / TRANSACTION_FILE)
    except FileNotFoundError:
        return 0