"""Interactive menu for the energy trading system."""

from __future__ import annotations

import argparse
from typing import Callable, Iterable, TypeVar

from energytrade.buyers import format_buyer
from energytrade.market import EnergyMarket
from energytrade.sellers import format_seller
from energytrade.storage import load_all, save_all
from energytrade.transactions import Transaction, format_transaction

T = TypeVar("T")
_RULE = "=" * 46

MENU = """
========== Energy Trading System ==========
1. Add New Transaction
2. Display All Transactions
3. Create a Set of Transactions for Every Seller
4. Create a Set of Transactions for Every Buyer
5. Find Transactions in a Given Time Period
6. Calculate Total Revenue by Seller
7. Display Transactions with Energy in Range (Ascending Order)
8. Sort Buyers Based on Energy Bought
9. Sort Seller/Buyer Pairs by Number of Transactions
10. Search particular Buyer or Seller
0. Exit"""


class _InvalidInput(Exception):
    pass


def _ask(prompt: str, convert: Callable[[str], T]) -> T:
    text = input(prompt).strip()
    try:
        return convert(text)
    except ValueError as error:
        raise _InvalidInput(text) from error


def _show_transactions(transactions: Iterable[Transaction]) -> None:
    shown = False
    for transaction in transactions:
        print(format_transaction(transaction))
        print()
        shown = True
    if not shown:
        print("Tree is empty!")


def _add(market: EnergyMarket) -> None:
    buyer_id = _ask("Enter Buyer ID: ", int)
    seller_id = _ask("Enter Seller ID: ", int)
    energy = _ask("Enter Energy (kWh): ", float)
    price = _ask("Enter Price per kWh: ", float)
    market.add_transaction(buyer_id, seller_id, energy, price)
    print("Transaction successfully added.")


def _per_party(parties: Iterable, label: str, id_of: Callable) -> None:
    found = False
    for party in parties:
        found = True
        print()
        print(_RULE)
        print(f"Transactions for {label} ID: {id_of(party)}")
        print(_RULE)
        if len(party.transactions):
            _show_transactions(party.transactions)
        else:
            print(f"No transactions available for this {label.lower()}.")
    if not found:
        print(f"{label} tree is empty.")


def _by_time(market: EnergyMarket) -> None:
    start = input("Enter Start Time (YYYY-MM-DD HH:MM): ").strip()
    end = input("Enter End Time (YYYY-MM-DD HH:MM): ").strip()
    if not len(market.transactions):
        print("Tree is empty!")
        return
    found = market.transactions_between_times(start, end)
    if not found:
        print("No transactions found in the given time range.")
        return
    for transaction in found:
        print(format_transaction(transaction))
        print()


def _revenue(market: EnergyMarket) -> None:
    seller_id = _ask("Enter Seller ID: ", int)
    if market.sellers.get(seller_id) is None:
        print("The seller doesnt exist!")
    print(f"Total Revenue for Seller {seller_id}: ₹{market.total_revenue(seller_id)}")


def _energy_range(market: EnergyMarket) -> None:
    minimum = _ask("Enter minimum energy amount: ", float)
    maximum = _ask("Enter maximum energy amount: ", float)
    found = market.transactions_with_energy_between(minimum, maximum)
    print(f"Number of transactions in range: {len(found)}")
    if not found:
        print("No transactions found in the given range.")
        return
    print(
        "Displaying all transactions with energy amount between "
        f"{minimum:.2f} and {maximum:.2f}:"
    )
    for number, transaction in enumerate(found, start=1):
        print(format_transaction(transaction))
        print(number)


def _sort_buyers(market: EnergyMarket) -> None:
    print("Displaying all Buyers in sorted order according to energy bought:")
    for number, buyer in enumerate(market.buyers_by_energy()):
        print(format_buyer(buyer))
        print(number)


def _pairs(market: EnergyMarket) -> None:
    print()
    print("--- Seller-Buyer Pairs Sorted by Number of Transactions ---")
    for pair in market.pairs_by_transactions():
        print(
            f"Seller ID: {pair.seller.seller_id} | Buyer ID: {pair.buyer.buyer_id}"
            f" | Transactions: {pair.num_transactions}"
        )


def _search(market: EnergyMarket) -> None:
    choice = _ask(
        "\n1. Search by Buyer ID\n2. Search by Seller ID\nEnter your choice: ", int
    )
    if choice == 1:
        buyer = market.buyers.get(_ask("Enter Buyer ID: ", int))
        if buyer is None:
            print("Buyer doesn't exist!")
        print(format_buyer(buyer))
        print()
    elif choice == 2:
        seller = market.sellers.get(_ask("Enter Seller ID: ", int))
        if seller is None:
            print("Seller doesn't exist!")
        else:
            print(format_seller(seller))
        print()
    else:
        print("Invalid Choice.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu, loading and saving data in a directory."""
    parser = argparse.ArgumentParser(description="Energy trading system")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the CSV files"
    )
    args = parser.parse_args(argv)

    market = EnergyMarket()
    print("\nLoading all data...")
    count = load_all(market, args.data_dir)
    print(f"{count} transactions loaded")
    print("All data loaded successfully.")

    actions: dict[int, Callable[[], None]] = {
        1: lambda: _add(market),
        2: lambda: _show_transactions(market.transactions),
        3: lambda: _per_party(market.sellers, "Seller", lambda s: s.seller_id),
        4: lambda: _per_party(market.buyers, "Buyer", lambda b: b.buyer_id),
        5: lambda: _by_time(market),
        6: lambda: _revenue(market),
        7: lambda: _energy_range(market),
        8: lambda: _sort_buyers(market),
        9: lambda: _pairs(market),
        10: lambda: _search(market),
    }

    while True:
        print(MENU)
        try:
            text = input("Enter your choice: ").strip()
        except EOFError:
            text = "0"
        try:
            choice = int(text)
        except ValueError:
            choice = -1
        if choice == 0:
            print("\nSaving all data...")
            saved = save_all(market, args.data_dir)
            print(
                f"{saved[0]} transactions, {saved[1]} sellers and "
                f"{saved[2]} buyers saved."
            )
            print("Data saved. Exiting... Goodbye!")
            break
        action = actions.get(choice)
        if action is None:
            print("Invalid choice. Try again.")
            continue
        try:
            action()
        except _InvalidInput as error:
            print(f"Invalid input: {error}")
        except EOFError:
            print()
    market.pairs.clear()
    return 0