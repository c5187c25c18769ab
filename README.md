# energytrade

A small ledger for energy trades between buyers and sellers. Every trade is
recorded once and indexed three ways, each in its own B+ tree: by transaction
id, by buyer id and by seller id. A hash table of seller–buyer pairs counts
how often each pair has traded. A buyer is added to a seller's
`regular_buyers` on their sixth trade together.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Interactive use

```
energytrade
energytrade --data-dir path/to/data
```

On start this loads `transactions.csv` from the data directory (the current
directory by default), if the file is there, and rebuilds the sellers, buyers
and pair counts from it. It then shows a menu:

1. add a transaction (the id is one past the highest id seen; the timestamp
   is the local time)
2. list all transactions in id order
3. list each seller's transactions
4. list each buyer's transactions
5. find transactions in a time period
6. show a seller's total revenue, as a whole number
7. list transactions whose energy falls in a range, in ascending order of energy
8. list buyers in ascending order of energy bought
9. list seller–buyer pairs, most trades first
10. look up a buyer or a seller by id

Choosing `0`, or ending input, writes `transactions.csv`, `sellers.csv` and
`buyers.csv` to the data directory, then exits.

## Library use

```python
from energytrade.market import EnergyMarket
from energytrade import storage

market = EnergyMarket()
market.add_transaction(1, 10, 120.0, 6.5, "2024-01-05 09:30:00")
market.add_transaction(2, 10, 400.0, 6.0, "2024-01-06 18:00:00")

print(market.total_revenue(10))
for trade in market.transactions_with_energy_between(100, 500):
    print(trade.transaction_id, trade.energy_amount)
for buyer in market.buyers_by_energy():
    print(buyer.buyer_id, buyer.total_energy_purchased)
for pair in market.pairs_by_transactions():
    print(pair.seller.seller_id, pair.buyer.buyer_id, pair.num_transactions)

storage.save_all(market, ".")
```

The modules:

- `energytrade.bplustree` — `BPlusTree`, an ordered map with linked leaves
  (at most 5 keys per node by default); it sits under every index and can be
  used on its own.
- `energytrade.transactions` — `Transaction`, `new_transaction`,
  `format_transaction` and `TransactionIndex`.
- `energytrade.buyers` and `energytrade.sellers` — `Buyer`, `BuyerDirectory`,
  `format_buyer`, `Seller`, `SellerDirectory`, `format_seller`.
- `energytrade.pairs` — `PairTable`, `SellerBuyerPair` and `pair_hash`.
- `energytrade.market` — `EnergyMarket`, which files each transaction in all
  of the above.
- `energytrade.storage` — `load_transactions`, `save_transactions`,
  `save_sellers`, `save_buyers`, `save_all` and `load_all`.
- `energytrade.cli` — `main`, the interactive menu.

Timestamps have the form `YYYY-MM-DD HH:MM:SS`. Time-period queries compare
them as text, so a shorter bound such as `2024-01-05 09:30` also works. They
start at the first transaction, in id order, stamped at or after the start
and stop at the first one stamped after the end, so they expect timestamps to
rise with the transaction id.

## What it does not do

- Only `transactions.csv` is read back. `sellers.csv` and `buyers.csv` are
  written as reports; sellers and buyers are always rebuilt from the
  transactions.
- A seller's `rate_below_300` and `rate_above_300` are kept and saved but
  never set by the menu and never used in pricing: a trade's total is its
  energy times its price per kWh.
- Transactions cannot be edited or removed.