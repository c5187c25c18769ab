"""Counts of transactions between each seller and buyer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

HASH_TABLE_SIZE = 1031
REGULAR_BUYER_THRESHOLD = 6


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def pair_hash(seller_id: int, buyer_id: int) -> int:
    """Return the bucket index of a seller/buyer pair."""
    mixed = _int32(seller_id * 31) ^ _int32(buyer_id * 17)
    return mixed % HASH_TABLE_SIZE


@dataclass
class SellerBuyerPair:
    """A seller, a buyer and how many transactions they have made together."""

    seller: Any
    buyer: Any
    num_transactions: int = 1


class PairTable:
    """A chained hash table of seller/buyer pairs.

    Sellers need ``seller_id`` and a ``regular_buyers`` list; buyers need
    ``buyer_id``. A buyer becomes one of a seller's regular buyers on
    their sixth transaction together.
    """

    def __init__(self) -> None:
        self._buckets: list[list[SellerBuyerPair]] = [
            [] for _ in range(HASH_TABLE_SIZE)
        ]

    def record(self, seller: Any, buyer: Any) -> SellerBuyerPair:
        """Count one more transaction between ``seller`` and ``buyer``."""
        bucket = self._buckets[pair_hash(seller.seller_id, buyer.buyer_id)]
        for pair in bucket:
            if (
                pair.seller.seller_id == seller.seller_id
                and pair.buyer.buyer_id == buyer.buyer_id
            ):
                pair.num_transactions += 1
                if pair.num_transactions == REGULAR_BUYER_THRESHOLD:
                    pair.seller.regular_buyers.insert(0, pair.buyer)
                return pair
        pair = SellerBuyerPair(seller, buyer)
        bucket.insert(0, pair)
        return pair

    def __iter__(self) -> Iterator[SellerBuyerPair]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def sorted_by_transactions(self) -> list[SellerBuyerPair]:
        """Return all pairs, most transactions first."""
        return sorted(self, key=lambda pair: pair.num_transactions, reverse=True)

    def clear(self) -> None:
        """Forget every pair."""
        for bucket in self._buckets:
            bucket.clear()