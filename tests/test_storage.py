import pytest

from energytrade.market import EnergyMarket
from energytrade.storage import (
    BUYER_FILE,
    SELLER_FILE,
    TRANSACTION_FILE,
    load_all,
    load_transactions,
    save_all,
    save_buyers,
    save_sellers,
    save_transactions,
)


@pytest.fixture
def market():
    m = EnergyMarket()
    m.add_transaction(1, 10, 12.5, 4.0, "2024-03-01 09:00:00")
    m.add_transaction(2, 10, 7.25, 2.0, "2024-03-01 10:00:00")
    m.add_transaction(1, 20, 100.0, 1.5, "2024-03-02 09:00:00")
    return m


def test_transactions_round_trip(market, tmp_path):
    path = tmp_path / "t.csv"
    assert save_transactions(market, path) == 3
    loaded = EnergyMarket()
    assert load_transactions(loaded, path) == 3
    original = list(market.transactions)
    again = list(loaded.transactions)
    assert [t.transaction_id for t in again] == [t.transaction_id for t in original]
    for a, b in zip(original, again):
        assert b.buyer_id == a.buyer_id
        assert b.seller_id == a.seller_id
        assert b.energy_amount == pytest.approx(a.energy_amount)
        assert b.total_price == pytest.approx(a.total_price)
        assert b.timestamp == a.timestamp


def test_transaction_header(market, tmp_path):
    path = tmp_path / "t.csv"
    save_transactions(market, path)
    first = path.read_text(encoding="utf-8").splitlines()[0]
    assert first == (
        "TransactionID,BuyerID,SellerID,EnergyAmount,PricePerKWh,TotalPrice,Timestamp"
    )


def test_transaction_row_format(tmp_path):
    m = EnergyMarket()
    m.add_transaction(3, 4, 2.0, 1.5, "2024-01-01 00:00:00")
    path = tmp_path / "t.csv"
    save_transactions(m, path)
    row = path.read_text(encoding="utf-8").splitlines()[1]
    assert row == "1,3,4,2.00,1.50,3.00,2024-01-01 00:00:00"


def test_loading_rebuilds_indexes(market, tmp_path):
    path = tmp_path / "t.csv"
    save_transactions(market, path)
    loaded = EnergyMarket()
    load_transactions(loaded, path)
    assert len(loaded.sellers) == len(market.sellers)
    assert len(loaded.buyers) == len(market.buyers)
    assert loaded.total_revenue(10) == market.total_revenue(10)
    assert len(loaded.pairs) == len(market.pairs)


def test_loading_sets_next_id(market, tmp_path):
    path = tmp_path / "t.csv"
    save_transactions(market, path)
    loaded = EnergyMarket()
    load_transactions(loaded, path)
    t = loaded.add_transaction(5, 5, 1.0, 1.0, "2024-04-01 00:00:00")
    assert t.transaction_id == market.last_transaction_id + 1


def test_load_strips_carriage_returns(tmp_path):
    path = tmp_path / "t.csv"
    path.write_bytes(
        b"header\r\n5,1,2,3.00,2.00,6.00,2024-01-01 12:00:00\r\n"
    )
    m = EnergyMarket()
    assert load_transactions(m, path) == 1
    assert m.transactions.get(5).timestamp == "2024-01-01 12:00:00"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_transactions(EnergyMarket(), tmp_path / "absent.csv")


def test_load_malformed_line_raises(tmp_path):
    path = tmp_path / "t.csv"
    path.write_text("header\nnot,a,row\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_transactions(EnergyMarket(), path)


def test_load_all_without_file_loads_nothing(tmp_path):
    m = EnergyMarket()
    assert load_all(m, tmp_path) == 0
    assert len(m.transactions) == 0


def test_save_all_and_load_all(market, tmp_path):
    counts = save_all(market, tmp_path)
    assert counts == (3, len(market.sellers), len(market.buyers))
    assert (tmp_path / TRANSACTION_FILE).exists()
    assert (tmp_path / SELLER_FILE).exists()
    assert (tmp_path / BUYER_FILE).exists()
    loaded = EnergyMarket()
    assert load_all(loaded, tmp_path) == 3


def test_sellers_and_buyers_files(market, tmp_path):
    sellers_path = tmp_path / "s.csv"
    buyers_path = tmp_path / "b.csv"
    assert save_sellers(market, sellers_path) == 2
    assert save_buyers(market, buyers_path) == 2
    seller_lines = sellers_path.read_text(encoding="utf-8").splitlines()
    buyer_lines = buyers_path.read_text(encoding="utf-8").splitlines()
    assert seller_lines[0] == "SellerID,RateBelow300,RateAbove300,TotalRevenue"
    assert buyer_lines[0] == "BuyerID,TotalEnergyPurchased"
    assert [line.split(",")[0] for line in seller_lines[1:]] == ["10", "20"]
    buyer_one = market.buyers.get(1)
    assert buyer_lines[1] == f"1,{buyer_one.total_energy_purchased:.2f}"