from datetime import datetime

from agents.demand_agent import DemandAgent
from utils.models import LineItem, Transaction
from utils.periods import TargetPeriod, lookback_window
from utils.preprocess import line_items_frame


def make_transactions():
    return [
        Transaction(datetime(2024, 12, 31, 23, 30), [LineItem("A", 5), LineItem("B", 2), LineItem("A", 3)]),
        Transaction(datetime(2023, 1, 1), [LineItem("A", 4)]),
        Transaction(datetime(2022, 12, 31), [LineItem("A", 100)]),
        Transaction(datetime(2025, 1, 1), [LineItem("A", 100)]),
        Transaction(datetime(2024, 6, 10), [LineItem("B", 7)]),
        Transaction(datetime(2024, 6, 20), [LineItem("A", 1)]),
    ]


def test_monthly_series_covers_window_and_sums_per_month():
    window = lookback_window(TargetPeriod(0, 2025))
    series = DemandAgent().monthly_demand(line_items_frame(make_transactions()), "A", window)

    assert len(series.months) == 24
    assert (series.months[0].year, series.months[0].month) == (2023, 1)
    assert (series.months[-1].year, series.months[-1].month) == (2024, 12)
    assert series.months[0].demand == 4
    assert series.months[-1].demand == 8
    june = [m for m in series.months if (m.year, m.month) == (2024, 6)][0]
    assert june.demand == 1
    assert sum(series.demands) == 13
    assert series.data_months == 3


def test_product_without_transactions_is_zero_filled():
    window = lookback_window(TargetPeriod(0, 2025))
    series = DemandAgent().monthly_demand(make_transactions(), "missing", window)
    assert series.demands == [0.0] * 24
    assert series.data_months == 0


def test_empty_ledger():
    window = lookback_window(TargetPeriod(6, 2024))
    series = DemandAgent().monthly_demand([], "A", window)
    assert len(series.months) == 24
    assert series.data_months == 0


def test_ledger_is_not_mutated():
    txns = make_transactions()
    before = [(t.date, list(t.items)) for t in txns]
    DemandAgent().monthly_demand(txns, "A", lookback_window(TargetPeriod(0, 2025)))
    assert [(t.date, list(t.items)) for t in txns] == before


def test_mixed_date_layouts_and_timezones_share_a_ledger():
    window = lookback_window(TargetPeriod(0, 2025))
    txns = [
        Transaction("2024-11-05", [LineItem("p", 2)]),
        Transaction("2024-12-05T10:30:00", [LineItem("p", 3)]),
        Transaction("2024-10-01T00:00:00Z", [LineItem("p", 4)]),
        Transaction(datetime(2024, 9, 9), [LineItem("p", 1)]),
        # local wall-clock date decides the month
        Transaction("2024-12-31T23:30:00+07:00", [LineItem("p", 5)]),
    ]
    series = DemandAgent().monthly_demand(txns, "p", window)
    assert series.demands[-4:] == [1.0, 4.0, 2.0, 8.0]
    assert series.data_months == 4
