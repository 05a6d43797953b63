from __future__ import annotations

from typing import Iterable

import pandas as pd

from utils.models import Transaction

LINE_ITEM_COLUMNS = ["date", "period", "product_id", "quantity"]


def plain_timestamp(value) -> pd.Timestamp:
    """Parse a datetime, date or ISO string into a naive Timestamp.

    Timezone-aware values keep their local wall-clock time so a sale is
    bucketed into the calendar month it was recorded in.
    """
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts


def line_items_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Flatten a transaction log into one row per line item.

    Columns: date, period (monthly pandas Period), product_id, quantity.
    The transactions themselves are only read.
    """
    records = [
        {"date": t.date, "product_id": item.product_id, "quantity": item.quantity}
        for t in transactions
        for item in t.items
    ]
    if not records:
        return pd.DataFrame(
            {
                "date": pd.Series(dtype="datetime64[ns]"),
                "period": pd.Series(dtype="period[M]"),
                "product_id": pd.Series(dtype="object"),
                "quantity": pd.Series(dtype="float64"),
            }
        )[LINE_ITEM_COLUMNS]

    df = pd.DataFrame.from_records(records)
    # parsed one value at a time so mixed ISO layouts and aware/naive values can share a ledger
    df["date"] = pd.to_datetime(df["date"].map(plain_timestamp))
    df["period"] = df["date"].dt.to_period("M")
    df["product_id"] = df["product_id"].astype(str)
    df["quantity"] = pd.to_numeric(df["quantity"]).astype(float)
    return df[LINE_ITEM_COLUMNS]
