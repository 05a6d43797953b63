"""CLI / programmatic orchestrator for the purchase planner."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd
from agents import PlanAgent, ReportAgent
from utils.config import LOG_LEVEL, LOW_CONFIDENCE_MONTHS
from utils.data_loader import load_catalog_json, load_transactions
from utils.periods import default_target_period, lookback_window

logger = logging.getLogger(__name__)


def run_pipeline(
    catalog_path: str,
    transactions_path: str,
    month: Optional[int] = None,
    year: Optional[int] = None,
    query: str = "",
) -> pd.DataFrame:
    products, suppliers = load_catalog_json(catalog_path)
    transactions = load_transactions(transactions_path)

    period = default_target_period().set(month=month, year=year)
    rows = PlanAgent().plan(products, transactions, suppliers, period.month, period.year, query)
    return ReportAgent().to_frame(rows)


def _low_confidence_names(df: pd.DataFrame) -> List[str]:
    return df.loc[df["low_confidence"].astype(bool), "name"].tolist()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Compute a purchase plan for a target month")
    parser.add_argument("catalog", help="Path to catalog JSON (products + suppliers)")
    parser.add_argument("transactions", help="Path to transactions JSON or CSV")
    parser.add_argument("--month", type=int, default=None, help="Target month, 0 = January (default: next month)")
    parser.add_argument("--year", type=int, default=None, help="Target year (default: next month's year)")
    parser.add_argument("--query", default="", help="Filter by product, supplier or unit")
    parser.add_argument("--out", default="outputs/purchase_plan.csv", help="Output CSV path")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    period = default_target_period().set(month=args.month, year=args.year)
    df = run_pipeline(args.catalog, args.transactions, period.month, period.year, args.query)
    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.out, index=False)
    for name in _low_confidence_names(df):
        logger.warning("Low confidence forecast for %s: fewer than %d months of data", name, LOW_CONFIDENCE_MONTHS)
    print(f"Plan for {period.label()} ({lookback_window(period).label()}) written to {args.out}")
