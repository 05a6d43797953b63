from __future__ import annotations

import logging
from typing import Iterable, Union

import pandas as pd

from utils.models import DemandSeries, MonthlyDemand, Transaction
from utils.periods import LookbackWindow
from utils.preprocess import line_items_frame

logger = logging.getLogger(__name__)


class DemandAgent:
    """
    Transaction aggregation agent.

    Buckets one product's line-item quantities into a contiguous monthly demand
    series covering the whole lookback window. Months without transactions are
    zero-filled so the series length is fixed; ``data_months`` counts the months
    that were actually observed.
    """

    def monthly_demand(
        self,
        items: Union[pd.DataFrame, Iterable[Transaction]],
        product_id: str,
        window: LookbackWindow,
    ) -> DemandSeries:
        """
        Args:
            items: line-item frame from ``line_items_frame`` or a raw transaction list
            product_id: product to aggregate
            window: inclusive lookback window
        Returns:
            DemandSeries with one MonthlyDemand per window month, oldest first
        """
        if not isinstance(items, pd.DataFrame):
            items = line_items_frame(items)

        periods = pd.PeriodIndex(window.periods(), freq="M")
        # comparing monthly periods keeps the whole last day of the window inclusive
        mask = (
            (items["product_id"] == str(product_id))
            & (items["period"] >= window.first_period)
            & (items["period"] <= window.last_period)
        )
        matched = items.loc[mask]

        monthly = matched.groupby("period")["quantity"].sum().reindex(periods, fill_value=0.0)
        observed = matched.groupby("period").size().reindex(periods, fill_value=0)
        data_months = int((observed > 0).sum())

        months = [
            MonthlyDemand(year=p.year, month=p.month, demand=float(q))
            for p, q in monthly.items()
        ]
        logger.debug(
            "product %s: %d line items across %d observed months in %s",
            product_id, len(matched), data_months, window.label(),
        )
        return DemandSeries(months=months, data_months=data_months)
