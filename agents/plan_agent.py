from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import pandas as pd

from utils.calculations import order_quantity
from utils.models import PlanRow, Product, Supplier, Transaction
from utils.periods import LookbackWindow, TargetPeriod, lookback_window
from utils.preprocess import line_items_frame

from .demand_agent import DemandAgent
from .forecast_agent import ForecastAgent
from .report_agent import ReportAgent
from .safety_stock_agent import SafetyStockAgent

logger = logging.getLogger(__name__)


class PlanAgent:
    """
    Purchase planning agent.

    Per product: monthly demand over the lookback window -> moving-average
    forecast and safety stock -> order quantity. Rows are then joined with
    suppliers, filtered and ranked. Nothing is cached between calls and the
    inputs are never modified.
    """

    def __init__(
        self,
        demand_agent: Optional[DemandAgent] = None,
        forecast_agent: Optional[ForecastAgent] = None,
        safety_agent: Optional[SafetyStockAgent] = None,
        report_agent: Optional[ReportAgent] = None,
    ):
        self.demand_agent = demand_agent or DemandAgent()
        self.forecast_agent = forecast_agent or ForecastAgent()
        self.safety_agent = safety_agent or SafetyStockAgent()
        self.report_agent = report_agent or ReportAgent()

    def plan_row(self, product: Product, items: pd.DataFrame, window: LookbackWindow) -> PlanRow:
        series = self.demand_agent.monthly_demand(items, product.id, window)
        demands = series.demands
        forecast = self.forecast_agent.forecast_units(demands, product.best_n)
        safety = self.safety_agent.compute(demands)
        qty = order_quantity(forecast, safety, product.current_stock)
        logger.debug(
            "product %s: forecast=%d safety_stock=%d stock=%s order=%d",
            product.id, forecast, safety, product.current_stock, qty,
        )
        return PlanRow(
            product=product,
            forecast=forecast,
            safety_stock=safety,
            order_quantity=qty,
            data_months=series.data_months,
        )

    def plan(
        self,
        products: Iterable[Product],
        transactions: Iterable[Transaction],
        suppliers: Iterable[Supplier],
        target_month: int,
        target_year: int,
        search_query: str = "",
    ) -> List[PlanRow]:
        period = TargetPeriod(target_month, target_year)
        window = lookback_window(period)
        items = line_items_frame(transactions)

        rows = [self.plan_row(p, items, window) for p in products]
        ranked = self.report_agent.rank(rows, suppliers, search_query)
        logger.info(
            "Purchase plan for %s (%s): %d products, %d shown, %d to reorder",
            period.label(), window.label(), len(rows), len(ranked),
            sum(1 for r in ranked if r.order_quantity > 0),
        )
        return ranked


def compute_purchase_plan(
    products: Iterable[Product],
    transactions: Iterable[Transaction],
    suppliers: Iterable[Supplier],
    target_month: int,
    target_year: int,
    search_query: str = "",
) -> List[PlanRow]:
    return PlanAgent().plan(products, transactions, suppliers, target_month, target_year, search_query)
