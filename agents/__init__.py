"""Top-level agents package for the purchase planner.

Exposes the demand, forecasting, safety stock, reporting and planning agents
used by the CLI and the API.
"""

from .demand_agent import DemandAgent
from .forecast_agent import ForecastAgent
from .safety_stock_agent import SafetyStockAgent
from .report_agent import ReportAgent
from .plan_agent import PlanAgent, compute_purchase_plan
