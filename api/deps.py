from __future__ import annotations

from agents.forecast_agent import ForecastAgent
from agents.plan_agent import PlanAgent
from agents.safety_stock_agent import SafetyStockAgent
from utils.config import (
    DEFAULT_FORECAST_WINDOW,
    DEFAULT_SERVICE_LEVEL,
    SAFETY_STOCK_Z,
)


def get_forecast_agent():
    return ForecastAgent(window=DEFAULT_FORECAST_WINDOW)


def get_safety_agent():
    return SafetyStockAgent(service_level=DEFAULT_SERVICE_LEVEL, z=SAFETY_STOCK_Z)


def get_plan_agent():
    return PlanAgent(forecast_agent=get_forecast_agent(), safety_agent=get_safety_agent())
