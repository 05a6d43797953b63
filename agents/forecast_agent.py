from __future__ import annotations

from typing import Optional, Sequence

from utils.calculations import ceil_units
from utils.config import DEFAULT_FORECAST_WINDOW


def resolve_window(best_n: Optional[int], default: int = DEFAULT_FORECAST_WINDOW) -> int:
    """Forecast window for a product; absent or non-positive values fall back to the default."""
    try:
        n = int(best_n)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return n if n > 0 else default


class ForecastAgent:
    """
    Forecasting agent.

    Projects next-period demand as the simple moving average of the most recent
    ``n`` monthly demand values. A series shorter than ``n`` is averaged as a
    whole; an empty series forecasts 0.
    """

    def __init__(self, window: int = DEFAULT_FORECAST_WINDOW):
        self.window = resolve_window(window)

    def forecast(self, demands: Sequence[float], n: Optional[int] = None) -> float:
        n = resolve_window(n, default=self.window)
        recent = list(demands)[-n:]
        if not recent:
            return 0.0
        return sum(recent) / len(recent)

    def forecast_units(self, demands: Sequence[float], n: Optional[int] = None) -> int:
        # order quantities are whole units, so a demand forecast is never rounded down
        return ceil_units(self.forecast(demands, n))
