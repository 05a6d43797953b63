from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from utils.calculations import safety_stock, z_for_service_level
from utils.config import DEFAULT_SERVICE_LEVEL, SAFETY_STOCK_Z


class SafetyStockAgent:
    """Sizes a safety buffer as z times the sample standard deviation of monthly demand."""

    def __init__(self, service_level: float = DEFAULT_SERVICE_LEVEL, z: Optional[float] = SAFETY_STOCK_Z):
        self.service_level = service_level
        self.z = float(z) if z is not None else z_for_service_level(service_level)

    def demand_std(self, demands: Sequence[float]) -> float:
        values = np.asarray(demands, dtype=float)
        if values.size < 2:
            return 0.0
        return float(values.std(ddof=1))

    def compute(self, demands: Sequence[float]) -> int:
        """
        Args:
            demands: full monthly demand series, zero-filled months included
        Returns:
            safety stock in whole units, never negative
        """
        return safety_stock(self.demand_std(demands), self.z)
