from __future__ import annotations

import math

from scipy.stats import norm

# Rounding guard so float noise (e.g. 3.0000000000000004) is not ceiled up a unit
_PRECISION = 6


def ceil_units(value: float) -> int:
    return int(math.ceil(round(value, _PRECISION)))


def z_for_service_level(service_level: float) -> float:
    if not 0 < service_level < 1:
        raise ValueError(f"service_level must be between 0 and 1 (exclusive), got {service_level}")
    return float(norm.ppf(service_level))


def safety_stock(demand_std: float, z: float) -> int:
    return max(ceil_units(z * demand_std), 0)


def order_quantity(forecast: int, safety_stock_value: int, current_stock: float) -> int:
    """Units to buy so that on-hand stock covers forecast plus buffer; 0 means do not reorder."""
    return max(0, ceil_units(forecast + safety_stock_value - current_stock))
