from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from utils.config import LOW_CONFIDENCE_MONTHS


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str


@dataclass(frozen=True)
class LineItem:
    product_id: str
    quantity: float


@dataclass(frozen=True)
class Transaction:
    date: Union[datetime, date, str]
    items: List[LineItem] = field(default_factory=list)


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    unit: str
    current_stock: float
    best_n: Optional[int] = None
    supplier_id: Optional[str] = None


@dataclass(frozen=True)
class MonthlyDemand:
    year: int
    month: int  # calendar month, 1-12
    demand: float


@dataclass
class DemandSeries:
    months: List[MonthlyDemand]
    data_months: int

    @property
    def demands(self) -> List[float]:
        return [m.demand for m in self.months]


@dataclass
class PlanRow:
    product: Product
    forecast: int
    safety_stock: int
    order_quantity: int
    data_months: int
    supplier: Optional[Supplier] = None

    @property
    def low_confidence(self) -> bool:
        return self.data_months < LOW_CONFIDENCE_MONTHS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product.id,
            "name": self.product.name,
            "unit": self.product.unit,
            "current_stock": self.product.current_stock,
            "supplier": self.supplier.name if self.supplier else None,
            "forecast": self.forecast,
            "safety_stock": self.safety_stock,
            "order_quantity": self.order_quantity,
            "data_months": self.data_months,
            "low_confidence": self.low_confidence,
        }
