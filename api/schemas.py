from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from utils.models import LineItem, Product, Supplier, Transaction


class SupplierIn(BaseModel):
    id: str
    name: str

    def to_model(self) -> Supplier:
        return Supplier(id=self.id, name=self.name)


class ProductIn(BaseModel):
    id: str
    name: str
    unit: str
    current_stock: float = Field(ge=0)
    best_n: Optional[int] = None
    supplier_id: Optional[str] = None

    def to_model(self) -> Product:
        return Product(**self.model_dump())


class LineItemIn(BaseModel):
    product_id: str
    quantity: float = Field(gt=0)


class TransactionIn(BaseModel):
    date: datetime
    items: List[LineItemIn]

    def to_model(self) -> Transaction:
        return Transaction(
            date=self.date,
            items=[LineItem(product_id=i.product_id, quantity=i.quantity) for i in self.items],
        )


class PlanRequest(BaseModel):
    products: List[ProductIn]
    transactions: List[TransactionIn] = []
    suppliers: List[SupplierIn] = []
    target_month: Optional[int] = Field(default=None, ge=0, le=11)
    target_year: Optional[int] = None
    search_query: str = ""


class PlanRowOut(BaseModel):
    product_id: str
    name: str
    unit: str
    current_stock: float
    supplier: Optional[str] = None
    forecast: int
    safety_stock: int
    order_quantity: int
    data_months: int
    low_confidence: bool


class PeriodOut(BaseModel):
    month: int
    year: int
    label: str
    window_start: str
    window_end: str
    window_label: str


class PlanResponse(BaseModel):
    period: PeriodOut
    count: int
    rows: List[PlanRowOut]

