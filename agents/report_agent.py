from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

import pandas as pd

from utils.models import PlanRow, Supplier

PLAN_COLUMNS = [
    "product_id", "name", "unit", "current_stock", "supplier",
    "forecast", "safety_stock", "order_quantity", "data_months", "low_confidence",
]


class ReportAgent:
    """Joins supplier metadata onto plan rows, applies the search filter and ranks by order quantity."""

    def attach_suppliers(self, rows: Iterable[PlanRow], suppliers: Iterable[Supplier]) -> List[PlanRow]:
        by_id = {}
        for s in suppliers:
            # first supplier wins on duplicate ids
            by_id.setdefault(str(s.id), s)
        joined = []
        for row in rows:
            sid = row.product.supplier_id
            supplier = by_id.get(str(sid)) if sid is not None else None
            joined.append(replace(row, supplier=supplier))
        return joined

    def filter(self, rows: Iterable[PlanRow], query: Optional[str] = "") -> List[PlanRow]:
        rows = list(rows)
        if not query or not query.strip():
            return rows
        q = query.lower()
        return [
            r for r in rows
            if q in r.product.name.lower()
            or (r.supplier is not None and q in r.supplier.name.lower())
            or q in r.product.unit.lower()
        ]

    def rank(self, rows: Iterable[PlanRow], suppliers: Iterable[Supplier], query: Optional[str] = "") -> List[PlanRow]:
        """
        Args:
            rows: computed plan rows in catalog order
            suppliers: supplier reference data
            query: optional case-insensitive search string
        Returns:
            filtered rows, order_quantity descending; ties keep catalog order
        """
        rows = self.filter(self.attach_suppliers(rows, suppliers), query)
        # sorted() is stable
        return sorted(rows, key=lambda r: r.order_quantity, reverse=True)

    def to_frame(self, rows: Iterable[PlanRow]) -> pd.DataFrame:
        return pd.DataFrame([r.to_dict() for r in rows], columns=PLAN_COLUMNS)
