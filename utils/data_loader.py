from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd

from utils.models import LineItem, Product, Supplier, Transaction
from utils.preprocess import plain_timestamp

REQUIRED_PRODUCT_FIELDS = {"id", "name", "unit", "current_stock"}
REQUIRED_TRANSACTION_COLUMNS = {"date", "transaction_id", "product_id", "quantity"}


def _read_json(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def product_from_dict(data: Dict[str, Any]) -> Product:
    missing = REQUIRED_PRODUCT_FIELDS - set(data)
    if missing:
        raise ValueError(f"Product {data.get('id', '?')} missing required fields: {missing}")
    return Product(
        id=str(data["id"]),
        name=str(data["name"]),
        unit=str(data["unit"]),
        current_stock=float(data["current_stock"]),
        best_n=data.get("best_n"),
        supplier_id=str(data["supplier_id"]) if data.get("supplier_id") is not None else None,
    )


def transaction_from_dict(data: Dict[str, Any]) -> Transaction:
    if "date" not in data or "items" not in data:
        raise ValueError("Transaction entries need 'date' and 'items'")
    items = [LineItem(product_id=str(i["product_id"]), quantity=float(i["quantity"])) for i in data["items"]]
    return Transaction(date=data["date"], items=items)


def load_catalog_json(path: str | Path) -> Tuple[List[Product], List[Supplier]]:
    data = _read_json(path)
    if not isinstance(data, dict) or "products" not in data:
        raise ValueError("Catalog JSON must be an object with a 'products' list")
    products = [product_from_dict(p) for p in data["products"]]
    suppliers = [Supplier(id=str(s["id"]), name=str(s["name"])) for s in data.get("suppliers", [])]
    return products, suppliers


def load_transactions_json(path: str | Path) -> List[Transaction]:
    data = _read_json(path)
    # Expect list of transactions or {'transactions': [...]}
    if isinstance(data, dict) and "transactions" in data:
        data = data["transactions"]
    if not isinstance(data, list):
        raise ValueError("Transactions JSON must contain a list or {'transactions': [...]} structure")
    return [transaction_from_dict(t) for t in data]


def load_transactions_csv(path: str | Path) -> List[Transaction]:
    """Flat line-item rows (date, transaction_id, product_id, quantity) grouped into transactions."""
    df = pd.read_csv(path, dtype={"transaction_id": str, "product_id": str})
    missing = REQUIRED_TRANSACTION_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"CSV missing required columns: {missing}")
    df["date"] = pd.to_datetime(df["date"].map(plain_timestamp))
    df["quantity"] = pd.to_numeric(df["quantity"], errors="coerce")
    df = df[df["quantity"] > 0]

    transactions = []
    for _, grp in df.groupby("transaction_id", sort=False):
        items = [LineItem(product_id=r.product_id, quantity=float(r.quantity)) for r in grp.itertuples()]
        transactions.append(Transaction(date=grp["date"].iloc[0].to_pydatetime(), items=items))
    return transactions


def load_transactions(path: str | Path) -> List[Transaction]:
    if str(path).lower().endswith(".csv"):
        return load_transactions_csv(path)
    return load_transactions_json(path)
