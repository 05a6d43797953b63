import json

import pandas as pd
import pytest

from utils.data_loader import load_catalog_json, load_transactions, load_transactions_csv


def test_load_catalog_json(tmp_path):
	p = tmp_path / "catalog.json"
	p.write_text(json.dumps({
		"products": [
			{"id": 1, "name": "Rice", "unit": "sack", "current_stock": 4, "best_n": 3, "supplier_id": "s1"},
			{"id": "p2", "name": "Salt", "unit": "kg", "current_stock": 0},
		],
		"suppliers": [{"id": "s1", "name": "Acme"}],
	}), encoding="utf-8")
	products, suppliers = load_catalog_json(p)
	assert [pr.id for pr in products] == ["1", "p2"]
	assert products[0].best_n == 3 and products[0].supplier_id == "s1"
	assert products[1].supplier_id is None
	assert suppliers[0].name == "Acme"


def test_catalog_missing_fields(tmp_path):
	p = tmp_path / "catalog.json"
	p.write_text(json.dumps({"products": [{"id": "x", "name": "Rice"}]}), encoding="utf-8")
	with pytest.raises(ValueError):
		load_catalog_json(p)


def test_load_transactions_csv_groups_line_items(tmp_path):
	p = tmp_path / "tx.csv"
	pd.DataFrame({
		'date': ['2024-01-05', '2024-01-05', '2024-02-10'],
		'transaction_id': ['t1', 't1', 't2'],
		'product_id': ['A', 'B', 'A'],
		'quantity': [2, 3, 4],
	}).to_csv(p, index=False)
	txns = load_transactions_csv(p)
	assert len(txns) == 2
	assert [i.product_id for i in txns[0].items] == ['A', 'B']
	assert txns[1].items[0].quantity == 4.0


def test_load_transactions_csv_missing_columns(tmp_path):
	p = tmp_path / "tx.csv"
	pd.DataFrame({'date': ['2024-01-05'], 'product_id': ['A']}).to_csv(p, index=False)
	with pytest.raises(ValueError):
		load_transactions_csv(p)


def test_load_transactions_json(tmp_path):
	p = tmp_path / "tx.json"
	p.write_text(json.dumps({"transactions": [
		{"date": "2024-03-01", "items": [{"product_id": "A", "quantity": 1}]},
	]}), encoding="utf-8")
	txns = load_transactions(p)
	assert len(txns) == 1 and txns[0].items[0].product_id == "A"


def test_load_transactions_csv_mixed_date_layouts(tmp_path):
	p = tmp_path / "tx.csv"
	pd.DataFrame({
		'date': ['2024-01-05', '2024-02-10T08:15:00'],
		'transaction_id': ['t1', 't2'],
		'product_id': ['A', 'A'],
		'quantity': [2, 4],
	}).to_csv(p, index=False)
	txns = load_transactions_csv(p)
	assert [t.date.month for t in txns] == [1, 2]
