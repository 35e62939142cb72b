"""
Tests for `scripts/seed_transactions.py` record parsing and loading.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from scripts.seed_transactions import load_source, parse_records


def _record(id: int, **overrides) -> dict:
    record = {
        "id": id,
        "title": "Fjallraven Backpack",
        "description": "Your perfect pack for everyday use",
        "price": 329.85,
        "category": "men's clothing",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
        "image": "https://example.com/1.jpg",
    }
    record.update(overrides)
    return record


def test_parse_records_accepts_source_shape() -> None:
    result = parse_records([_record(1), _record(2, price=0)])

    assert result.total_records == 2
    assert [t.id for t in result.valid] == [1, 2]
    assert result.valid[0].price == Decimal("329.85")
    assert result.errors == []


@pytest.mark.parametrize(
    "bad",
    [
        _record(3, price=-1),
        _record(3, price="abc"),
        _record(3, dateOfSale="not a date"),
        {"title": "no id", "price": 1, "dateOfSale": "2021-01-01T00:00:00Z"},
        "not an object",
    ],
)
def test_parse_records_reports_invalid_records(bad) -> None:
    result = parse_records([_record(1), bad])

    assert [t.id for t in result.valid] == [1]
    assert len(result.errors) == 1
    assert result.errors[0]["index"] == 1


def test_parse_records_rejects_duplicate_ids() -> None:
    result = parse_records([_record(1), _record(1, title="Other")])

    assert len(result.valid) == 1
    assert "duplicate" in result.errors[0]["error"]


def test_load_source_reads_json_file(tmp_path: Path) -> None:
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps([_record(1)]), encoding="utf-8")

    assert load_source(str(path))[0]["id"] == 1


def test_load_source_requires_array(tmp_path: Path) -> None:
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_source(str(path))
