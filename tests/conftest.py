import json

import pytest


SCENARIO_ITEMS = [
    {"title": "Red Mug", "category": "Kitchen", "price": 10},
    {"title": "Blue Mug", "category": "Kitchen", "price": 5},
    {"name": "Desk Lamp", "category": "Office", "price": 20},
]


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def catalog_path(tmp_path, monkeypatch):
    """An empty ``catalog/`` folder in a fresh working directory."""
    path = tmp_path / "catalog"
    path.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CATALOG_DIR", raising=False)
    return path


@pytest.fixture
def scenario_catalog(catalog_path):
    write_json(catalog_path / "products.json", SCENARIO_ITEMS)
    return catalog_path
