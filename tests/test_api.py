"""
Calculation API tests.

Tests:
1.    Health check
2.    Rule listing
3.    Sample endpoint
4-5.  Posted tables
6-11. Error mapping (404 / 422)
"""

import pytest


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "tablecalc"}


def test_list_rules(client):
    resp = client.get("/api/calculations/rules")
    assert resp.status_code == 200
    assert "sample" in resp.json()["rules"]


def test_sample_endpoint_total(client):
    resp = client.get("/api/calculations/sample")
    assert resp.status_code == 200
    data = resp.json()
    assert data["rule"] == "sample"
    assert data["row_count"] == 10000
    assert data["total"] == pytest.approx(70000.0)


def test_post_table_returns_allocations(client):
    resp = client.post("/api/calculations/sample", json={
        "size": 3,
        "columns": {"quantity": [10.0, 20.0, 30.0], "price": [1.0, 2.0, 0.5]},
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["row_count"] == 3
    assert data["allocations"] == pytest.approx([0.7, 2.8, 1.05])
    assert data["total"] == pytest.approx(4.55)


def test_post_table_size_defaults_to_shortest_column(client):
    resp = client.post("/api/calculations/sample", json={
        "columns": {"quantity": [1.0, 1.0, 1.0], "price": [100.0, 100.0]},
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["row_count"] == 2
    assert len(data["allocations"]) == 2


def test_unknown_rule_is_404(client):
    resp = client.post("/api/calculations/nonexistent_rule", json={"columns": {}})
    assert resp.status_code == 404
    assert "nonexistent_rule" in resp.json()["detail"]


def test_missing_column_is_404(client):
    resp = client.post("/api/calculations/sample", json={
        "columns": {"quantity": [1.0, 2.0]},
    })
    assert resp.status_code == 404
    assert "price" in resp.json()["detail"]


def test_short_column_is_422(client):
    resp = client.post("/api/calculations/sample", json={
        "size": 5,
        "columns": {"quantity": [1.0] * 5, "price": [1.0] * 4},
    })
    assert resp.status_code == 422
    assert "price" in resp.json()["detail"]


def test_negative_size_is_422(client):
    resp = client.post("/api/calculations/sample", json={
        "size": -1,
        "columns": {"quantity": [1.0], "price": [1.0]},
    })
    assert resp.status_code == 422


def test_strict_setting_length_mismatch_is_422(client, monkeypatch):
    from tablecalc.config import settings
    monkeypatch.setattr(settings, "STRICT_COLUMN_LENGTHS", True)
    resp = client.post("/api/calculations/sample", json={
        "columns": {"quantity": [1.0, 2.0], "price": [1.0]},
    })
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert "quantity" in detail and "price" in detail


def test_overflowing_allocation_is_422(client):
    """quantity × price past float range must not come back as null."""
    resp = client.post("/api/calculations/sample", json={
        "columns": {"quantity": [1e308], "price": [1e308]},
    })
    assert resp.status_code == 422
    assert "non-finite" in resp.json()["detail"]
