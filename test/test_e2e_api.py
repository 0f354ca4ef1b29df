# Test type: End-to-End (E2E) API
# Validation to be executed: Full HTTP round-trip for every API endpoint
# Command: pytest test/test_e2e_api.py -v

"""End-to-end tests that exercise every API endpoint via HTTP using the ASGI
transport (no real server process required).  These tests verify request/
response contracts, status codes, and payload shapes.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.anyio


BASE = "/api/v1"


# ══════════════════════════════════════════════════════════════════════════
# 1.  Health Check
# ══════════════════════════════════════════════════════════════════════════


async def test_health_check(client):
    """GET /health returns 200 with healthy status."""
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


# ══════════════════════════════════════════════════════════════════════════
# 2.  GET /regimes
# ══════════════════════════════════════════════════════════════════════════


async def test_regimes_catalogue(client):
    resp = await client.get(f"{BASE}/regimes")
    assert resp.status_code == 200
    data = resp.json()

    keys = [r["key"] for r in data["regimes"]]
    assert keys == ["current", "proposed"]
    assert data["cessRate"] == 0.04
    assert len(data["surchargeSlabs"]) == 5


async def test_regimes_open_ended_slab_is_null(client):
    data = (await client.get(f"{BASE}/regimes")).json()
    current = data["regimes"][0]
    assert len(current["slabs"]) == 6
    assert current["slabs"][-1]["upperBound"] is None
    assert current["slabs"][-1]["rangeLabel"] == "₹15,00,000 - ∞"
    assert current["rebateEligibilityLimit"] == 700_000
    assert current["maxRebate"] == 25_000
    assert current["standardDeduction"] == 50_000


# ══════════════════════════════════════════════════════════════════════════
# 3.  POST /tax:compute
# ══════════════════════════════════════════════════════════════════════════


async def test_compute_current(client):
    resp = await client.post(f"{BASE}/tax:compute", json={"income": 1_500_000, "regime": "current"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["taxableIncome"] == 1_450_000
    assert data["baseTax"] == pytest.approx(140_000)
    assert data["cess"] == pytest.approx(5_600)
    assert data["totalTax"] == pytest.approx(145_600)
    assert len(data["slabwiseTax"]) == 5
    assert set(data["slabwiseTax"][0]) == {"rangeLabel", "ratePercent", "amount"}


async def test_compute_defaults_to_current(client):
    resp = await client.post(f"{BASE}/tax:compute", json={"income": 1_500_000})
    assert resp.status_code == 200
    assert resp.json()["totalTax"] == pytest.approx(145_600)


async def test_compute_proposed_text_income(client):
    resp = await client.post(
        f"{BASE}/tax:compute", json={"income": "15,00,000", "regime": "proposed"}
    )
    assert resp.status_code == 200
    assert resp.json()["totalTax"] == pytest.approx(101_400)


async def test_compute_garbage_income_is_zero(client):
    resp = await client.post(f"{BASE}/tax:compute", json={"income": "n/a"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["totalTax"] == 0
    assert data["effectiveRatePercent"] == 0


async def test_compute_missing_income_is_zero(client):
    resp = await client.post(f"{BASE}/tax:compute", json={})
    assert resp.status_code == 200
    assert resp.json()["totalTax"] == 0


async def test_compute_unknown_regime_returns_404(client):
    resp = await client.post(f"{BASE}/tax:compute", json={"income": 100, "regime": "old"})
    assert resp.status_code == 404
    assert "Unknown tax regime" in resp.json()["detail"]


async def test_compute_malformed_body_returns_422(client):
    resp = await client.post(f"{BASE}/tax:compute", json={"income": [1, 2]})
    assert resp.status_code == 422


# ══════════════════════════════════════════════════════════════════════════
# 4.  POST /tax:compare
# ══════════════════════════════════════════════════════════════════════════


async def test_compare_15L(client):
    resp = await client.post(f"{BASE}/tax:compare", json={"income": 1_500_000})
    assert resp.status_code == 200
    data = resp.json()
    assert data["income"] == 1_500_000
    assert data["current"]["totalTax"] == pytest.approx(145_600)
    assert data["proposed"]["totalTax"] == pytest.approx(101_400)
    assert data["savings"] == pytest.approx(44_200)
    assert data["verdict"] == "proposed"


@pytest.mark.parametrize("income", ["Rs. 15,00,000", "Rs.15,00,000", "₹15,00,000"])
async def test_compare_rupee_prefixed_text(client, income):
    resp = await client.post(f"{BASE}/tax:compare", json={"income": income})
    assert resp.status_code == 200
    data = resp.json()
    assert data["income"] == 1_500_000
    assert data["savings"] == pytest.approx(44_200)
    assert data["verdict"] == "proposed"


async def test_compare_zero(client):
    resp = await client.post(f"{BASE}/tax:compare", json={"income": 0})
    data = resp.json()
    assert data["verdict"] == "equal"
    assert data["current"]["effectiveRatePercent"] == 0


# ══════════════════════════════════════════════════════════════════════════
# 5.  GET /performance
# ══════════════════════════════════════════════════════════════════════════


async def test_performance_endpoint(client):
    """Performance endpoint returns valid metrics."""
    resp = await client.get(f"{BASE}/performance")
    assert resp.status_code == 200
    data = resp.json()

    assert "MB" in data["memory"]
    assert data["threads"] >= 1
    parts = data["time"].split(":")
    assert len(parts) == 3  # HH:mm:ss.SSS
    assert "." in parts[2]


async def test_response_time_header(client):
    resp = await client.get("/health")
    assert "x-response-time-ms" in resp.headers
