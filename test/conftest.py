# Test type: Configuration
# Validation to be executed: Shared fixtures for all test modules
# Command: pytest test/ -v (this file is auto-loaded by pytest)

"""Shared pytest fixtures for the Tax Regime Comparator test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.models.regimes import REGIMES


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client bound to the FastAPI app (no real server needed)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


# ── Regime fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def current_regime():
    return REGIMES["current"]


@pytest.fixture
def proposed_regime():
    return REGIMES["proposed"]


@pytest.fixture
def sample_incomes():
    """Incomes spanning every slab and surcharge tier."""
    return [
        0, 1, 49_999, 50_000, 350_000, 650_000, 750_000, 750_001, 1_000_000,
        1_250_000, 1_250_001, 1_500_000, 2_500_000, 5_000_000, 5_000_001,
        10_000_000, 20_000_000, 50_000_000, 75_000_000,
    ]
